"""Tests for the Catalogue mapping."""

import pytest

from basketsplit.catalogue import Catalogue
from basketsplit.exceptions import ConfigLoadError

from .fixtures import STORE_CATALOGUE


class TestLookup:
    """Tests for looking up products."""

    def test_known_product(self):
        catalogue = Catalogue(STORE_CATALOGUE)
        assert catalogue.get('Steak (300g)') == ('Express Collection', 'Courier')

    def test_unknown_product_is_none(self):
        """Test that unknown products are signalled with None, not an empty tuple."""
        catalogue = Catalogue(STORE_CATALOGUE)
        assert catalogue.get('Caviar') is None
        assert 'Caviar' not in catalogue

    def test_known_product_without_methods(self):
        """Test that a product without methods is distinct from an unknown one."""
        catalogue = Catalogue(STORE_CATALOGUE)
        assert catalogue.get('Empty Promise') == ()
        assert 'Empty Promise' in catalogue

    def test_getitem_unknown_raises_key_error(self):
        with pytest.raises(KeyError):
            Catalogue(STORE_CATALOGUE)['Caviar']

    def test_mapping_interface(self):
        catalogue = Catalogue(STORE_CATALOGUE)
        assert len(catalogue) == len(STORE_CATALOGUE)
        assert list(catalogue) == list(STORE_CATALOGUE)

    def test_duplicate_methods_collapsed(self):
        """Test that repeated methods keep only their first occurrence."""
        catalogue = Catalogue({'A': ['parcel', 'courier', 'parcel']})
        assert catalogue['A'] == ('parcel', 'courier')

    def test_methods_sorted_and_distinct(self):
        catalogue = Catalogue({'A': ['parcel', 'courier'], 'B': ['courier']})
        assert catalogue.methods == ['courier', 'parcel']

    def test_unassignable_products(self):
        catalogue = Catalogue(STORE_CATALOGUE)
        assert catalogue.unassignable == ('Empty Promise',)

    def test_repr(self):
        catalogue = Catalogue({'A': ['parcel']}, source='config.json')
        assert repr(catalogue) == "Catalogue(source='config.json', products=1)"


class TestImmutability:
    """Tests that a catalogue cannot change after construction."""

    def test_source_data_changes_not_reflected(self):
        data = {'A': ['parcel']}
        catalogue = Catalogue(data)
        data['A'].append('courier')
        data['B'] = ['courier']
        assert catalogue['A'] == ('parcel',)
        assert 'B' not in catalogue

    def test_no_item_assignment(self):
        catalogue = Catalogue({'A': ['parcel']})
        with pytest.raises(TypeError):
            catalogue['B'] = ('courier',)


class TestValidation:
    """Tests for rejecting malformed catalogue data."""

    @pytest.mark.parametrize(
        'data',
        [
            ['A', 'B'],
            'not a catalogue',
            None,
            {'A': 'courier'},
            {'A': None},
            {'A': [1, 2]},
            {'A': [{'name': 'courier'}]},
        ],
    )
    def test_malformed_data_rejected(self, data):
        with pytest.raises(ConfigLoadError):
            Catalogue(data)

    def test_error_names_source(self):
        with pytest.raises(ConfigLoadError) as exc_info:
            Catalogue({'A': None}, source='config.json')
        assert exc_info.value.source == 'config.json'
        assert "Failed to load catalogue from 'config.json'" in str(exc_info.value)
        assert exc_info.value.cause is not None

    def test_strict_rejects_products_without_methods(self):
        with pytest.raises(ConfigLoadError) as exc_info:
            Catalogue(STORE_CATALOGUE, strict=True)
        assert 'Empty Promise' in str(exc_info.value)

    def test_strict_accepts_complete_catalogue(self):
        catalogue = Catalogue({'A': ['parcel']}, strict=True)
        assert catalogue.unassignable == ()

    def test_empty_catalogue_allowed(self):
        assert len(Catalogue({})) == 0
