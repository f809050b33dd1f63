"""Product catalogue: which delivery methods can carry which product.

The catalogue is built once from a ``{product: [method, ...]}`` mapping
supplied by a loader (or by the caller directly) and is read-only afterwards,
so a single instance can be shared by any number of splitters and threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter, ValidationError

from basketsplit.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

_CATALOGUE_ADAPTER = TypeAdapter(dict[str, list[str]])


class Catalogue(Mapping[str, tuple[str, ...]]):
    """Immutable mapping from product name to its candidate delivery methods.

    Candidate lists keep their original order; repeated method names inside a
    single entry are collapsed to their first occurrence.

    Example:
        >>> catalogue = Catalogue({'Steak': ['Courier', 'Parcel locker']})
        >>> catalogue.get('Steak')
        ('Courier', 'Parcel locker')
        >>> catalogue.get('Caviar') is None
        True
    """

    def __init__(
        self, data: Any, source: str = '<memory>', strict: bool = False
    ) -> None:
        """Validate and freeze catalogue data.

        Args:
            data: Parsed catalogue document, expected to be a mapping of
                product name to a list of delivery method names.
            source: Where the data came from, used in error messages.
            strict: Reject products that list no delivery method at all.

        Raises:
            ConfigLoadError: If the data does not have the expected shape, or
                if ``strict`` is set and a product has no delivery method.
        """
        try:
            validated = _CATALOGUE_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise ConfigLoadError(source, cause=e) from e

        entries = {
            product: tuple(dict.fromkeys(methods))
            for product, methods in validated.items()
        }

        unassignable = tuple(product for product, methods in entries.items() if not methods)
        if unassignable and strict:
            raise ConfigLoadError(
                source,
                cause=ValueError(
                    f'products without a delivery method: {", ".join(unassignable)}'
                ),
            )

        self._entries = MappingProxyType(entries)
        self._unassignable = unassignable
        self._source = source
        logger.debug(f'Loaded catalogue from {source} with {len(entries)} products')

    @property
    def source(self) -> str:
        return self._source

    @property
    def methods(self) -> list[str]:
        """All distinct delivery methods, sorted by name."""
        return sorted({method for methods in self._entries.values() for method in methods})

    @property
    def unassignable(self) -> tuple[str, ...]:
        """Products present in the catalogue that no delivery method can carry."""
        return self._unassignable

    def get(self, product: str, default: Any = None) -> tuple[str, ...] | None:
        """Return the candidate methods for ``product``, or ``default`` if unknown.

        A known product with no methods returns an empty tuple, which is
        distinct from the ``None`` returned for an unknown product.
        """
        return self._entries.get(product, default)

    def __getitem__(self, product: str) -> tuple[str, ...]:
        return self._entries[product]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'Catalogue(source={self._source!r}, products={len(self)})'
