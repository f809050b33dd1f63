"""basketsplit - Split shopping baskets into delivery groups.

Every product in a basket is assigned to exactly one delivery method able to
carry it, keeping the number of delivery groups small and the groups large.
The assignment is a deterministic greedy approximation: the method covering
the most unassigned products is picked first, ties going to the method whose
name sorts first.

Quick Start:
    >>> from basketsplit import BasketSplitter, Catalogue
    >>>
    >>> catalogue = Catalogue({
    ...     'Steak (300g)': ['Express Collection', 'Courier'],
    ...     'Carrots (1kg)': ['Express Collection'],
    ...     'Soda (24x330ml)': ['Courier'],
    ...     'Cold Beer (330ml)': ['Courier'],
    ... })
    >>> BasketSplitter(catalogue).split(
    ...     ['Steak (300g)', 'Carrots (1kg)', 'Soda (24x330ml)', 'Cold Beer (330ml)']
    ... )
    {'Courier': ['Steak (300g)', 'Soda (24x330ml)', 'Cold Beer (330ml)'], 'Express Collection': ['Carrots (1kg)']}

CLI Usage:
    $ basketsplit split basket.json --catalogue config.json
    $ basketsplit init  # Create a configuration file
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _package_version

from basketsplit.catalogue import Catalogue
from basketsplit.config import SplitConfig, get_config
from basketsplit.exceptions import (
    BasketLoadError,
    BasketSplitError,
    ConfigLoadError,
    ConfigurationError,
    OutputError,
    SourceLoadError,
)
from basketsplit.loader import SourceLoader, load_basket, load_catalogue
from basketsplit.output import ResultWriter
from basketsplit.splitter import BasketSplitter, SplitReport, split_basket

__all__ = [
    # Main classes
    'BasketSplitter',
    'Catalogue',
    'SplitReport',
    'SourceLoader',
    'ResultWriter',
    'split_basket',
    'load_catalogue',
    'load_basket',
    # Configuration
    'SplitConfig',
    'get_config',
    # Exceptions
    'BasketSplitError',
    'SourceLoadError',
    'ConfigLoadError',
    'BasketLoadError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = _package_version('basketsplit')
except PackageNotFoundError:
    __version__ = 'unknown'
