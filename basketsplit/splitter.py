"""Greedy assignment of basket items to delivery groups.

The splitter repeatedly picks the delivery method able to carry the largest
number of still-unassigned basket items and commits all of those items to
that method's group, until every assignable item has a group. This is the
classic greedy set-cover approximation: it keeps the number of groups small
and favours large groups, without promising a global optimum.

Ties between methods covering the same number of items are broken by method
name, lexicographically smallest first, so results are reproducible.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from basketsplit.catalogue import Catalogue
from basketsplit.loader import load_catalogue

logger = logging.getLogger(__name__)

# (product, candidate methods) for one basket entry awaiting assignment
WorkingSet = list[tuple[str, tuple[str, ...]]]


@dataclass
class SplitReport:
    """Outcome of splitting one basket.

    Attributes:
        groups: Delivery method -> products, keys in selection order and
            products in basket order.
        unknown: Basket entries missing from the catalogue, in basket order.
        unassignable: Basket entries the catalogue lists without any
            delivery method, in basket order.
    """

    groups: dict[str, list[str]] = field(default_factory=dict)
    unknown: list[str] = field(default_factory=list)
    unassignable: list[str] = field(default_factory=list)

    @property
    def assigned(self) -> int:
        return sum(len(products) for products in self.groups.values())

    @property
    def dropped(self) -> int:
        return len(self.unknown) + len(self.unassignable)


class BasketSplitter:
    """Splits baskets into delivery groups using a fixed catalogue.

    The splitter holds no per-call state; ``split`` may be called repeatedly
    and concurrently on the same instance.

    Example:
        >>> splitter = BasketSplitter(
        ...     Catalogue({'A': ['courier', 'parcel'], 'B': ['courier'], 'C': ['parcel']})
        ... )
        >>> splitter.split(['A', 'B', 'C'])
        {'courier': ['A', 'B'], 'parcel': ['C']}
    """

    def __init__(self, catalogue: Catalogue):
        self._catalogue = catalogue

    @classmethod
    def from_source(cls, source: str, strict: bool = False) -> BasketSplitter:
        """Build a splitter from a catalogue file path or URL.

        Raises:
            ConfigLoadError: If the catalogue cannot be loaded or is malformed.
        """
        return cls(load_catalogue(source, strict=strict))

    @property
    def catalogue(self) -> Catalogue:
        return self._catalogue

    def split(self, basket: Iterable[str]) -> dict[str, list[str]]:
        """Assign every known product in ``basket`` to a delivery group.

        Products missing from the catalogue, or listed without any delivery
        method, are left out of the result.

        Args:
            basket: Product names in basket order; duplicates are kept.

        Returns:
            Delivery method -> product names assigned to it.

        Raises:
            TypeError: If ``basket`` is a single string.
        """
        return self.split_report(basket).groups

    def split_report(self, basket: Iterable[str]) -> SplitReport:
        """Like ``split``, but also report which basket entries were dropped.

        Raises:
            TypeError: If ``basket`` is a single string instead of a collection
                of product names.
        """
        if isinstance(basket, str):
            raise TypeError(
                f'basket must be a collection of product names, not a string: {basket!r}'
            )
        report = SplitReport()
        working = self._build_working_set(basket, report)

        while working:
            method = self._select_method(self._count_occurrences(working))
            report.groups[method] = [
                product for product, candidates in working if method in candidates
            ]
            working = [entry for entry in working if method not in entry[1]]
            logger.debug(
                f'Selected {method!r} for {len(report.groups[method])} products, '
                f'{len(working)} left'
            )

        return report

    def _build_working_set(self, basket: Iterable[str], report: SplitReport) -> WorkingSet:
        working: WorkingSet = []
        for product in basket:
            candidates = self._catalogue.get(product)
            if candidates is None:
                report.unknown.append(product)
            elif not candidates:
                logger.warning(f'Product {product!r} has no delivery method, skipping')
                report.unassignable.append(product)
            else:
                working.append((product, candidates))
        return working

    @staticmethod
    def _count_occurrences(working: WorkingSet) -> Counter[str]:
        # Recomputed every round: one commit changes counts of unrelated methods.
        counts: Counter[str] = Counter()
        for _, candidates in working:
            counts.update(candidates)
        return counts

    @staticmethod
    def _select_method(counts: Counter[str]) -> str:
        """Pick the most frequent method, smallest name first on ties."""
        return min(counts.items(), key=lambda item: (-item[1], item[0]))[0]


def split_basket(
    catalogue: Catalogue | dict[str, Sequence[str]], basket: Iterable[str]
) -> dict[str, list[str]]:
    """Split ``basket`` against ``catalogue`` in one call.

    Raises:
        ConfigLoadError: If ``catalogue`` is a raw mapping of the wrong shape.
    """
    if not isinstance(catalogue, Catalogue):
        catalogue = Catalogue(catalogue)
    return BasketSplitter(catalogue).split(basket)
