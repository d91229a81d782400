"""Deduplication and ordering of discovered counter names."""

from __future__ import annotations

from typing import Iterable, List, Set

from .models import InvocationSite


class NameCollector:
    """Accumulates counter names from every file and operation kind."""

    def __init__(self) -> None:
        self._names: Set[str] = set()

    def add(self, name: str) -> None:
        self._names.add(name)

    def extend(self, sites: Iterable[InvocationSite]) -> None:
        """Merge the names of ``sites`` regardless of which form produced them."""
        for site in sites:
            self._names.add(site.name)

    def names(self) -> List[str]:
        """Return the distinct names in ascending order.

        Python orders ``str`` by code point, which matches byte-wise ordering of
        their UTF-8 encoding, so the result is stable across platforms.
        """
        return sorted(self._names)

    def __len__(self) -> int:
        return len(self._names)


def canonical_names(names: Iterable[str]) -> List[str]:
    """Deduplicate and sort a caller-supplied name collection."""
    collector = NameCollector()
    for name in names:
        collector.add(name)
    return collector.names()


__all__ = ["NameCollector", "canonical_names"]
