"""
frequency.py

FrequencyTable: exact phrase → count mapping for one input.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, ItemsView, Iterator


class FrequencyTable:
    """
    Occurrence counts for three-word phrases.

    Every phrase present has a count of at least 1; a phrase that was never
    incremented reads as 0. The only mutation is :meth:`increment`, so there
    is no way to remove or decrement an entry.

    The table is unbounded: it grows with the number of *distinct* phrases
    seen in the input.
    """

    def __init__(self) -> None:
        self._counts: Counter = Counter()

    def increment(self, phrase: str) -> int:
        """Add one occurrence of ``phrase`` and return its new count."""
        self._counts[phrase] += 1
        return self._counts[phrase]

    def count(self, phrase: str) -> int:
        return self._counts.get(phrase, 0)

    def total(self) -> int:
        """Number of phrase occurrences counted (sum over all phrases)."""
        return sum(self._counts.values())

    def items(self) -> ItemsView[str, int]:
        return self._counts.items()

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable(distinct={len(self)}, total={self.total()})"
