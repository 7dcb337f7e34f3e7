"""A single swap step of a sorting algorithm's trace."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Transaction:
    """Swap the elements currently at positions *first* and *second*."""

    first: int
    second: int

    def apply(self, sequence: MutableSequence[Any]) -> None:
        """Perform the swap on *sequence* in place."""
        sequence[self.first], sequence[self.second] = (
            sequence[self.second],
            sequence[self.first],
        )

    def matches(self, a: int, b: int) -> bool:
        """True if the player's swap of *a* and *b* is this transaction."""
        return {a, b} == {self.first, self.second}
