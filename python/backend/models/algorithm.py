from __future__ import annotations

from enum import StrEnum


class AlgorithmType(StrEnum):
    """Sorting algorithms a level can be played with.

    The values are the identifiers stored in level and record files.
    """

    BUBBLE_SORT = "BUBBLE_SORT"
    SELECTION_SORT = "SELECTION_SORT"

    @classmethod
    def from_identifier(cls, identifier: str) -> AlgorithmType:
        """Look up a member by its file identifier.

        Raises ``ValueError`` for anything that is not an exact member value.
        """
        try:
            return cls(identifier)
        except ValueError:
            raise ValueError(f"Unknown sorting algorithm: {identifier!r}") from None

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()
