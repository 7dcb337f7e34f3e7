"""Builds the swap transactions a sorting algorithm performs.

The game compares the player's swaps against these lists, so each
generator reproduces its algorithm step for step, including the quirks
of the selection sort used by the shipped levels.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from backend.models.algorithm import AlgorithmType
from backend.models.tile import Tile
from backend.models.transaction import Transaction


def bubble_sort_transactions(tiles: Sequence[Tile]) -> list[Transaction]:
    """Return the adjacent swaps of an exchange bubble sort over *tiles*.

    Example::

        bubble_sort_transactions(tiles_from_ids([3, 1, 2]))
        # [Transaction(first=0, second=1), Transaction(first=1, second=2)]
    """
    transactions: list[Transaction] = []
    copy = list(tiles)

    for i in range(len(copy) - 1, 0, -1):
        for j in range(i):
            if copy[j].id > copy[j + 1].id:
                t = Transaction(j, j + 1)
                transactions.append(t)
                t.apply(copy)
    return transactions


def selection_sort_transactions(tiles: Sequence[Tile]) -> list[Transaction]:
    """Return the swaps of the game's selection sort over *tiles*.

    The minimum for position ``i`` is searched among ``i+1 .. len-1`` only,
    and the swap is made on every pass, so exactly ``len-1`` transactions
    come out and the result is not always ascending. Existing level and
    record files depend on this behaviour.
    """
    transactions: list[Transaction] = []
    copy = list(tiles)

    for i in range(len(copy) - 1):
        min_index = i + 1
        for j in range(i + 1, len(copy) - 1):
            if copy[min_index].id > copy[j + 1].id:
                min_index = j + 1

        t = Transaction(i, min_index)
        transactions.append(t)
        t.apply(copy)
    return transactions


_GENERATORS: dict[AlgorithmType, Callable[[Sequence[Tile]], list[Transaction]]] = {
    AlgorithmType.BUBBLE_SORT: bubble_sort_transactions,
    AlgorithmType.SELECTION_SORT: selection_sort_transactions,
}


def generate_transactions(
    algorithm: AlgorithmType, tiles: Sequence[Tile]
) -> list[Transaction]:
    return _GENERATORS[algorithm](tiles)


def replay(tiles: Sequence[Tile], transactions: Sequence[Transaction]) -> list[Tile]:
    """Apply *transactions* in order to a copy of *tiles* and return it."""
    copy = list(tiles)
    for t in transactions:
        t.apply(copy)
    return copy


class TransactionGenerator:
    """Generates transactions for one algorithm over a bound tile list.

    The generator keeps a reference to *tiles*, not a snapshot: in-place
    changes to that list show up in the next :meth:`generate`.
    """

    def __init__(self, algorithm: AlgorithmType, tiles: Sequence[Tile]) -> None:
        self.algorithm = algorithm
        self.tiles = tiles

    @property
    def name(self) -> str:
        return self.algorithm.value

    def generate(self) -> list[Transaction]:
        return generate_transactions(self.algorithm, self.tiles)

    def __repr__(self) -> str:
        return f"TransactionGenerator({self.algorithm.value}, {len(self.tiles)} tiles)"
