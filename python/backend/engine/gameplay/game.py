"""Core gameplay logic: judges swaps against the algorithm's transactions."""

from __future__ import annotations

from backend.engine.gamegenerator import TileDealer
from backend.engine.gamestate import GameState
from backend.engine.transactions import TransactionGenerator
from backend.models.level import Level
from backend.models.tile import Tile
from backend.models.transaction import Transaction


class GamePlay:
    """Orchestrates a single game session on one level.

    The transactions are computed once, from the tiles as dealt. A swap is
    correct only if it is the next transaction; correct swaps are applied,
    wrong ones are counted as mistakes and leave the tiles untouched.
    """

    def __init__(
        self, level: Level, tiles: list[Tile], generator: TransactionGenerator
    ) -> None:
        self.level = level
        self.state = GameState(tiles)
        self.transactions: list[Transaction] = generator.generate()
        self._cursor = 0

    @classmethod
    def deal(cls, level: Level, generator: TransactionGenerator) -> GamePlay:
        """Deal fresh tiles into the generator's bound list and start a game.

        The generator sees the tiles through the list it holds, so the list
        is refilled in place rather than replaced.
        """
        tiles = generator.tiles
        if not isinstance(tiles, list):
            raise TypeError("generator must be bound to a mutable tile list")
        tiles[:] = TileDealer.deal_for(level)
        return cls(level, list(tiles), generator)

    # -- moves ----------------------------------------------------------------

    def swap(self, a: int, b: int) -> bool:
        """Try to swap the tiles at positions *a* and *b*.

        Returns True if the swap was the expected transaction.
        """
        expected = self.expected
        if expected is None:
            return False

        self.state.increment_moves()
        if not expected.matches(a, b):
            self.state.increment_mistakes()
            return False

        expected.apply(self.state.tiles)
        self._cursor += 1
        if self.is_won:
            self.state.pause()
        return True

    # -- queries --------------------------------------------------------------

    @property
    def expected(self) -> Transaction | None:
        if self._cursor < len(self.transactions):
            return self.transactions[self._cursor]
        return None

    @property
    def progress(self) -> tuple[int, int]:
        return self._cursor, len(self.transactions)

    @property
    def is_won(self) -> bool:
        return self._cursor == len(self.transactions)

    @property
    def is_perfect(self) -> bool:
        return self.is_won and self.state.mistakes == 0
