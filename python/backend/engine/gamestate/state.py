"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from backend.models.tile import Tile


class GameState:
    """Holds the current tiles, move and mistake counters, and elapsed time."""

    def __init__(self, tiles: list[Tile]) -> None:
        self.tiles = tiles
        self.moves: int = 0
        self.mistakes: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed_time * 1000)

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def increment_mistakes(self) -> None:
        self.mistakes += 1
