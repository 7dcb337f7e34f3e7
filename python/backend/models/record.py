"""Per-level play statistics for the player."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class LevelRecord:
    """Statistics for one level. ``fastest_win_time`` is in milliseconds,
    0 meaning the level was never completed."""

    algorithm: str
    games_played: int = 0
    wins: int = 0
    perfect_wins: int = 0
    fastest_win_time: int = 0


class PlayerRecord:
    """Maps level identifiers to their :class:`LevelRecord`.

    Iteration follows the canonical level order given by *levels* (or
    :meth:`reorder`); identifiers outside it follow in insertion order.
    """

    def __init__(self, levels: Sequence[str] = ()) -> None:
        self._levels: dict[str, LevelRecord] = {}
        self._canonical: list[str] = list(levels)

    # -- mapping --------------------------------------------------------------

    def add_level_record(self, identifier: str, record: LevelRecord) -> None:
        self._levels[identifier] = record
        self._sort()

    def reorder(self, levels: Sequence[str]) -> None:
        """Make *levels* the canonical order and re-sort the mapping."""
        self._canonical = list(levels)
        self._sort()

    def _sort(self) -> None:
        rank = {identifier: i for i, identifier in enumerate(self._canonical)}
        ordered = sorted(
            enumerate(self.items()),
            key=lambda pair: (rank.get(pair[1][0], len(rank)), pair[0]),
        )
        self._levels = dict(item for _, item in ordered)

    def get(self, identifier: str) -> LevelRecord | None:
        return self._levels.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._levels

    def __iter__(self) -> Iterator[str]:
        return iter(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerRecord):
            return NotImplemented
        return list(self._levels.items()) == list(other._levels.items())

    def items(self) -> list[tuple[str, LevelRecord]]:
        return list(self._levels.items())

    # -- queries --------------------------------------------------------------

    def get_algorithm(self, identifier: str) -> str | None:
        rec = self._levels.get(identifier)
        return rec.algorithm if rec else None

    def get_games_played(self, identifier: str) -> int:
        rec = self._levels.get(identifier)
        return rec.games_played if rec else 0

    def get_wins(self, identifier: str) -> int:
        rec = self._levels.get(identifier)
        return rec.wins if rec else 0

    def get_perfect_wins(self, identifier: str) -> int:
        rec = self._levels.get(identifier)
        return rec.perfect_wins if rec else 0

    def get_fastest_win(self, identifier: str) -> int:
        rec = self._levels.get(identifier)
        return rec.fastest_win_time if rec else 0

    # -- outcomes -------------------------------------------------------------

    def _ensure(self, identifier: str, algorithm: str) -> LevelRecord:
        rec = self._levels.get(identifier)
        if rec is None:
            rec = LevelRecord(algorithm=algorithm)
            self.add_level_record(identifier, rec)
        elif rec.algorithm != algorithm:
            # records made before the level was played carry a guessed algorithm
            rec.algorithm = algorithm
        return rec

    def record_game(self, identifier: str, algorithm: str) -> None:
        """Count a started game on the level."""
        self._ensure(identifier, algorithm).games_played += 1

    def record_win(
        self, identifier: str, algorithm: str, time_ms: int, perfect: bool
    ) -> None:
        """Count a win, keeping the fastest time (0 means none yet)."""
        rec = self._ensure(identifier, algorithm)
        rec.wins += 1
        if perfect:
            rec.perfect_wins += 1
        if rec.fastest_win_time == 0 or time_ms < rec.fastest_win_time:
            rec.fastest_win_time = time_ms
