"""Level layout: the snake path and its packed grid."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.algorithm import AlgorithmType


@dataclass
class SnakeCell:
    col: int
    row: int


@dataclass
class Level:
    """A decoded level.

    ``snake`` is already normalized so that its minimum column and row are
    zero, and ``columns``/``rows`` are the size of its bounding box.
    ``declared_columns``/``declared_rows`` are the grid dimensions stored in
    the file; the game does not use them.
    """

    identifier: str
    algorithm: AlgorithmType
    snake: list[SnakeCell] = field(default_factory=list)
    columns: int = 0
    rows: int = 0
    declared_columns: int = 0
    declared_rows: int = 0

    @property
    def length(self) -> int:
        return len(self.snake)
