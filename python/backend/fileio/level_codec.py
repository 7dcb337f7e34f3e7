"""Reads and writes level files.

Layout (big-endian, no header)::

    utf     algorithm identifier
    int32   grid columns   (unused)
    int32   grid rows      (unused)
    int32   snake length N
    N x     int32 col, int32 row
"""

from __future__ import annotations

from collections.abc import Sequence

from backend.errors import LevelLoadError
from backend.fileio.datastream import DataFormatError, DataReader, DataWriter
from backend.models.algorithm import AlgorithmType
from backend.models.level import Level, SnakeCell


def decode_level(payload: bytes, identifier: str = "") -> Level:
    """Decode a level payload and pack its snake to a zero-based grid.

    Raises :class:`LevelLoadError` for any malformed payload.
    """
    try:
        reader = DataReader(payload)
        algorithm = AlgorithmType.from_identifier(reader.read_utf())
        declared_columns = reader.read_int()
        declared_rows = reader.read_int()

        snake_length = reader.read_int()
        if snake_length < 0:
            raise DataFormatError(f"negative snake length {snake_length}")

        snake: list[SnakeCell] = []
        for _ in range(snake_length):
            col = reader.read_int()
            row = reader.read_int()
            snake.append(SnakeCell(col, row))
    except ValueError as exc:
        raise LevelLoadError(f"Cannot decode level {identifier!r}: {exc}") from exc

    columns, rows = normalize_snake(snake)
    return Level(
        identifier=identifier,
        algorithm=algorithm,
        snake=snake,
        columns=columns,
        rows=rows,
        declared_columns=declared_columns,
        declared_rows=declared_rows,
    )


def normalize_snake(snake: list[SnakeCell]) -> tuple[int, int]:
    """Shift *snake* in place so its bounding box starts at (0, 0).

    Returns the bounding box size as ``(columns, rows)``; ``(0, 0)`` for an
    empty snake.
    """
    if not snake:
        return 0, 0

    min_col = min(c.col for c in snake)
    max_col = max(c.col for c in snake)
    min_row = min(c.row for c in snake)
    max_row = max(c.row for c in snake)

    for cell in snake:
        cell.col -= min_col
        cell.row -= min_row
    return max_col - min_col + 1, max_row - min_row + 1


def encode_level(
    algorithm: AlgorithmType,
    cells: Sequence[SnakeCell],
    columns: int | None = None,
    rows: int | None = None,
) -> bytes:
    """Encode a level. The declared grid size defaults to the cells'
    bounding box."""
    if columns is None or rows is None:
        packed = [SnakeCell(c.col, c.row) for c in cells]
        box_columns, box_rows = normalize_snake(packed)
        columns = box_columns if columns is None else columns
        rows = box_rows if rows is None else rows

    writer = DataWriter()
    writer.write_utf(algorithm.value)
    writer.write_int(columns)
    writer.write_int(rows)
    writer.write_int(len(cells))
    for cell in cells:
        writer.write_int(cell.col)
        writer.write_int(cell.row)
    return writer.getvalue()
