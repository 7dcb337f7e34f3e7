"""Tile model for the sorting puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A single tile on the snake. ``id`` is the only ordering key."""

    id: int


def tiles_from_ids(ids: Sequence[int]) -> list[Tile]:
    """Build a tile list from raw ids, e.g. ``tiles_from_ids([3, 1, 2])``."""
    return [Tile(id=i) for i in ids]


def ids_of(tiles: Sequence[Tile]) -> list[int]:
    return [t.id for t in tiles]


def is_ascending(tiles: Sequence[Tile]) -> bool:
    return all(a.id <= b.id for a, b in zip(tiles, tiles[1:]))
