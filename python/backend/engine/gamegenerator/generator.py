"""Deals the tiles placed along a level's snake."""

from __future__ import annotations

import random

from backend.models.level import Level
from backend.models.tile import Tile, is_ascending


class TileDealer:
    """Creates shuffled tile sequences that still need sorting."""

    @staticmethod
    def sorted(count: int) -> list[Tile]:
        """Return the goal sequence (ids ``0 .. count-1`` ascending)."""
        return [Tile(id=i) for i in range(count)]

    @staticmethod
    def shuffle(tiles: list[Tile], rng: random.Random | None = None) -> None:
        """Shuffle *tiles* in place."""
        (rng or random).shuffle(tiles)

    @staticmethod
    def deal(count: int, rng: random.Random | None = None) -> list[Tile]:
        """Return *count* shuffled tiles, never already ascending when
        there are at least two of them."""
        tiles = TileDealer.sorted(count)
        if count < 2:
            return tiles

        TileDealer.shuffle(tiles, rng)
        while is_ascending(tiles):
            TileDealer.shuffle(tiles, rng)
        return tiles

    @staticmethod
    def deal_for(level: Level, rng: random.Random | None = None) -> list[Tile]:
        """One tile per snake cell."""
        return TileDealer.deal(level.length, rng)
