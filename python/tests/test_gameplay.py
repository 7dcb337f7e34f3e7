"""Gameplay tests: player swaps are judged against the generated trace."""

from __future__ import annotations

import itertools
import random
import time

import pytest

from backend.engine.gamegenerator import TileDealer
from backend.engine.gameplay import GamePlay
from backend.engine.registry import AlgorithmRegistry
from backend.engine.transactions import TransactionGenerator
from backend.models.algorithm import AlgorithmType
from backend.models.level import Level, SnakeCell
from backend.models.tile import ids_of, is_ascending, tiles_from_ids
from backend.models.transaction import Transaction


def _level(algorithm: AlgorithmType, length: int) -> Level:
    return Level(
        identifier="test.shl",
        algorithm=algorithm,
        snake=[SnakeCell(i, 0) for i in range(length)],
        columns=length,
        rows=1,
    )


def _game(algorithm: AlgorithmType, ids: list[int]) -> GamePlay:
    tiles = tiles_from_ids(ids)
    return GamePlay(_level(algorithm, len(ids)), list(tiles), TransactionGenerator(algorithm, tiles))


def test_correct_swaps_win_perfectly() -> None:
    game = _game(AlgorithmType.BUBBLE_SORT, [3, 1, 2])

    assert game.swap(1, 0)
    assert game.progress == (1, 2)
    assert game.swap(1, 2)

    assert game.is_won
    assert game.is_perfect
    assert ids_of(game.state.tiles) == [1, 2, 3]
    assert game.state.moves == 2


def test_wrong_swap_is_a_mistake_and_changes_nothing() -> None:
    game = _game(AlgorithmType.BUBBLE_SORT, [3, 1, 2])

    assert not game.swap(0, 2)
    assert ids_of(game.state.tiles) == [3, 1, 2]
    assert game.state.mistakes == 1
    assert game.expected is not None and game.expected == Transaction(0, 1)

    game.swap(0, 1)
    game.swap(1, 2)
    assert game.is_won
    assert not game.is_perfect


def test_selection_game_follows_its_quirk() -> None:
    game = _game(AlgorithmType.SELECTION_SORT, [1, 3, 2])

    # Swapping 3 and 2 would sort the tiles but is not what the algorithm does.
    assert not game.swap(1, 2)
    assert game.swap(0, 2)
    assert game.swap(1, 2)

    assert game.is_won
    assert ids_of(game.state.tiles) == [2, 1, 3]


def test_swaps_after_win_are_ignored() -> None:
    game = _game(AlgorithmType.BUBBLE_SORT, [2, 1])
    game.swap(0, 1)

    assert not game.swap(0, 1)
    assert game.state.moves == 1


def test_deal_refills_the_registry_bound_tiles() -> None:
    registry = AlgorithmRegistry()
    tiles: list = []
    level = _level(AlgorithmType.BUBBLE_SORT, 6)

    game = GamePlay.deal(level, registry.get(level.algorithm, tiles))

    assert len(tiles) == 6
    assert ids_of(game.state.tiles) == ids_of(tiles)
    assert game.state.tiles is not tiles
    assert len(game.transactions) > 0


def test_deal_rejects_immutable_binding() -> None:
    generator = TransactionGenerator(AlgorithmType.BUBBLE_SORT, tuple(tiles_from_ids([1])))

    with pytest.raises(TypeError):
        GamePlay.deal(_level(AlgorithmType.BUBBLE_SORT, 1), generator)


@pytest.mark.parametrize("count", [2, 3, 8, 20])
def test_dealt_tiles_need_sorting(count: int) -> None:
    tiles = TileDealer.deal(count, random.Random(count))

    assert sorted(ids_of(tiles)) == list(range(count))
    assert not is_ascending(tiles)


@pytest.mark.parametrize("count", [0, 1])
def test_dealing_too_few_tiles_to_shuffle(count: int) -> None:
    assert ids_of(TileDealer.deal(count)) == list(range(count))


def test_elapsed_time_stops_on_win(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = itertools.count(100.0)
    monkeypatch.setattr(time, "time", lambda: next(clock))
    game = _game(AlgorithmType.BUBBLE_SORT, [2, 1])
    running = game.state.elapsed_ms

    assert game.state.elapsed_ms > running

    game.swap(0, 1)
    frozen = game.state.elapsed_ms

    assert game.is_won
    assert game.state.elapsed_ms == frozen
