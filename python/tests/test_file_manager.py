from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.config import Settings, load_settings
from backend.errors import ErrorType, LoggingErrorReporter
from backend.fileio import FileManager, encode_level, write_record
from backend.models.algorithm import AlgorithmType
from backend.models.level import SnakeCell
from backend.models.record import LevelRecord, PlayerRecord
from backend.models.viewport import Viewport

LEVELS = ["BubbleSortLevel1.shl", "SelectionSortLevel1.shl"]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path, level_options=list(LEVELS))


@pytest.fixture
def reporter() -> LoggingErrorReporter:
    return LoggingErrorReporter()


def test_load_level_sizes_viewport(settings: Settings, reporter: LoggingErrorReporter) -> None:
    cells = [SnakeCell(5, 2), SnakeCell(8, 2), SnakeCell(8, 4)]
    settings.level_path("BubbleSortLevel1.shl").write_bytes(
        encode_level(AlgorithmType.BUBBLE_SORT, cells)
    )
    viewport = Viewport()
    files = FileManager(settings, reporter, viewport)

    level = files.load_level("BubbleSortLevel1.shl")

    assert level is not None
    assert (level.columns, level.rows) == (4, 3)
    assert viewport.game_world_width == 4 * settings.tile_width
    assert viewport.game_world_height == 3 * settings.tile_height
    assert viewport.north_panel_height == settings.north_panel_height
    assert reporter.errors == []


@pytest.mark.parametrize("contents", [None, b"\x00\x03FOO"], ids=["missing", "malformed"])
def test_failed_level_load_is_reported(
    settings: Settings, reporter: LoggingErrorReporter, contents: bytes | None
) -> None:
    if contents is not None:
        settings.level_path("BubbleSortLevel1.shl").write_bytes(contents)
    viewport = Viewport(game_world_width=123, game_world_height=45)
    files = FileManager(settings, reporter, viewport)

    assert files.load_level("BubbleSortLevel1.shl") is None
    assert reporter.errors == [ErrorType.LEVEL_LOAD]
    assert (viewport.game_world_width, viewport.game_world_height) == (123, 45)


def test_missing_record_is_empty_and_silent(
    settings: Settings, reporter: LoggingErrorReporter
) -> None:
    record = FileManager(settings, reporter).load_record()

    assert len(record) == 0
    assert reporter.errors == []


def test_save_then_load_record(settings: Settings, reporter: LoggingErrorReporter) -> None:
    files = FileManager(settings, reporter)
    record = PlayerRecord()
    record.add_level_record("SelectionSortLevel1.shl", LevelRecord("SELECTION_SORT", 3, 1, 1, 800))

    assert files.save_record(record)
    loaded = files.load_record()

    assert list(loaded) == LEVELS
    assert loaded.get("SelectionSortLevel1.shl") == LevelRecord("SELECTION_SORT", 3, 1, 1, 800)
    assert loaded.get("BubbleSortLevel1.shl") == LevelRecord("BUBBLE_SORT")
    assert reporter.errors == []


def test_failed_save_is_reported(tmp_path: Path, reporter: LoggingErrorReporter) -> None:
    settings = Settings(data_dir=tmp_path, player_record_file="", level_options=list(LEVELS))
    files = FileManager(settings, reporter)

    assert not files.save_record(PlayerRecord())
    assert reporter.errors == [ErrorType.RECORD_SAVE]


# -- settings -----------------------------------------------------------------


def test_settings_defaults_without_file(tmp_path: Path) -> None:
    settings = load_settings(tmp_path)

    assert settings.data_dir == tmp_path
    assert settings.level_options == []
    assert settings.record_path == tmp_path / "player_record.bin"


def test_settings_from_file(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_text(
        json.dumps({"level_options": LEVELS, "tile_width": 40})
    )

    settings = load_settings(tmp_path)

    assert settings.level_options == LEVELS
    assert settings.tile_width == 40


def test_settings_reject_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / "settings.json").write_text(json.dumps({"tile_depth": 3}))

    with pytest.raises(ValueError, match="tile_depth"):
        load_settings(tmp_path)


def test_shipped_settings_list_shipped_levels() -> None:
    data_dir = Path(__file__).resolve().parent.parent.parent / "data"
    settings = load_settings(data_dir)

    for identifier in settings.level_options:
        assert settings.level_path(identifier).is_file()


def test_loaded_record_follows_level_list_not_file_order(
    tmp_path: Path, reporter: LoggingErrorReporter
) -> None:
    record = PlayerRecord()
    record.add_level_record("B.shl", LevelRecord("BUBBLE_SORT", 2))
    record.add_level_record("A.shl", LevelRecord("SELECTION_SORT", 1))
    record.add_level_record("Old.shl", LevelRecord("BUBBLE_SORT", 5))
    write_record(tmp_path / "player_record.bin", ["B.shl", "Old.shl", "A.shl"], record)
    settings = Settings(data_dir=tmp_path, level_options=["A.shl", "B.shl"])

    loaded = FileManager(settings, reporter).load_record()

    assert list(loaded) == ["A.shl", "B.shl", "Old.shl"]
    assert loaded.get_games_played("B.shl") == 2
