"""Loads levels and saves/loads the player record for the game."""

from __future__ import annotations

import logging

from backend.config import Settings
from backend.errors import ErrorReporter, ErrorType, LevelLoadError, RecordSaveError
from backend.fileio.level_codec import decode_level
from backend.fileio.record_codec import read_record, write_record
from backend.models.level import Level
from backend.models.record import PlayerRecord
from backend.models.viewport import Viewport

logger = logging.getLogger(__name__)


class FileManager:
    """File services for the game.

    Failures are reported through *errors*; nothing here raises to the
    caller. A failed level load leaves the viewport untouched and returns
    ``None`` so the caller keeps its current level.
    """

    def __init__(
        self,
        settings: Settings,
        errors: ErrorReporter,
        viewport: Viewport | None = None,
    ) -> None:
        self.settings = settings
        self.errors = errors
        self.viewport = viewport

    # -- levels ---------------------------------------------------------------

    def load_level(self, identifier: str) -> Level | None:
        path = self.settings.level_path(identifier)
        try:
            try:
                payload = path.read_bytes()
            except OSError as exc:
                raise LevelLoadError(f"Cannot read level file {path}: {exc}") from exc
            level = decode_level(payload, identifier)
        except LevelLoadError as exc:
            logger.warning("%s", exc)
            self.errors.process_error(ErrorType.LEVEL_LOAD)
            return None

        if self.viewport is not None:
            self.viewport.set_game_world_size(
                level.columns * self.settings.tile_width,
                level.rows * self.settings.tile_height,
            )
            self.viewport.set_north_panel_height(self.settings.north_panel_height)
            self.viewport.init_viewport_margins()

        logger.info(
            "Loaded level %s (%s, %dx%d, %d cells)",
            identifier,
            level.algorithm.value,
            level.columns,
            level.rows,
            level.length,
        )
        return level

    # -- player record --------------------------------------------------------

    def load_record(self) -> PlayerRecord:
        """Return the saved record, or an empty one if there is none.

        Either way it is ordered by the configured level list.
        """
        record = read_record(self.settings.record_path)
        if record is None:
            record = PlayerRecord()
        record.reorder(self.settings.level_options)
        return record

    def save_record(self, record: PlayerRecord) -> bool:
        """Write *record* for all configured levels. Returns False on failure."""
        try:
            write_record(self.settings.record_path, self.settings.level_options, record)
        except RecordSaveError as exc:
            logger.warning("%s", exc)
            self.errors.process_error(ErrorType.RECORD_SAVE)
            return False
        return True
