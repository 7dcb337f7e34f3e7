"""Exceptions and the error-reporting sink used by the file layer."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Protocol

logger = logging.getLogger(__name__)


class SortingHatError(Exception):
    """Base class for all game errors."""


class LevelLoadError(SortingHatError):
    """A level file could not be read or decoded."""


class RecordDecodeError(SortingHatError):
    """A player record payload is malformed."""


class RecordSaveError(SortingHatError):
    """The player record could not be encoded or written."""


class ErrorType(StrEnum):
    LEVEL_LOAD = "Error loading level"
    RECORD_SAVE = "Error saving player record"


class ErrorReporter(Protocol):
    def process_error(self, error: ErrorType) -> None: ...


class LoggingErrorReporter:
    """Default sink: logs each notification and remembers it."""

    def __init__(self) -> None:
        self.errors: list[ErrorType] = []

    def process_error(self, error: ErrorType) -> None:
        logger.error("%s", error.value)
        self.errors.append(error)
