"""Reads and writes the player record file.

Layout (big-endian)::

    int32   level count
    per level:
        utf     level identifier
        utf     algorithm identifier
        int32   games played
        int32   wins
        int32   perfect wins
        int64   fastest win time (ms)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from backend.errors import RecordDecodeError, RecordSaveError
from backend.fileio.datastream import DataFormatError, DataReader, DataWriter
from backend.models.algorithm import AlgorithmType
from backend.models.record import LevelRecord, PlayerRecord

logger = logging.getLogger(__name__)


def default_algorithm_for(identifier: str) -> AlgorithmType:
    """Guess the algorithm of a level that has no record yet."""
    if "Bubble" in identifier:
        return AlgorithmType.BUBBLE_SORT
    return AlgorithmType.SELECTION_SORT


def encode_record(levels: Sequence[str], record: PlayerRecord) -> bytes:
    """Encode *record* for every identifier in *levels*, in that order.

    Levels without a record are written zeroed. Raises
    :class:`RecordSaveError` if a value does not fit the layout.
    """
    writer = DataWriter()
    try:
        writer.write_int(len(levels))
        for identifier in levels:
            rec = record.get(identifier)
            if rec is None:
                rec = LevelRecord(algorithm=default_algorithm_for(identifier).value)
            writer.write_utf(identifier)
            writer.write_utf(rec.algorithm)
            writer.write_int(rec.games_played)
            writer.write_int(rec.wins)
            writer.write_int(rec.perfect_wins)
            writer.write_long(rec.fastest_win_time)
    except DataFormatError as exc:
        raise RecordSaveError(f"Cannot encode player record: {exc}") from exc
    return writer.getvalue()


def decode_record(payload: bytes) -> PlayerRecord:
    """Decode a player record payload.

    Raises :class:`RecordDecodeError` if the payload is malformed.
    """
    record = PlayerRecord()
    try:
        reader = DataReader(payload)
        num_levels = reader.read_int()
        if num_levels < 0:
            raise DataFormatError(f"negative level count {num_levels}")
        for _ in range(num_levels):
            identifier = reader.read_utf()
            rec = LevelRecord(algorithm=reader.read_utf())
            rec.games_played = reader.read_int()
            rec.wins = reader.read_int()
            rec.perfect_wins = reader.read_int()
            rec.fastest_win_time = reader.read_long()
            record.add_level_record(identifier, rec)
    except ValueError as exc:
        raise RecordDecodeError(f"Malformed player record: {exc}") from exc
    return record


# -- files ---------------------------------------------------------------------


def read_record(path: Path) -> PlayerRecord | None:
    """Load the record at *path*, or ``None`` if there is no usable one.

    A missing or unreadable file is the normal first-run case.
    """
    try:
        payload = path.read_bytes()
    except OSError as exc:
        logger.debug("No player record at %s (%s)", path, exc)
        return None

    try:
        return decode_record(payload)
    except RecordDecodeError as exc:
        logger.debug("Ignoring player record at %s: %s", path, exc)
        return None


def write_record(path: Path, levels: Sequence[str], record: PlayerRecord) -> None:
    """Encode and write *record*. Raises :class:`RecordSaveError`."""
    payload = encode_record(levels, record)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise RecordSaveError(f"Cannot write player record to {path}: {exc}") from exc
    logger.info("Saved player record for %d levels to %s", len(levels), path)
