"""Hands out one transaction generator per sorting algorithm."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from backend.engine.transactions import TransactionGenerator
from backend.models.algorithm import AlgorithmType
from backend.models.tile import Tile

logger = logging.getLogger(__name__)


class AlgorithmRegistry:
    """Builds every generator on first use and caches them.

    The generators are bound to whichever tile collection was passed to the
    first :meth:`get`. Later calls return the cached generators even when
    they pass a different collection; use :meth:`rebind` to switch.

    One registry is created at start-up and handed to whoever needs it.
    """

    def __init__(self) -> None:
        self._generators: dict[AlgorithmType, TransactionGenerator] | None = None
        self._lock = threading.Lock()

    def get(
        self, algorithm: AlgorithmType, tiles: Sequence[Tile]
    ) -> TransactionGenerator:
        with self._lock:
            if self._generators is None:
                self._generators = self._build(tiles)
            return self._generators[algorithm]

    def rebind(self, tiles: Sequence[Tile]) -> None:
        """Rebuild all generators against *tiles*."""
        with self._lock:
            self._generators = self._build(tiles)

    @property
    def is_built(self) -> bool:
        return self._generators is not None

    @staticmethod
    def _build(tiles: Sequence[Tile]) -> dict[AlgorithmType, TransactionGenerator]:
        logger.debug("Building transaction generators for %d tiles", len(tiles))
        return {algorithm: TransactionGenerator(algorithm, tiles) for algorithm in AlgorithmType}
