from backend.models.algorithm import AlgorithmType
from backend.models.level import Level, SnakeCell
from backend.models.record import LevelRecord, PlayerRecord
from backend.models.tile import Tile, tiles_from_ids
from backend.models.transaction import Transaction
from backend.models.viewport import Viewport

__all__ = [
    "AlgorithmType",
    "Level",
    "LevelRecord",
    "PlayerRecord",
    "SnakeCell",
    "Tile",
    "Transaction",
    "Viewport",
    "tiles_from_ids",
]
