from backend.engine.gamegenerator.generator import TileDealer

__all__ = ["TileDealer"]
