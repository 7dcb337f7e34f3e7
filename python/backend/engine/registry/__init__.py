from backend.engine.registry.registry import AlgorithmRegistry

__all__ = ["AlgorithmRegistry"]
