from backend.engine.gameplay.game import Session

__all__ = ["Session"]
