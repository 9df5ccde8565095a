from backend.engine.gamerules.completion import CompletionChecker
from backend.engine.gamerules.validator import MoveValidator

__all__ = ["CompletionChecker", "MoveValidator"]
