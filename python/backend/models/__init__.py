from backend.models.grid import EMPTY, Direction, Grid

__all__ = ["EMPTY", "Direction", "Grid"]
