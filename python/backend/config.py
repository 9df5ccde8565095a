"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BOARD_SIZE = 3
DEFAULT_DURATION = 10.0


@dataclass(frozen=True)
class SessionConfig:
    """Settings fixed for the lifetime of one session.

    ``seed=None`` draws fresh entropy for every shuffle.
    """

    board_size: int = DEFAULT_BOARD_SIZE
    duration: float = DEFAULT_DURATION
    seed: int | None = None
    avoid_backtrack: bool = True
