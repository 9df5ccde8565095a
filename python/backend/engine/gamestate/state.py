"""Session lifecycle states and the countdown timer."""

from __future__ import annotations

from enum import StrEnum

# Remainders this small are float residue from summed frame deltas.
_EPSILON = 1e-9


class SessionState(StrEnum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionState.PLAYING


class CountdownTimer:
    """Counts remaining seconds down to zero from a fixed duration."""

    def __init__(self, duration: float) -> None:
        self.duration = duration
        self._remaining: float = duration

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def expired(self) -> bool:
        return self._remaining <= _EPSILON

    def advance(self, delta: float) -> None:
        """Consume *delta* seconds.  Negative deltas count as zero."""
        self._remaining -= max(delta, 0.0)
        if self._remaining <= _EPSILON:
            self._remaining = 0.0
