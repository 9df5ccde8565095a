"""Core gameplay logic: applies moves, runs the clock, decides win or loss."""

from __future__ import annotations

import logging
import random
from typing import Callable

from backend.config import DEFAULT_DURATION, SessionConfig
from backend.engine.gamegenerator import Shuffler
from backend.engine.gamerules import CompletionChecker, MoveValidator
from backend.engine.gamestate import CountdownTimer, SessionState
from backend.models.grid import Direction, Grid

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[SessionState], None]


class Session:
    """Orchestrates a single timed play-through.

    The session is the only mutator of its grid and of its state.  Once
    it reaches ``WON`` or ``LOST`` every further tick and input is ignored;
    the host starts a new ``Session`` to play again.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        on_outcome: OutcomeCallback | None = None,
        rng: random.Random | None = None,
    ) -> None:
        config = config or SessionConfig()
        size = config.board_size
        if size < 2:
            logger.warning("Board size %d is degenerate; using a 1x1 board", size)
            size = 1

        seed = rng if rng is not None else config.seed
        self._grid, self._shuffle_moves = Shuffler.generate(
            size, seed, avoid_backtrack=config.avoid_backtrack
        )
        self._setup(config.duration, on_outcome)
        logger.info(
            "Session started: %dx%d, %.1fs, %d shuffle moves",
            size,
            size,
            config.duration,
            len(self._shuffle_moves),
        )

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        duration: float = DEFAULT_DURATION,
        *,
        on_outcome: OutcomeCallback | None = None,
    ) -> Session:
        """Create a session around an existing grid, without shuffling."""
        obj = object.__new__(cls)
        obj._grid = grid
        obj._shuffle_moves = []
        obj._setup(duration, on_outcome)
        return obj

    def _setup(self, duration: float, on_outcome: OutcomeCallback | None) -> None:
        self._timer = CountdownTimer(duration)
        self._state = SessionState.PLAYING
        self._on_outcome = on_outcome
        self._pending_outcome: SessionState | None = None
        self.moves: int = 0

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    @property
    def remaining_time(self) -> float:
        return self._timer.remaining

    @property
    def shuffle_moves(self) -> list[Direction]:
        """Empty-cell moves the shuffle applied, oldest first."""
        return list(self._shuffle_moves)

    # -- host-loop events -----------------------------------------------------

    def tick(self, delta: float) -> None:
        """Advance the countdown by *delta* seconds."""
        if self.is_over:
            return
        self._timer.advance(delta)
        if self._timer.expired:
            self._finish(SessionState.LOST)

    def input_event(self, cell: int) -> bool:
        """Handle a tap on grid *cell*.  Returns True if a tile moved."""
        if self.is_over:
            logger.debug("Ignoring input on cell %d: session is %s", cell, self._state)
            return False
        return self._after_move(MoveValidator.try_move_toward_cell(self._grid, cell))

    def move(self, direction: Direction) -> bool:
        """Slide the empty cell in *direction*.  Returns True if applied."""
        if self.is_over:
            logger.debug("Ignoring move %s: session is %s", direction, self._state)
            return False
        return self._after_move(MoveValidator.try_move(self._grid, direction))

    def update(self, delta: float, cell: int | None = None) -> None:
        """Run one host frame: advance time, then apply at most one input.

        A timeout in this frame takes priority and the input is dropped.
        """
        self.tick(delta)
        if cell is not None and not self.is_over:
            self.input_event(cell)

    def consume_outcome(self) -> SessionState | None:
        """Return the terminal outcome once, then ``None``."""
        outcome, self._pending_outcome = self._pending_outcome, None
        return outcome

    # -- helpers --------------------------------------------------------------

    def _after_move(self, moved: bool) -> bool:
        if not moved:
            return False
        self.moves += 1
        logger.debug(
            "Move %d applied, empty cell now at %d", self.moves, self._grid.empty_index
        )
        if CompletionChecker.is_solved(self._grid):
            self._finish(SessionState.WON)
        return True

    def _finish(self, outcome: SessionState) -> None:
        self._state = outcome
        self._pending_outcome = outcome
        logger.info(
            "Session %s after %d moves with %.1fs left",
            outcome,
            self.moves,
            self._timer.remaining,
        )
        if self._on_outcome is not None:
            self._on_outcome(outcome)
