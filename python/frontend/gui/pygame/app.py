"""Pygame GUI frontend for the timed sliding puzzle.

Clicks are turned into grid cells by ``BoardLayout.cell_at`` and passed to
``Session.update`` together with the frame time from ``Clock.tick``.
"""

from __future__ import annotations

import pygame

from backend.config import SessionConfig
from backend.engine.gameplay import Session
from backend.engine.gamerules import CompletionChecker, MoveValidator
from backend.engine.gamestate import SessionState
from backend.models.grid import EMPTY, Direction
from frontend.gui.pygame.layout import BoardLayout

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 600
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN
FPS = 60

# Arrow keys name the way the *tile* slides; the gap travels the other way.
_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.DOWN,
    pygame.K_DOWN: Direction.UP,
    pygame.K_LEFT: Direction.RIGHT,
    pygame.K_RIGHT: Direction.LEFT,
}


class PygameApp:
    def __init__(self, config: SessionConfig) -> None:
        self._config = config

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_banner = pygame.font.SysFont("Helvetica", 38, bold=True)

        self._start_game()

    def _start_game(self) -> None:
        self._session = Session(self._config)
        self._layout = BoardLayout.fit(
            self._session.size, BOARD_MAX, TILE_GAP, BOARD_TOP, WIN_W
        )
        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._layout.tile_px // 3), bold=True
        )
        self._outcome: SessionState | None = None

    # ── drawing ─────────────────────────────────────────────────────────────

    def _blit_center(self, rendered: pygame.Surface, y: int) -> None:
        self._surf.blit(rendered, ((WIN_W - rendered.get_width()) // 2, y))

    def _draw(self) -> None:
        session = self._session
        grid = session.grid
        layout = self._layout
        self._surf.fill(COL_BASE)

        sz = session.size
        self._blit_center(
            self._f_title.render(f"Sliding Puzzle  {sz}×{sz}", True, COL_TEXT), 14
        )
        clock_col = COL_RED if session.remaining_time < 3 else COL_PINK
        self._blit_center(
            self._f_body.render(
                f"Time: {session.remaining_time:.1f}    Moves: {session.moves}",
                True,
                clock_col,
            ),
            44,
        )

        total = layout.total_px
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(layout.origin_x - TILE_GAP, BOARD_TOP, total, total),
            border_radius=10,
        )
        for i, tile in enumerate(grid.cells):
            if tile == EMPTY:
                continue
            rect = pygame.Rect(layout.tile_rect(i))
            correct = CompletionChecker.is_tile_correct(grid, i)
            pygame.draw.rect(
                self._surf,
                COL_GREEN if correct else COL_SURFACE0,
                rect,
                border_radius=6,
            )
            lbl = self._f_tile.render(
                str(tile + 1), True, COL_BASE if correct else COL_TEXT
            )
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        if self._outcome is not None:
            won = self._outcome is SessionState.WON
            self._blit_center(
                self._f_banner.render(
                    "Solved!" if won else "Time's up!",
                    True,
                    COL_GREEN if won else COL_RED,
                ),
                BOARD_TOP + total + 16,
            )
            self._blit_center(
                self._f_body.render("R  play again    Esc  quit", True, COL_SUBTEXT),
                BOARD_TOP + total + 64,
            )

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            delta = self._clock.tick(FPS) / 1000.0
            # At most one move input per frame, click or key.
            cell: int | None = None

            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                    if cell is None:
                        cell = self._layout.cell_at(ev.pos)
                elif ev.type == pygame.KEYDOWN:
                    if ev.key == pygame.K_ESCAPE:
                        running = False
                    elif ev.key == pygame.K_r:
                        self._start_game()
                    elif ev.key in _KEY_DIRECTIONS and cell is None:
                        cell = MoveValidator.target_of(
                            self._session.grid, _KEY_DIRECTIONS[ev.key]
                        )

            self._session.update(delta, cell)
            outcome = self._session.consume_outcome()
            if outcome is not None:
                self._outcome = outcome

            self._draw()
            pygame.display.flip()

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: SessionConfig) -> None:
    """Launch the Pygame GUI."""
    PygameApp(config).run_loop()
