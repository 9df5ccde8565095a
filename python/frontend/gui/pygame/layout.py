"""Pixel geometry of the Pygame board, kept free of any pygame import."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardLayout:
    """Square board of ``size`` tiles, ``tile_px`` wide, separated by ``gap``."""

    size: int
    tile_px: int
    gap: int
    origin_x: int
    origin_y: int

    @classmethod
    def fit(cls, size: int, max_px: int, gap: int, top: int, window_w: int) -> BoardLayout:
        """Largest layout of *size* tiles fitting in *max_px*, centred horizontally."""
        tile_px = (max_px - (size + 1) * gap) // size
        total = size * tile_px + (size + 1) * gap
        return cls(
            size=size,
            tile_px=tile_px,
            gap=gap,
            origin_x=(window_w - total) // 2 + gap,
            origin_y=top + gap,
        )

    @property
    def total_px(self) -> int:
        return self.size * self.tile_px + (self.size + 1) * self.gap

    def tile_rect(self, index: int) -> tuple[int, int, int, int]:
        r, c = divmod(index, self.size)
        return (
            self.origin_x + c * (self.tile_px + self.gap),
            self.origin_y + r * (self.tile_px + self.gap),
            self.tile_px,
            self.tile_px,
        )

    def cell_at(self, pos: tuple[int, int]) -> int | None:
        """Return the grid index under pixel *pos*, or ``None`` (gaps and outside)."""
        x = pos[0] - self.origin_x
        y = pos[1] - self.origin_y
        if x < 0 or y < 0:
            return None
        step = self.tile_px + self.gap
        c, dx = divmod(x, step)
        r, dy = divmod(y, step)
        if c >= self.size or r >= self.size or dx >= self.tile_px or dy >= self.tile_px:
            return None
        return r * self.size + c
