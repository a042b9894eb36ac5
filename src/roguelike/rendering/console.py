from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .colors import BLACK, WHITE, Color, lerp

logger = logging.getLogger(__name__)


class Console:
    """A grid of character cells, each with a glyph, foreground and background.

    Used both for the offscreen map buffer and for the root console that a
    terminal presents. Coordinates are (x, y) with (0, 0) at the top-left.
    Any cell access outside the grid raises IndexError.
    """

    def __init__(
        self,
        width: int,
        height: int,
        default_fg: Color = WHITE,
        default_bg: Color = BLACK,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Console size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.default_fg = default_fg
        self.default_bg = default_bg
        self._chars: List[List[str]] = []
        self._fg: List[List[Color]] = []
        self._bg: List[List[Color]] = []
        self.clear()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})"
            )

    def clear(self) -> None:
        """Reset every cell to a blank glyph in the default colours."""
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._fg = [[self.default_fg] * self.width for _ in range(self.height)]
        self._bg = [[self.default_bg] * self.width for _ in range(self.height)]

    # ---- Drawing ---------------------------------------------------------
    def put_char(self, x: int, y: int, ch: str, fg: Optional[Color] = None) -> None:
        """Set the glyph and foreground of a cell, leaving its background alone."""
        self._check(x, y)
        self._chars[y][x] = ch
        self._fg[y][x] = self.default_fg if fg is None else fg

    def set_char_background(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._bg[y][x] = color

    # ---- Query -----------------------------------------------------------
    def get_char(self, x: int, y: int) -> str:
        self._check(x, y)
        return self._chars[y][x]

    def get_fg(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self._fg[y][x]

    def get_bg(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self._bg[y][x]

    def cell(self, x: int, y: int) -> Tuple[str, Color, Color]:
        self._check(x, y)
        return self._chars[y][x], self._fg[y][x], self._bg[y][x]

    def to_str_lines(self) -> List[str]:
        return ["".join(row) for row in self._chars]

    def __repr__(self) -> str:
        return f"Console({self.width}x{self.height})"


def blit(
    src: Console,
    src_xy: Tuple[int, int],
    size: Tuple[int, int],
    dst: Console,
    dst_xy: Tuple[int, int],
    fg_alpha: float = 1.0,
    bg_alpha: float = 1.0,
) -> int:
    """Copy a ``size`` region of ``src`` onto ``dst`` at ``dst_xy``.

    Alpha 1.0 replaces the destination colours, 0.0 keeps them, anything in
    between blends. Glyphs are copied whenever ``fg_alpha`` is above zero.
    The region is clipped to both consoles. Returns the number of cells copied.
    """
    sx, sy = src_xy
    w, h = size
    dx, dy = dst_xy
    copied = 0
    for oy in range(h):
        for ox in range(w):
            x, y = sx + ox, sy + oy
            tx, ty = dx + ox, dy + oy
            if not (src.in_bounds(x, y) and dst.in_bounds(tx, ty)):
                continue
            ch, fg, bg = src.cell(x, y)
            if fg_alpha > 0.0:
                dst._chars[ty][tx] = ch
                dst._fg[ty][tx] = lerp(dst._fg[ty][tx], fg, fg_alpha)
            dst._bg[ty][tx] = lerp(dst._bg[ty][tx], bg, bg_alpha)
            copied += 1
    if copied < w * h:
        logger.debug("Blit clipped: %d of %d cells copied", copied, w * h)
    return copied
