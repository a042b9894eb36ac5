from __future__ import annotations

import logging
import time
from collections import deque
from pathlib import Path
from typing import Deque, Dict, Optional, Tuple

import arcade

from ..config import DisplayConfig
from ..exceptions import DisplayError, ResourceError
from ..input.actions import KeyPress
from .colors import Color
from .console import Console
from .terminal import Terminal

logger = logging.getLogger(__name__)

# Arcade key symbols reported under their canonical names.
_NAMED_KEYS = ("UP", "DOWN", "LEFT", "RIGHT", "ESCAPE", "ENTER", "RETURN", "SPACE", "TAB")
_LETTERS = tuple(chr(c) for c in range(ord("A"), ord("Z") + 1))
_FUNCTION_KEYS = tuple(f"F{n}" for n in range(1, 13))


def _key_names() -> Dict[int, str]:
    names: Dict[int, str] = {}
    for name in _NAMED_KEYS + _LETTERS + _FUNCTION_KEYS:
        symbol = getattr(arcade.key, name, None)
        if symbol is not None:
            names.setdefault(symbol, name)
    # Top-row and keypad digits are both reported as the bare digit.
    for digit in "0123456789":
        for attr in (f"KEY_{digit}", f"NUM_{digit}"):
            symbol = getattr(arcade.key, attr, None)
            if symbol is not None:
                names.setdefault(symbol, digit)
    return names


def load_font(display: DisplayConfig) -> str:
    """Load the configured font file and return the font name to draw with.

    Raises ResourceError when the file is missing or cannot be loaded.
    """
    if display.font_path is None:
        return display.font_name
    path = Path(display.font_path)
    if not path.is_file():
        raise ResourceError(f"Font file not found: {path}")
    try:
        arcade.load_font(str(path))
    except Exception as exc:
        raise ResourceError(f"Failed to load font {path}: {exc}") from exc
    logger.info("Loaded font %s", path)
    return display.font_name


class _ConsoleWindow(arcade.Window):
    """Arcade window that queues key presses instead of reacting to them."""

    def __init__(self, width: int, height: int, title: str) -> None:
        super().__init__(width=width, height=height, title=title, resizable=False)
        self.keys: Deque[Tuple[int, int]] = deque()
        self.closed = False
        self.dirty = False

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        self.keys.append((symbol, modifiers))

    def on_resize(self, width: int, height: int) -> None:
        super().on_resize(width, height)
        self.dirty = True

    def on_close(self) -> None:
        self.closed = True
        super().on_close()


class ArcadeTerminal(Terminal):
    """Presents the root console in an Arcade window, one cell per ``cell_px``.

    Waiting for a key pumps the window's event queue directly, so nothing is
    drawn between key presses unless the window needs repainting.
    """

    poll_interval = 0.01

    def __init__(self, display: DisplayConfig) -> None:
        self.display = display
        self.font_name = load_font(display)
        width = display.screen_width * display.cell_px
        height = display.screen_height * display.cell_px
        try:
            self._window = _ConsoleWindow(width, height, display.title)
        except Exception as exc:
            raise DisplayError(f"Could not create {width}x{height} window: {exc}") from exc
        self._names = _key_names()
        self._glyphs: Dict[Tuple[int, int], arcade.Text] = {}
        self._last_root: Optional[Console] = None
        self._frame_time = 1.0 / display.limit_fps if display.limit_fps > 0 else 0.0
        self._last_present: Optional[float] = None
        self._released = False
        logger.info("Opened %dx%d window '%s'", width, height, display.title)

    # ---- Presentation ----------------------------------------------------
    def present(self, root: Console) -> None:
        self._throttle()
        self._last_root = root
        self._draw(root)

    def _throttle(self) -> None:
        now = time.perf_counter()
        if self._last_present is not None and self._frame_time > 0:
            remaining = self._frame_time - (now - self._last_present)
            if remaining > 0:
                time.sleep(remaining)
        self._last_present = time.perf_counter()

    def _draw(self, root: Console) -> None:
        window = self._window
        window.switch_to()
        window.clear()
        cell = self.display.cell_px
        for y in range(root.height):
            bottom = (root.height - 1 - y) * cell
            # Runs of equal background colour are drawn as one rectangle.
            run_start = 0
            run_color: Color = root.get_bg(0, y)
            for x in range(1, root.width + 1):
                color = root.get_bg(x, y) if x < root.width else None
                if color != run_color:
                    arcade.draw_lrbt_rectangle_filled(
                        run_start * cell, x * cell, bottom, bottom + cell, run_color
                    )
                    if color is not None:
                        run_start, run_color = x, color
            for x in range(root.width):
                ch, fg, _ = root.cell(x, y)
                if ch == " ":
                    continue
                self._glyph(x, y, bottom, ch, fg).draw()
        window.flip()
        window.dirty = False

    def _glyph(self, x: int, y: int, bottom: int, ch: str, fg: Color) -> arcade.Text:
        cell = self.display.cell_px
        text = self._glyphs.get((x, y))
        if text is None:
            text = arcade.Text(
                ch,
                x * cell + cell / 2,
                bottom + cell / 2,
                fg,
                font_size=cell * 0.75,
                font_name=self.font_name,
                anchor_x="center",
                anchor_y="center",
            )
            self._glyphs[(x, y)] = text
        else:
            text.text = ch
            text.color = fg
        return text

    # ---- Input -----------------------------------------------------------
    def wait_for_keypress(self) -> Optional[KeyPress]:
        window = self._window
        while True:
            window.dispatch_events()
            if window.closed:
                return None
            if window.keys:
                symbol, modifiers = window.keys.popleft()
                return KeyPress(
                    key=self._names.get(symbol, symbol),
                    shift=bool(modifiers & arcade.key.MOD_SHIFT),
                    ctrl=bool(modifiers & arcade.key.MOD_CTRL),
                    alt=bool(modifiers & arcade.key.MOD_ALT),
                )
            if window.dirty and self._last_root is not None:
                self._draw(self._last_root)
            time.sleep(self.poll_interval)

    def window_closed(self) -> bool:
        return self._window.closed

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        self._window.closed = True
        self._window.close()
        logger.info("Window closed")
