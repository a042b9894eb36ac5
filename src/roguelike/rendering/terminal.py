from __future__ import annotations

import abc
import logging
from collections import deque
from typing import Iterable, List, Optional, Union

from ..input.actions import KeyPress
from .console import Console

logger = logging.getLogger(__name__)


class Terminal(abc.ABC):
    """Boundary to whatever shows the root console and produces key presses.

    Implementations are thin adapters; the game loop only talks to this
    interface so it can run against a real window or a scripted test double.
    """

    @abc.abstractmethod
    def present(self, root: Console) -> None:
        """Show the fully composed root console."""

    @abc.abstractmethod
    def wait_for_keypress(self) -> Optional[KeyPress]:
        """Block until a key is pressed. Returns None if the window closed instead."""

    @abc.abstractmethod
    def window_closed(self) -> bool:
        """True once the user has closed the window."""

    def close(self) -> None:
        """Release backend resources. Safe to call more than once."""


def parse_keys(script: str) -> List[KeyPress]:
    """Parse a comma separated key script such as ``"RIGHT,RIGHT,ESCAPE"``.

    A ``SHIFT+``, ``CTRL+`` or ``ALT+`` prefix sets the matching modifier.
    """
    presses: List[KeyPress] = []
    for token in script.split(","):
        token = token.strip()
        if not token:
            continue
        *mods, key = [part.strip().upper() for part in token.split("+")]
        presses.append(
            KeyPress(key=key, shift="SHIFT" in mods, ctrl="CTRL" in mods, alt="ALT" in mods)
        )
    return presses


class HeadlessTerminal(Terminal):
    """Scripted terminal for tests and the ``--headless`` CLI mode.

    Keys are served from the script in order. When the script runs out the
    terminal behaves as if the user closed the window.
    """

    def __init__(self, keys: Iterable[Union[KeyPress, str]] = ()) -> None:
        self._keys = deque(k if isinstance(k, KeyPress) else KeyPress(k) for k in keys)
        self._closed = False
        self.frames = 0
        self.last_frame: List[str] = []

    def present(self, root: Console) -> None:
        self.frames += 1
        self.last_frame = root.to_str_lines()

    def wait_for_keypress(self) -> Optional[KeyPress]:
        if not self._keys:
            logger.debug("Key script exhausted; closing headless terminal")
            self._closed = True
            return None
        return self._keys.popleft()

    def window_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    @property
    def pending(self) -> int:
        return len(self._keys)
