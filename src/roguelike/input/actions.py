from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union


class InputAction(Enum):
    """Logical actions the game loop understands.

    Keeps the loop independent of whichever backend produced the key.
    """

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    EXIT = auto()

    @property
    def delta(self) -> Optional[Tuple[int, int]]:
        """Grid step for movement actions, None for everything else."""
        return _DELTAS.get(self)


_DELTAS = {
    InputAction.MOVE_UP: (0, -1),
    InputAction.MOVE_DOWN: (0, 1),
    InputAction.MOVE_LEFT: (-1, 0),
    InputAction.MOVE_RIGHT: (1, 0),
}


@dataclass(frozen=True)
class KeyPress:
    """One key-down event as delivered by a terminal.

    Attributes:
        key: Canonical key name (e.g. "UP") or a backend key code.
        shift/ctrl/alt: Modifier flags held at the time of the press.
    """

    key: Union[str, int]
    shift: bool = False
    ctrl: bool = False
    alt: bool = False

    @property
    def modified(self) -> bool:
        return self.shift or self.ctrl or self.alt


__all__ = ["InputAction", "KeyPress"]
