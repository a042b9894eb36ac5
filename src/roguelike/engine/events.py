from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by Game to notify listeners."""

    PLAYER_MOVED = auto()
    MOVE_BLOCKED = auto()
