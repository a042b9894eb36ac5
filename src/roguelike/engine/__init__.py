"""Game state and the turn-based loop that drives it."""
from .events import GameEvent
from .game_state import Game
from .loop import GameLoop, LoopState

__all__ = ["Game", "GameEvent", "GameLoop", "LoopState"]
