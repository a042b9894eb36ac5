class RoguelikeError(Exception):
    """Base exception for the roguelike demo."""


class ConfigError(RoguelikeError, ValueError):
    """Raised when settings are missing, malformed, or inconsistent."""


class MapBoundsError(RoguelikeError, IndexError):
    """Raised when a grid coordinate falls outside the allocated map."""


class ResourceError(RoguelikeError):
    """Raised when a resource such as the font cannot be loaded."""


class DisplayError(RoguelikeError):
    """Raised when the display surface cannot be created."""
