"""RGB colour constants shared by the renderer and the default settings."""
from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)

DARK_WALL: Color = (0, 0, 100)
DARK_GROUND: Color = (50, 50, 150)


def lerp(a: Color, b: Color, alpha: float) -> Color:
    """Blend from ``a`` towards ``b``; alpha 0 keeps ``a``, 1 gives ``b``."""
    if alpha >= 1.0:
        return b
    if alpha <= 0.0:
        return a
    return (
        int(round(a[0] + (b[0] - a[0]) * alpha)),
        int(round(a[1] + (b[1] - a[1]) * alpha)),
        int(round(a[2] + (b[2] - a[2]) * alpha)),
    )
