from .console import Console, blit
from .renderer import render_all
from .terminal import HeadlessTerminal, Terminal

__all__ = ["Console", "HeadlessTerminal", "Terminal", "blit", "render_all"]
