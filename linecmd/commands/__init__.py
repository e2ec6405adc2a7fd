"""Ready-to-use handlers: help, quit/exit and touch."""

from .common import Help, Quit
from .files import Touch

__all__ = ["Help", "Quit", "Touch"]
