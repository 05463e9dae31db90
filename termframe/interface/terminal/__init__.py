"""Terminal management and state handling."""

from .context import managed_terminal
from .state import TerminalStateManager

__all__ = ["managed_terminal", "TerminalStateManager"]
