"""Terminal context management."""

from contextlib import contextmanager


@contextmanager
def managed_terminal(term, state_manager):
    """Context manager for terminal fullscreen mode."""
    try:
        with term.fullscreen(), term.hidden_cursor():
            yield
    finally:
        state_manager.restore_terminal()
