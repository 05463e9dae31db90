"""Terminal state restoration."""

import sys


class TerminalStateManager:
    """Restores the terminal after fullscreen rendering."""

    def __init__(self, term, stream=None):
        self.term = term
        self.stream = stream or sys.stdout
        self.terminal_restored = False

    def restore_terminal(self):
        """Leave fullscreen, reset attributes and show the cursor again."""
        if self.terminal_restored:
            return
        # Exiting fullscreen restores the original terminal content
        print(self.term.exit_fullscreen, end="", file=self.stream)
        print(self.term.normal, end="", file=self.stream)
        print(self.term.visible_cursor, end="", file=self.stream)
        self.stream.flush()
        self.terminal_restored = True
