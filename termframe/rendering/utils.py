"""Text rendering utilities."""

import textwrap

from .escapes import ESC, strip
from .truncation import fit, truncate
from .width import measured_width


def hex_to_ansi(hex_color):
    """
    Convert a ``#RRGGBB`` colour to a 24-bit ANSI foreground sequence.

    Empty input means "no colour" and returns an empty string.
    """
    if not hex_color:
        return ""
    value = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB colour, got {hex_color!r}")
    try:
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Expected a #RRGGBB colour, got {hex_color!r}") from None
    return f"\x1b[38;2;{r};{g};{b}m"


def normalize_color(color):
    """Accept a hex colour or a raw escape sequence, return an escape sequence."""
    if not color:
        return ""
    if color.startswith(ESC):
        return color
    return hex_to_ansi(color)


class TextUtils:
    """Utilities for text rendering and manipulation."""

    def __init__(self, measure=measured_width):
        self.measure = measure

    def strip_ansi(self, text):
        """Remove ANSI escape sequences from the text."""
        return strip(text)

    def visual_len(self, text):
        """Calculate the visual display width of a possibly coloured string."""
        return self.measure(strip(text))

    def truncate_to_width(self, text, width):
        """Truncate text to fit within a given width, keeping escape sequences."""
        if not text:
            return ""
        return truncate(text, width, self.measure)

    def visual_ljust(self, text, width):
        """Left-justify a string to exactly ``width`` columns."""
        if not text:
            return " " * max(0, width)
        return fit(text, width, self.measure)

    def wrap_text(self, text, width):
        """Wrap plain text to fit within a given width, preserving newlines."""
        wrapped_lines = []
        for line in text.splitlines():
            if line == "":
                wrapped_lines.append("")
                continue
            wrapped = textwrap.wrap(
                line, width=max(1, width), break_long_words=True, replace_whitespace=False
            )
            wrapped_lines.extend(wrapped)
        return wrapped_lines
