"""Display width measurement backed by wcwidth."""

import wcwidth


def char_width(ch):
    """Columns occupied by a single character. Non-printables count as zero."""
    return max(wcwidth.wcwidth(ch), 0)


def measured_width(text):
    """
    Visible width of an already-stripped string.

    Additive over characters, so measuring a prefix never exceeds measuring
    the whole string.
    """
    return sum(char_width(ch) for ch in text)
