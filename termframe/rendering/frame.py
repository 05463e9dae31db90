"""Frame building and border management."""

import logging

from .escapes import RESET, needs_reset, strip
from .truncation import truncate
from .width import measured_width

logger = logging.getLogger(__name__)

# "┌─ " before a corner label, "╔═══ " before a title
LABEL_PREFIX_WIDTH = 3
TITLE_PREFIX_WIDTH = 5
CORNER_WIDTH = 1
# One border glyph and one padding space on each side of a content row
CONTENT_OVERHEAD = 4


class FrameComposer:
    """
    Renders bordered terminal regions around already-rendered content lines.

    Every method is a pure function of its arguments. Widths that are too
    small for the fixed overhead clamp fill and content to zero instead of
    raising, so a bad layout never aborts a frame half-way through.
    """

    def __init__(self, measure=measured_width):
        self.measure = measure

    def visible_width(self, text):
        return self.measure(strip(text))

    def _paint(self, spec, glyphs):
        """Wrap border glyphs in the accent colour, if one is set."""
        if not spec.color:
            return glyphs
        return spec.color + glyphs + RESET

    def _close(self, text):
        """Reset after a label or title that leaves a style switched on."""
        return RESET if needs_reset(text) else ""

    def _fill(self, spec, count):
        if count < 0:
            logger.debug(
                "Label %r does not fit a %d column frame", spec.label, spec.width
            )
        return spec.glyphs.horizontal * max(0, count)

    def top_border(self, spec):
        """Create the top border, with the label placed per ``spec.label_mode``."""
        g = spec.glyphs
        if not spec.label or spec.label_mode == "none":
            edge = g.horizontal * max(0, spec.width - 2)
            return self._paint(spec, g.top_left + edge + g.top_right) + "\n"

        label_width = self.visible_width(spec.label)

        if spec.label_mode == "centered-title":
            total = spec.width - 2 * CORNER_WIDTH - label_width - 2
            left = max(0, total) // 2
            right = self._fill(spec, total - left)
            return (
                self._paint(spec, g.top_left + g.horizontal * left + " ")
                + spec.label
                + self._close(spec.label)
                + self._paint(spec, " " + right + g.top_right)
                + "\n"
            )

        # ┌─ LABEL ──────────────┐
        fill = spec.width - label_width - LABEL_PREFIX_WIDTH - CORNER_WIDTH
        return (
            self._paint(spec, g.top_left + g.horizontal + " ")
            + spec.label
            + self._close(spec.label)
            + self._paint(spec, self._fill(spec, fill) + g.top_right)
            + "\n"
        )

    def bottom_border(self, spec):
        """Create the bottom border."""
        g = spec.glyphs
        return (
            self._paint(
                spec,
                g.bottom_left + g.horizontal * max(0, spec.width - 2) + g.bottom_right,
            )
            + "\n"
        )

    def content_row(self, spec, line):
        """
        Wrap a single content line with borders and padding.

        Empty lines produce no row at all. Lines wider than the content area
        are truncated, shorter ones are padded so the row measures exactly
        ``spec.width`` columns.
        """
        if line == "":
            return ""

        content_width = max(0, spec.width - CONTENT_OVERHEAD)
        display_width = self.visible_width(line)
        if display_width > content_width:
            line = truncate(line, content_width, self.measure)
            display_width = self.visible_width(line)

        vertical = self._paint(spec, spec.glyphs.vertical)
        parts = [vertical, " ", line]
        # Close anything the content left switched on before padding
        if needs_reset(line):
            parts.append(RESET)
        parts.append(" " * max(0, content_width - display_width))
        parts.append(" ")
        parts.append(vertical)
        parts.append("\n")
        return "".join(parts)

    def wrap_content(self, spec, content):
        """Wrap every line of a multi-line string; empty lines are dropped."""
        return "".join(self.content_row(spec, line) for line in content.splitlines())

    def render_complete(self, spec, content):
        """Render a complete box with top, content, and bottom."""
        return self.top_border(spec) + self.wrap_content(spec, content) + self.bottom_border(spec)

    def title_bar(self, spec):
        """Create the title header: ╔═══ Title ═════════╗"""
        g = spec.title_glyphs
        title = spec.label
        fill = spec.width - TITLE_PREFIX_WIDTH - self.visible_width(title) - 1 - CORNER_WIDTH
        if fill < 0:
            logger.debug("Title %r does not fit a %d column frame", title, spec.width)
        return (
            self._paint(spec, g.top_left + g.horizontal * 3 + " ")
            + title
            + self._close(title)
            + self._paint(spec, " " + g.horizontal * max(0, fill) + g.top_right)
            + "\n"
        )

    def title_info_row(self, spec, content):
        """Add a content line between the title bar's vertical borders, unpadded."""
        vertical = self._paint(spec, spec.title_glyphs.vertical)
        closing = RESET if needs_reset(content) else ""
        return vertical + content + closing + vertical + "\n"

    def title_bottom(self, spec):
        """Create the bottom border of the title bar."""
        g = spec.title_glyphs
        return (
            self._paint(
                spec,
                g.bottom_left + g.horizontal * max(0, spec.width - 2) + g.bottom_right,
            )
            + "\n"
        )

    def render_title(self, spec, info_lines=()):
        """Render a title header, its info rows, and the bottom border."""
        rows = [self.title_bar(spec)]
        rows.extend(self.title_info_row(spec, line) for line in info_lines)
        rows.append(self.title_bottom(spec))
        return "".join(rows)

    def check_alignment(self, spec, rendered):
        """Check that every row of a rendered region measures ``spec.width``."""
        return all(
            self.visible_width(row) == spec.width for row in rendered.splitlines()
        )
