"""Chart content for framed dashboard panels."""

import asciichartpy

from .escapes import RESET

_SHADES = " ░▒▓█"
_GREEN = "\x1b[32m"
_ORANGE = "\x1b[38;2;255;152;0m"


class ChartRenderer:
    """
    Produces coloured content lines for dashboard panels.

    The output is plain strings with embedded escape sequences; fitting them
    into a frame is left to the frame composer.
    """

    def __init__(self, label_format="{:8.2f}"):
        self.label_format = label_format
        # asciichartpy pads the y-axis labels and adds the axis glyph
        self.axis_width = len(label_format.format(0.0)) + 3

    def draw_chart(self, data, width, height):
        """Draw a line graph from data points."""
        if len(data) < 2 or height < 3:
            return []

        plot_data = list(data)
        points = max(2, width - self.axis_width)
        if len(plot_data) > points:
            step = len(plot_data) / points
            plot_data = [plot_data[int(i * step)] for i in range(points)]

        chart = asciichartpy.plot(
            plot_data,
            {
                "height": height - 2,
                "format": self.label_format,
                "min": min(plot_data),
                "max": max(plot_data),
                "colors": [asciichartpy.blue],
            },
        )
        return chart.split("\n")

    def draw_bars(self, bars, width, label_width=12):
        """Draw one horizontal bar per ``(label, value)`` pair."""
        if not bars:
            return []
        peak = max(value for _, value in bars) or 1
        value_width = len(str(peak)) + 1
        bar_space = max(1, width - label_width - value_width - 1)

        lines = []
        for label, value in bars:
            length = max(1, round(bar_space * value / peak)) if value > 0 else 0
            lines.append(
                f"{label[:label_width].ljust(label_width)} "
                f"{_ORANGE}{'█' * length}{RESET}"
                f"{' ' * (bar_space - length)}{str(value).rjust(value_width)}"
            )
        return lines

    def draw_heatmap(self, counts, width, rows=7):
        """Draw daily counts as a grid of shaded cells, one column per week."""
        if not counts:
            return []
        weeks = max(1, width)
        counts = list(counts)[-(weeks * rows):]
        peak = max(counts) or 1

        lines = []
        for day in range(rows):
            cells = []
            for index in range(day, len(counts), rows):
                shade = _SHADES[min(4, int(counts[index] / peak * 4))]
                cells.append(shade)
            lines.append(_GREEN + "".join(cells) + RESET)
        return lines
