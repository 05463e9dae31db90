"""Core terminal dashboard implementation."""

import logging
import sys
import time
from collections import deque
from dataclasses import dataclass
from threading import Lock
from typing import Optional

import blessed

from ..rendering import ChartRenderer, FrameComposer, FrameSpec, TextUtils
from ..rendering.utils import normalize_color
from .io import DashboardStreamHandler
from .state import DashboardState
from .terminal import TerminalStateManager, managed_terminal

logger = logging.getLogger(__name__)

VIEWS = ("multi", "heatmap", "line", "bar")

MIN_WIDTH = 20


@dataclass
class DashboardConfig:
    """Options for one dashboard instance."""

    width: Optional[int] = None
    color: str = "#2196F3"
    view: str = "multi"
    style: str = "light"
    label_mode: str = "corner-label"
    title: str = "DataViz Terminal Dashboard"
    refresh: float = 1.0
    seed: Optional[int] = None
    log_lines: int = 5
    max_log_lines: int = 200

    def __post_init__(self):
        if self.view not in VIEWS:
            raise ValueError(
                f"Unknown dashboard view {self.view!r} (choices: {', '.join(VIEWS)})"
            )
        if self.refresh <= 0:
            raise ValueError("Refresh interval must be positive")
        normalize_color(self.color)


class Dashboard:
    """
    Renders a title bar and framed chart panels, once or on a refresh loop.

    One instance covers every panel layout; the view and accent colour come
    from ``DashboardConfig`` and every panel is drawn by the same composer.
    """

    def __init__(self, config=None, state=None, term=None):
        self.config = config or DashboardConfig()
        self.state = state or DashboardState(seed=self.config.seed)
        self.term = term or blessed.Terminal()

        self.text_utils = TextUtils()
        self.composer = FrameComposer(self.text_utils.measure)
        self.chart_renderer = ChartRenderer()

        self.lock = Lock()
        self.log_buffer = deque(maxlen=self.config.max_log_lines)
        self.running = False

    def add_log(self, message):
        """Add a log message."""
        with self.lock:
            stripped_message = self.text_utils.strip_ansi(message)
            new_lines = [line for line in stripped_message.splitlines() if line]
            self.log_buffer.extend(new_lines)

    def _get_terminal_size(self):
        return self.term.width, self.term.height

    def box_width(self, columns):
        return max(MIN_WIDTH, self.config.width or columns)

    def spec(self, label, width, style=None, label_mode=None):
        return FrameSpec(
            width=width,
            label=label,
            style=style or self.config.style,
            label_mode=label_mode or self.config.label_mode,
            color=self.config.color,
        )

    def render_title(self, width, size):
        """Render the title block with the size and counter line."""
        columns, lines = size
        info = (
            f" Size: {columns}x{lines} • Counter: {self.state.counter}s"
            f" • View: {self.config.view} • Ctrl-C to quit"
        )
        # Keep the header within the box: "╔═══ " + title + " ╗"
        title = self.text_utils.truncate_to_width(self.config.title, width - 7)
        spec = self.spec(title, width, style="title")
        return self.composer.render_title(
            spec, [self.text_utils.visual_ljust(info, width - 2)]
        )

    def render_panel(self, label, lines, width):
        """Render one labeled panel around content lines."""
        spec = self.spec(self.text_utils.truncate_to_width(label, width - 4), width)
        return self.composer.render_complete(spec, "\n".join(lines))

    def _panels(self, width, lines):
        content_width = width - 4
        heatmap, points, bars = self.state.snapshot()
        line_height = 20 if lines > 40 else 15

        panels = {
            "heatmap": (
                "CONTRIBUTION HEATMAP",
                lambda: self.chart_renderer.draw_heatmap(heatmap, content_width),
            ),
            "line": (
                "METRICS LINE GRAPH",
                lambda: self.chart_renderer.draw_chart(points, content_width, line_height),
            ),
            "bar": (
                "LANGUAGE USAGE BAR CHART",
                lambda: self.chart_renderer.draw_bars(bars, content_width),
            ),
        }
        order = ["heatmap", "line", "bar"] if self.config.view == "multi" else [self.config.view]
        return [panels[name] for name in order]

    def render(self, size=None):
        """Create a complete dashboard frame as a single string."""
        size = size or self._get_terminal_size()
        columns, lines = size
        width = self.box_width(columns)

        sections = [self.render_title(width, size)]
        for label, draw in self._panels(width, lines):
            sections.append(self.render_panel(label, draw(), width))

        with self.lock:
            messages = list(self.log_buffer)
        log_lines = []
        for message in messages:
            log_lines.extend(self.text_utils.wrap_text(message, width - 4))
        log_lines = log_lines[-self.config.log_lines:]
        if log_lines:
            sections.append(self.render_panel("LOG", log_lines, width))

        return "\n".join(sections)

    def run(self, once=False, stream=None):
        """Print one frame, or refresh in fullscreen until interrupted."""
        stream = stream or sys.stdout
        if once:
            stream.write(self.render())
            stream.flush()
            return

        handler = DashboardStreamHandler(self)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        # Route logging into the LOG panel while the screen is ours
        root_logger = logging.getLogger()
        previous_handlers = root_logger.handlers[:]
        root_logger.handlers = [handler]

        terminal_manager = TerminalStateManager(self.term, stream)
        self.running = True
        try:
            with managed_terminal(self.term, terminal_manager):
                while self.running:
                    self.state.tick()
                    frame = self.render()
                    print(self.term.home + self.term.clear + frame, end="", file=stream)
                    stream.flush()
                    time.sleep(self.config.refresh)
        except KeyboardInterrupt:
            logger.debug("Dashboard interrupted after %d ticks", self.state.counter)
        finally:
            self.running = False
            root_logger.handlers = previous_handlers
