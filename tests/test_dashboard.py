import contextlib
import io
import logging

import blessed
import pytest

from termframe.interface import Dashboard, DashboardConfig
from termframe.interface.io import DashboardStreamHandler
from termframe.interface.state import DashboardState
from termframe.rendering import has_active_style, has_unclosed_escape, strip
from termframe.rendering.width import measured_width


@pytest.fixture
def dashboard():
    config = DashboardConfig(width=70, seed=7)
    return Dashboard(config, term=blessed.Terminal(force_styling=None))


def test_every_row_matches_the_box_width(dashboard):
    frame = dashboard.render(size=(100, 30))

    rows = [row for row in frame.splitlines() if row]
    assert rows
    for row in rows:
        assert measured_width(strip(row)) == 70


def test_no_colour_leaks_past_a_row(dashboard):
    for row in dashboard.render(size=(100, 30)).splitlines():
        assert not has_unclosed_escape(row)
        assert not has_active_style(row)


def test_multi_view_shows_every_panel(dashboard):
    frame = strip(dashboard.render(size=(100, 30)))

    assert "DataViz Terminal Dashboard" in frame
    assert "Size: 100x30" in frame
    assert "CONTRIBUTION HEATMAP" in frame
    assert "METRICS LINE GRAPH" in frame
    assert "LANGUAGE USAGE BAR CHART" in frame
    assert "LOG" not in frame


def test_single_view_shows_one_panel():
    config = DashboardConfig(width=60, view="bar", seed=1)
    frame = strip(Dashboard(config).render(size=(60, 20)))

    assert "LANGUAGE USAGE BAR CHART" in frame
    assert "CONTRIBUTION HEATMAP" not in frame


def test_small_terminal_is_clamped():
    dashboard = Dashboard(DashboardConfig(seed=3))
    frame = dashboard.render(size=(5, 5))

    assert all(measured_width(strip(row)) == 20 for row in frame.splitlines() if row)


def test_log_panel_shows_stripped_messages(dashboard):
    dashboard.add_log("\x1b[31mfirst\x1b[0m\nsecond")

    frame = strip(dashboard.render(size=(100, 30)))

    assert "LOG" in frame
    assert "first" in frame
    assert "second" in frame


def test_stream_handler_routes_records(dashboard):
    handler = DashboardStreamHandler(dashboard)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    record = logging.LogRecord("test", logging.WARNING, __file__, 1, "disk %s", ("full",), None)

    handler.emit(record)

    assert list(dashboard.log_buffer) == ["WARNING disk full"]


def test_run_once_writes_a_single_frame(dashboard):
    stream = io.StringIO()

    dashboard.run(once=True, stream=stream)

    assert "CONTRIBUTION HEATMAP" in strip(stream.getvalue())


@pytest.mark.parametrize(
    "kwargs",
    [{"view": "pie"}, {"refresh": 0}, {"color": "#12"}],
)
def test_invalid_config_raises(kwargs):
    with pytest.raises(ValueError):
        DashboardConfig(**kwargs)


def test_state_updates_every_fifth_tick():
    state = DashboardState(seed=11)
    before = list(state.line_points)

    for _ in range(4):
        state.tick()
    assert list(state.line_points) == before

    state.tick()
    assert state.counter == 5
    assert list(state.line_points)[:-1] == before[1:]


def test_bar_values_stay_in_range():
    state = DashboardState(seed=5)

    for _ in range(500):
        state.update_data()

    assert all(10 <= value <= 200 for _, value in state.bars)
    assert len(state.line_points) == state.max_data_points


def test_seeded_state_is_reproducible():
    assert DashboardState(seed=42).snapshot() == DashboardState(seed=42).snapshot()


def test_stream_handler_reports_formatting_errors(dashboard, monkeypatch):
    handler = DashboardStreamHandler(dashboard)
    failures = []
    monkeypatch.setattr(handler, "handleError", failures.append)
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "%d items", ("many",), None)

    handler.emit(record)

    assert failures == [record]
    assert list(dashboard.log_buffer) == []


def test_long_log_messages_are_wrapped(dashboard):
    dashboard.add_log("word " * 30)

    frame = strip(dashboard.render(size=(100, 30)))
    log_rows = [row for row in frame.splitlines() if "word" in row]

    assert len(log_rows) >= 2
    assert all(measured_width(row) == 70 for row in log_rows)


class FakeTerminal:
    """Terminal stand-in recording fullscreen use."""

    exit_fullscreen = "<exit-fullscreen>"
    normal = "<normal>"
    visible_cursor = "<visible-cursor>"
    home = "<home>"
    clear = "<clear>"
    width = 80
    height = 24

    def __init__(self):
        self.entered = []

    @contextlib.contextmanager
    def fullscreen(self):
        self.entered.append("fullscreen")
        yield

    @contextlib.contextmanager
    def hidden_cursor(self):
        self.entered.append("hidden_cursor")
        yield


class InterruptingState(DashboardState):
    """State whose next tick simulates Ctrl-C."""

    def tick(self):
        raise KeyboardInterrupt


def test_live_run_restores_terminal_and_handlers():
    term = FakeTerminal()
    dashboard = Dashboard(DashboardConfig(seed=2), state=InterruptingState(seed=2), term=term)
    root_logger = logging.getLogger()
    handlers_before = root_logger.handlers[:]
    stream = io.StringIO()

    dashboard.run(stream=stream)

    output = stream.getvalue()
    assert term.entered == ["fullscreen", "hidden_cursor"]
    assert output.endswith("<exit-fullscreen><normal><visible-cursor>")
    assert root_logger.handlers == handlers_before
    assert not dashboard.running


def test_live_run_renders_frames_until_interrupted():
    class StopAfterTwo(DashboardState):
        def tick(self):
            if self.counter == 2:
                raise KeyboardInterrupt
            super().tick()

    term = FakeTerminal()
    config = DashboardConfig(width=40, seed=4, refresh=0.001)
    dashboard = Dashboard(config, state=StopAfterTwo(seed=4), term=term)
    stream = io.StringIO()

    dashboard.run(stream=stream)

    output = stream.getvalue()
    assert output.count("<home><clear>") == 2
    assert "CONTRIBUTION HEATMAP" in output
    assert output.endswith("<visible-cursor>")
