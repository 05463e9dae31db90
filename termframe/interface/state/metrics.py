"""Demo data state for the dashboard."""

import math
import random
from collections import deque
from threading import Lock

LANGUAGES = ["Go", "TypeScript", "Python", "Rust", "JavaScript"]

BAR_MIN = 10
BAR_MAX = 200


class DashboardState:
    """Holds the series shown by the dashboard panels and refreshes them."""

    def __init__(self, seed=None, max_data_points=30, heatmap_days=365, update_every=5):
        self.lock = Lock()
        self.rng = random.Random(seed)
        self.max_data_points = max_data_points
        self.heatmap_days = heatmap_days
        self.update_every = update_every

        self.counter = 0
        self.line_points = deque(maxlen=max_data_points)
        self.bars = []
        self.heatmap = []

        self.generate()

    def _line_value(self, position):
        return int(50 + 30 * math.sin(position / 5) + self.rng.randrange(20))

    def generate(self):
        """Regenerate every series from scratch."""
        with self.lock:
            self.heatmap = [
                int(abs(math.sin(i / 7) * 20) + self.rng.randrange(10))
                for i in range(self.heatmap_days)
            ]
            self.line_points.clear()
            self.line_points.extend(
                self._line_value(i) for i in range(self.max_data_points)
            )
            self.bars = [
                [lang, 100 - i * 15 + self.rng.randrange(20)]
                for i, lang in enumerate(LANGUAGES)
            ]

    def tick(self):
        """Advance one refresh; data moves every ``update_every`` ticks."""
        self.counter += 1
        if self.counter % self.update_every == 0:
            self.update_data()

    def update_data(self):
        """Shift the line series and let bar values drift."""
        with self.lock:
            self.line_points.append(self._line_value(self.counter))
            for bar in self.bars:
                bar[1] += self.rng.randint(-5, 5)
                bar[1] = max(BAR_MIN, min(BAR_MAX, bar[1]))

    def snapshot(self):
        """Copy the series under the lock for rendering."""
        with self.lock:
            return (
                list(self.heatmap),
                list(self.line_points),
                [tuple(bar) for bar in self.bars],
            )
