"""Logging handlers for dashboard integration."""

import logging


class DashboardStreamHandler(logging.Handler):
    """Handler that feeds formatted records into the dashboard's LOG panel."""

    def __init__(self, dashboard, level=logging.NOTSET):
        super().__init__(level)
        self.dashboard = dashboard

    def emit(self, record):
        try:
            self.dashboard.add_log(self.format(record))
        except Exception:
            self.handleError(record)
