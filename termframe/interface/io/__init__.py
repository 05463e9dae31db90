"""Log capture for the dashboard."""

from .handlers import DashboardStreamHandler

__all__ = ["DashboardStreamHandler"]
