"""State management for dashboard."""

from .metrics import DashboardState

__all__ = ["DashboardState"]
