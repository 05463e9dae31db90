"""Terminal dashboard interface for termframe."""

from .dashboard import VIEWS, Dashboard, DashboardConfig

__all__ = ["Dashboard", "DashboardConfig", "VIEWS"]
