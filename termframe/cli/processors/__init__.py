"""Argument processing."""

from .config import DEFAULT_FRAME_WIDTH, ConfigBuilder

__all__ = ["ConfigBuilder", "DEFAULT_FRAME_WIDTH"]
