"""Configuration building from parsed arguments."""

from ...interface import DashboardConfig
from ...rendering import FrameSpec

DEFAULT_FRAME_WIDTH = 80


class ConfigBuilder:
    """Builds frame and dashboard configuration from parsed arguments."""

    @staticmethod
    def create_frame_spec(args):
        """
        Create a FrameSpec from CLI arguments.

        Raises:
            ValueError: If the style, label mode or colour is not recognized.
        """
        width = args.width if args.width is not None else DEFAULT_FRAME_WIDTH
        return FrameSpec(
            width=width,
            label=args.label,
            style="title" if args.title else args.style,
            label_mode=args.label_mode,
            color=args.color,
        )

    @staticmethod
    def create_dashboard_config(args):
        """Create a DashboardConfig from CLI arguments."""
        kwargs = {
            "width": args.width,
            "view": args.view,
            "style": args.style,
            "label_mode": args.label_mode,
            "refresh": args.refresh,
            "seed": args.seed,
        }
        if args.color:
            kwargs["color"] = args.color
        return DashboardConfig(**kwargs)
