"""Dashboard-related CLI arguments."""

from ...interface import VIEWS


class DashboardGroup:
    """Demo dashboard arguments."""

    name = "dashboard"

    @classmethod
    def add_arguments(cls, parser):
        """Add dashboard arguments to the parser."""
        group = parser.add_argument_group(cls.name)

        group.add_argument(
            "--dashboard",
            action="store_true",
            default=False,
            help="Render the demo dashboard instead of framing input",
        )

        group.add_argument(
            "--view",
            type=str,
            choices=VIEWS,
            default="multi",
            help="Which dashboard panels to show",
        )

        group.add_argument(
            "--once",
            action="store_true",
            default=False,
            help="Print a single dashboard frame and exit",
        )

        group.add_argument(
            "--refresh",
            type=float,
            default=1.0,
            help="Seconds between dashboard refreshes",
        )

        group.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Seed for the demo data",
        )
