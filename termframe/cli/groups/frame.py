"""Framing-related CLI arguments."""

from ...rendering import LABEL_MODES, STYLES


class FrameGroup:
    """Frame geometry and border configuration arguments."""

    name = "frame"

    @classmethod
    def add_arguments(cls, parser):
        """Add frame arguments to the parser."""
        group = parser.add_argument_group(cls.name)

        group.add_argument(
            "--input",
            type=str,
            default="-",
            help="Path to the text to frame, or '-' for stdin",
        )

        group.add_argument(
            "--width",
            type=int,
            default=None,
            help="Total frame width in columns, borders included (80 when framing, terminal width for the dashboard)",
        )

        group.add_argument(
            "--label",
            type=str,
            default="",
            help="Label drawn into the top border",
        )

        group.add_argument(
            "--style",
            type=str,
            choices=STYLES,
            default="light",
            help="Border glyph set",
        )

        group.add_argument(
            "--label-mode",
            type=str,
            choices=LABEL_MODES,
            default="corner-label",
            help="Where the label sits in the top border",
        )

        group.add_argument(
            "--color",
            type=str,
            default="",
            help="Accent color for border glyphs (hex format, e.g. #3B82F6)",
        )

        group.add_argument(
            "--title",
            action="store_true",
            default=False,
            help="Render the input as info rows of a double-line title block",
        )

    @classmethod
    def process_args(cls, args):
        if args.width is not None and args.width < 0:
            args.width = 0
