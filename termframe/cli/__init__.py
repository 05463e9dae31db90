"""termframe CLI - frame text or run the demo dashboard."""

import logging
import sys

from ..interface import Dashboard
from ..rendering import FrameComposer, TextUtils
from .core import configure_logging, create_base_parser
from .groups import add_all_argument_groups, process_all_arguments
from .processors import ConfigBuilder

logger = logging.getLogger(__name__)


def initialize_cli(argv=None):
    """
    Build the parser and parse arguments.

    Returns:
        tuple: (parser, args)
    """
    parser = create_base_parser()
    add_all_argument_groups(parser)
    args = parser.parse_args(argv)
    args = process_all_arguments(args)
    return parser, args


def read_data(path):
    """Read the text to frame from a file, or stdin for ``-``."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def frame_text(text, spec, composer=None):
    """Frame text as a labeled box, or as a title block for ``title`` specs."""
    composer = composer or FrameComposer()
    if spec.style != "title":
        return composer.render_complete(spec, text)
    text_utils = TextUtils(composer.measure)
    info_lines = [
        text_utils.visual_ljust(" " + line, spec.width - 2)
        for line in text.splitlines()
        if line
    ]
    return composer.render_title(spec, info_lines)


def main(argv=None):
    """Entry point for the ``termframe`` command."""
    _, args = initialize_cli(argv)
    configure_logging(args)

    try:
        if args.dashboard:
            dashboard = Dashboard(ConfigBuilder.create_dashboard_config(args))
            dashboard.run(once=args.once)
            return 0

        spec = ConfigBuilder.create_frame_spec(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        text = read_data(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading data: {e}", file=sys.stderr)
        return 1

    logger.debug("Framing %d characters at width %d", len(text), spec.width)
    sys.stdout.write(frame_text(text.rstrip("\n"), spec))
    return 0


__all__ = ["initialize_cli", "main", "read_data", "frame_text"]
