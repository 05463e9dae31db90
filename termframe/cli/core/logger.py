"""Logging configuration for the command line."""

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(args):
    """Configure root logging from the parsed ``--debug`` / ``--quiet`` flags."""
    if getattr(args, "debug", False):
        level = logging.DEBUG
    elif getattr(args, "quiet", False):
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        force=True,
        handlers=[logging.StreamHandler()],
    )
    return level
