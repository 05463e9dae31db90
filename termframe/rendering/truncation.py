"""Width-bounded truncation that keeps escape sequences intact."""

import logging
from typing import Callable

from .escapes import RESET, EscapeRun, scan
from .width import measured_width

logger = logging.getLogger(__name__)


def truncate(
    line: str, max_columns: int, measure: Callable[[str], int] = measured_width
) -> str:
    """
    Truncate a line to at most ``max_columns`` visible columns.

    Escape runs are copied verbatim wherever they occur, including after the
    cut point, so a trailing colour reset survives. Visible characters are
    copied whole until the first one that no longer fits; everything visible
    after it is dropped. The result never ends with an open escape sequence.
    """
    remaining = max(0, max_columns)
    output = []
    cut = False

    for segment in scan(line).segments:
        if isinstance(segment, EscapeRun):
            output.append(segment.text)
            continue
        if cut:
            continue
        for ch in segment.text:
            width = measure(ch)
            if width > remaining:
                cut = True
                break
            output.append(ch)
            remaining -= width

    result = "".join(output)
    tail = scan(result)
    if tail.ends_in_escape or tail.has_unclosed_escape:
        result += RESET

    if cut:
        logger.debug(
            "Truncated line to %d columns (%d unused)", max(0, max_columns), remaining
        )
    return result


def fit(line: str, columns: int, measure: Callable[[str], int] = measured_width) -> str:
    """Truncate then right-pad a line with spaces to exactly ``columns`` columns."""
    columns = max(0, columns)
    fitted = truncate(line, columns, measure)
    used = measure(scan(fitted).visible_text)
    return fitted + " " * max(0, columns - used)
