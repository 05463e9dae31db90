"""Escape sequence scanning for ANSI-coloured lines."""

from dataclasses import dataclass
from typing import List, Union

ESC = "\x1b"
CSI = ESC + "["
TERMINATOR = "m"
RESET = "\x1b[0m"

_RESET_SEQUENCES = (CSI + "0m", CSI + "m", CSI + "00m")


@dataclass(frozen=True)
class EscapeRun:
    """
    A contiguous escape sequence within a line.
    ``line[start:end]`` includes the terminating marker when there is one.
    """

    start: int
    end: int
    text: str
    terminated: bool = True
    recognized: bool = True


@dataclass(frozen=True)
class VisibleSpan:
    """A contiguous run of characters that occupy display columns."""

    start: int
    end: int
    text: str


Segment = Union[EscapeRun, VisibleSpan]


@dataclass(frozen=True)
class LineScan:
    """Result of scanning one line from left to right."""

    segments: List[Segment]
    open_count: int
    ends_in_escape: bool

    @property
    def has_unclosed_escape(self):
        return self.open_count > 0

    @property
    def visible_text(self):
        return "".join(s.text for s in self.segments if isinstance(s, VisibleSpan))

    @property
    def escape_runs(self):
        return [s for s in self.segments if isinstance(s, EscapeRun)]


def scan(line: str) -> LineScan:
    """
    Classify every position of a line as escape or visible content.

    An escape run starts at ESC and extends until the terminator ``m`` or the
    end of the line. Only ``ESC [`` counts as a recognized start marker; any
    other run is malformed but is still consumed as escape content. The open
    counter goes up on each recognized start marker and down on each
    terminator, and never drops below zero.
    """
    segments = []
    open_count = 0
    ends_in_escape = False
    length = len(line)
    visible_start = 0
    i = 0

    while i < length:
        if line[i] != ESC:
            i += 1
            continue

        if visible_start < i:
            segments.append(VisibleSpan(visible_start, i, line[visible_start:i]))

        recognized = line.startswith("[", i + 1)
        if recognized:
            open_count += 1

        j = i + 1
        terminated = False
        while j < length:
            ch = line[j]
            j += 1
            if ch == TERMINATOR:
                terminated = True
                break

        if terminated:
            open_count = max(0, open_count - 1)
        else:
            ends_in_escape = True

        segments.append(EscapeRun(i, j, line[i:j], terminated, recognized))
        visible_start = i = j

    if visible_start < length:
        segments.append(VisibleSpan(visible_start, length, line[visible_start:]))

    return LineScan(segments, open_count, ends_in_escape)


def classify(line: str) -> List[Segment]:
    """Return the ordered escape runs and visible spans of a line."""
    return scan(line).segments


def strip(line: str) -> str:
    """Remove every escape run, leaving only the text used for measurement."""
    if ESC not in line:
        return line
    return scan(line).visible_text


def has_unclosed_escape(line: str) -> bool:
    """Check whether a line ends with an escape sequence still open."""
    if ESC not in line:
        return False
    return scan(line).has_unclosed_escape


def is_reset(sequence: str) -> bool:
    return sequence in _RESET_SEQUENCES


def has_active_style(line: str) -> bool:
    """
    Check whether a colour or attribute is still switched on at end of line.

    True when the last complete SGR sequence is anything other than a reset.
    A terminal abandons a sequence interrupted by ESC, so only the part of a
    run after its last ESC takes effect.
    """
    if ESC not in line:
        return False
    active = False
    for run in scan(line).escape_runs:
        if not run.terminated:
            continue
        effective = run.text[run.text.rfind(ESC) :]
        if effective.startswith(CSI):
            active = not is_reset(effective)
    return active


def needs_reset(line: str) -> bool:
    """Check whether a line must be followed by a reset to stop colour bleeding."""
    if ESC not in line:
        return False
    result = scan(line)
    return result.ends_in_escape or result.has_unclosed_escape or has_active_style(line)
