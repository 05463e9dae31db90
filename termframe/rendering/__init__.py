"""Rendering components for framed terminal output."""

from .charts import ChartRenderer
from .escapes import (
    RESET,
    EscapeRun,
    LineScan,
    VisibleSpan,
    classify,
    has_active_style,
    has_unclosed_escape,
    needs_reset,
    scan,
    strip,
)
from .frame import FrameComposer
from .styles import (
    DOUBLE_GLYPHS,
    LABEL_MODES,
    LIGHT_BORDER_STYLE,
    LIGHT_GLYPHS,
    STYLES,
    BorderStyle,
    FrameSpec,
    GlyphSet,
)
from .truncation import fit, truncate
from .utils import TextUtils, hex_to_ansi
from .width import char_width, measured_width

__all__ = [
    "RESET",
    "BorderStyle",
    "ChartRenderer",
    "DOUBLE_GLYPHS",
    "EscapeRun",
    "FrameComposer",
    "FrameSpec",
    "GlyphSet",
    "LABEL_MODES",
    "LIGHT_BORDER_STYLE",
    "LIGHT_GLYPHS",
    "LineScan",
    "STYLES",
    "TextUtils",
    "VisibleSpan",
    "char_width",
    "classify",
    "fit",
    "has_active_style",
    "has_unclosed_escape",
    "hex_to_ansi",
    "measured_width",
    "needs_reset",
    "scan",
    "strip",
    "truncate",
]
