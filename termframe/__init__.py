from termframe.rendering import (
    FrameComposer,
    FrameSpec,
    TextUtils,
    classify,
    has_unclosed_escape,
    measured_width,
    strip,
    truncate,
)

__version__ = "0.1.0"
