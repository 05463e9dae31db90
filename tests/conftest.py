import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from termframe.rendering import FrameComposer, FrameSpec  # noqa: E402

# Lines mixing plain ASCII, colour codes, wide glyphs and malformed escapes
LINE_CORPUS = [
    "abc",
    "hello world, this line is longer than most frames",
    "\x1b[31mabc\x1b[0m",
    "\x1b[1;32mbold green\x1b[0m and plain",
    "\x1b[38;2;33;150;243m████████████\x1b[0m 42",
    "中文字符测试",
    "mixed 中文 and \x1b[33myellow\x1b[0m text",
    "école",
    "\x1b[31mnever reset",
    "dangling at end \x1b[31",
    "\x1bXmalformed escape then text",
    "trailing esc\x1b",
    "m\x1b[0m unmatched terminator first",
    "\x1b[0m",
]

WELL_FORMED_CORPUS = [line for line in LINE_CORPUS if not line.endswith(("\x1b[31", "\x1b"))]


@pytest.fixture
def composer():
    """Frame composer with the default width oracle."""
    return FrameComposer()


@pytest.fixture
def light_spec():
    """Plain light box with a corner label."""
    return FrameSpec(width=20, label="TEST")


@pytest.fixture
def accent_spec():
    """Light box with a raw blue accent on the borders."""
    return FrameSpec(width=10, color="\x1b[34m")
