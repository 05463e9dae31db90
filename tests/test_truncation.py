import pytest
from conftest import LINE_CORPUS, WELL_FORMED_CORPUS

from termframe.rendering.escapes import RESET, has_unclosed_escape, scan, strip
from termframe.rendering.truncation import fit, truncate
from termframe.rendering.width import measured_width


def test_plain_truncation():
    assert truncate("abc", 2) == "ab"


def test_colour_codes_preserved_and_closed():
    """The reset after the cut point is carried into the result."""
    assert truncate("\x1b[31mabc\x1b[0m", 2) == "\x1b[31mab\x1b[0m"


def test_zero_budget_keeps_only_escapes():
    assert truncate("\x1b[31mabc\x1b[0m", 0) == "\x1b[31m\x1b[0m"


def test_negative_budget_clamps_to_zero():
    assert truncate("abc", -5) == ""


def test_wide_glyph_is_never_split():
    """A double-width glyph that does not fit is dropped whole."""
    assert truncate("中文字", 3) == "中"
    assert truncate("中文字", 4) == "中文"


def test_nothing_visible_after_the_cut():
    """Once a glyph is rejected, narrower glyphs after it are dropped too."""
    assert truncate("a中b", 2) == "a"


def test_combining_mark_stays_with_its_base():
    assert truncate("e\u0301xyz", 1) == "e\u0301"


def test_unterminated_tail_gets_reset():
    result = truncate("ab\x1b[31", 10)

    assert result == "ab\x1b[31" + RESET
    assert not has_unclosed_escape(result)
    assert not scan(result).ends_in_escape


def test_trailing_escape_character_gets_closed():
    result = truncate("text\x1b", 10)

    assert not scan(result).ends_in_escape
    assert strip(result) == "text"


def test_custom_width_oracle():
    """The width function is injectable."""
    double = lambda text: 2 * len(text)

    assert truncate("abcd", 4, measure=double) == "ab"


@pytest.mark.parametrize("line", LINE_CORPUS)
@pytest.mark.parametrize("budget", [0, 1, 2, 3, 5, 8, 13, 40])
def test_width_invariant(line, budget):
    """Truncated output never measures more than the budget."""
    assert measured_width(strip(truncate(line, budget))) <= budget


@pytest.mark.parametrize("line", LINE_CORPUS)
@pytest.mark.parametrize("budget", [0, 1, 4, 9, 100])
def test_no_dangling_escape(line, budget):
    result = truncate(line, budget)

    assert not has_unclosed_escape(result)
    assert not scan(result).ends_in_escape


@pytest.mark.parametrize("line", WELL_FORMED_CORPUS)
def test_fitting_line_is_unchanged(line):
    """A line within budget comes back byte-identical."""
    budget = measured_width(strip(line))

    assert truncate(line, budget) == line
    assert truncate(line, budget + 10) == line


@pytest.mark.parametrize("line", LINE_CORPUS)
def test_visible_prefix(line):
    """The visible text of the result is a prefix of the original's."""
    assert strip(line).startswith(strip(truncate(line, 7)))


@pytest.mark.parametrize("line", LINE_CORPUS)
@pytest.mark.parametrize("columns", [0, 3, 10, 60])
def test_fit_pads_to_exact_width(line, columns):
    assert measured_width(strip(fit(line, columns))) == columns
