"""Border glyph sets and frame configuration."""

from dataclasses import dataclass, field

from .utils import normalize_color

STYLES = ("light", "title")
LABEL_MODES = ("none", "corner-label", "centered-title")


@dataclass(frozen=True)
class GlyphSet:
    """Corner and edge characters for one kind of box."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


LIGHT_GLYPHS = GlyphSet("┌", "┐", "└", "┘", "─", "│")
DOUBLE_GLYPHS = GlyphSet("╔", "╗", "╚", "╝", "═", "║")


@dataclass(frozen=True)
class BorderStyle:
    """Glyphs for plain boxes plus a visually distinct set for title bars."""

    box: GlyphSet = LIGHT_GLYPHS
    title: GlyphSet = DOUBLE_GLYPHS

    def glyphs(self, style):
        return self.title if style == "title" else self.box


LIGHT_BORDER_STYLE = BorderStyle()


@dataclass(frozen=True)
class FrameSpec:
    """
    Describes one framed region.

    Args:
        width: Total width in columns, borders included.
        label: Optional label or title text, rendered uncoloured.
        style: ``light`` for boxes or ``title`` for double-line glyphs.
        label_mode: ``none``, ``corner-label`` or ``centered-title``.
        color: Accent for border glyphs, as ``#RRGGBB`` or a raw escape sequence.
        border: Glyph sets to draw with.
    """

    width: int
    label: str = ""
    style: str = "light"
    label_mode: str = "corner-label"
    color: str = ""
    border: BorderStyle = field(default=LIGHT_BORDER_STYLE)

    def __post_init__(self):
        if self.style not in STYLES:
            raise ValueError(
                f"Unknown frame style {self.style!r} (choices: {', '.join(STYLES)})"
            )
        if self.label_mode not in LABEL_MODES:
            raise ValueError(
                f"Unknown label mode {self.label_mode!r} "
                f"(choices: {', '.join(LABEL_MODES)})"
            )
        object.__setattr__(self, "color", normalize_color(self.color))

    @property
    def glyphs(self):
        return self.border.glyphs(self.style)

    @property
    def title_glyphs(self):
        return self.border.title

    @classmethod
    def from_options(cls, width, options=None):
        """Build a spec from a mapping of recognized options, ignoring the rest."""
        options = dict(options or {})
        if "labelMode" in options:
            options.setdefault("label_mode", options.pop("labelMode"))
        known = {"label", "style", "label_mode", "color", "border"}
        return cls(
            width=width,
            **{k: v for k, v in options.items() if k in known and v is not None},
        )
