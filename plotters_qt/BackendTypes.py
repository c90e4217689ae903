# BackendTypes - Toolkit-independent value types of the backend contract
#
# The plotting engine talks to every drawing backend through the same
# small set of value objects: colors, stroke styles and text styles.
# They are plain immutable values, converted to toolkit objects at the
# point of use and never retained by a backend.
#
# Zero Qt dependencies.

from collections import namedtuple

# Font styles (weight and slant are orthogonal, so exactly one applies)
FONT_NORMAL = 0
FONT_BOLD = 1
FONT_ITALIC = 2
FONT_OBLIQUE = 3
FONT_STYLES = ["normal", "bold", "italic", "oblique"]

# Horizontal anchor positions
HPOS_LEFT = 0
HPOS_CENTER = 1
HPOS_RIGHT = 2

# Vertical anchor positions
VPOS_TOP = 0
VPOS_CENTER = 1
VPOS_BOTTOM = 2

# Text rotations
TRANSFORM_NONE = 0
TRANSFORM_ROTATE90 = 1
TRANSFORM_ROTATE180 = 2
TRANSFORM_ROTATE270 = 3

# Fill rules for filled paths
FILL_WINDING = "winding"
FILL_EVENODD = "evenodd"
FILL_RULES = (FILL_WINDING, FILL_EVENODD)


class BackendError(Exception):
    """Rendering backend failure.

    Raised only when the host toolkit cannot perform a drawing call
    (no GUI application, destroyed native object). Caller geometry
    never raises this.
    """


class BackendColor(namedtuple("BackendColor", ("rgb", "alpha"))):
    """An RGB color with 0-255 channels and a 0-1 alpha."""

    __slots__ = ()

    def __new__(cls, rgb, alpha=1.0):
        r, g, b = rgb
        return super().__new__(cls, (int(r), int(g), int(b)), float(alpha))


BLACK = BackendColor((0, 0, 0))


class BackendStyle:
    """Stroke style of a shape: a color and a stroke width in pixels."""

    __slots__ = ("_color", "_stroke_width")

    def __init__(self, color=BLACK, stroke_width=1):
        if stroke_width < 0:
            raise ValueError(f"stroke width must be >= 0, got {stroke_width}")
        self._color = color
        self._stroke_width = stroke_width

    def color(self):
        return self._color

    def stroke_width(self):
        return self._stroke_width

    def __repr__(self):
        return f"BackendStyle({self._color!r}, {self._stroke_width})"


class TextAnchor:
    """Alignment point of a text relative to its draw position."""

    __slots__ = ("h_pos", "v_pos")

    def __init__(self, h_pos=HPOS_LEFT, v_pos=VPOS_TOP):
        self.h_pos = h_pos
        self.v_pos = v_pos

    def __eq__(self, other):
        return (isinstance(other, TextAnchor)
                and (self.h_pos, self.v_pos) == (other.h_pos, other.v_pos))

    def __hash__(self):
        return hash((self.h_pos, self.v_pos))

    def __repr__(self):
        return f"TextAnchor({self.h_pos}, {self.v_pos})"


class BackendTextStyle:
    """Font and placement of a text draw or measure call."""

    __slots__ = ("_family", "_size", "_style", "_anchor", "_transform",
                 "_color")

    def __init__(self, family="sans-serif", size=12.0, style=FONT_NORMAL,
                 anchor=None, transform=TRANSFORM_NONE, color=BLACK):
        """
        Args:
            family: Font family name.
            size: Absolute font size in pixels, must be positive.
            style: One of the FONT_* constants.
            anchor: TextAnchor, defaults to left/top.
            transform: One of the TRANSFORM_* constants.
            color: BackendColor of the glyphs.
        """
        if size <= 0:
            raise ValueError(f"font size must be positive, got {size}")
        if style not in (FONT_NORMAL, FONT_BOLD, FONT_ITALIC, FONT_OBLIQUE):
            raise ValueError(f"unknown font style {style!r}")
        self._family = family
        self._size = float(size)
        self._style = style
        self._anchor = anchor if anchor is not None else TextAnchor()
        self._transform = transform
        self._color = color

    def family(self):
        return self._family

    def size(self):
        return self._size

    def style(self):
        return self._style

    def anchor(self):
        return self._anchor

    def transform(self):
        return self._transform

    def color(self):
        return self._color

    def __repr__(self):
        return (f"BackendTextStyle({self._family!r}, {self._size}, "
                f"{FONT_STYLES[self._style]}, {self._anchor!r}, "
                f"{self._transform})")
