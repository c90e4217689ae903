# Qt color and stroke mapping
#
# Converts backend colors and styles into QColor and QPen values,
# and fill rule names into Qt fill rules.

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPen

from ..BackendTypes import FILL_WINDING, FILL_EVENODD

# Stroke defaults of the scene recorder: butt caps, miter joins
MITER_LIMIT = 4.0

_FILL_RULES = {
    FILL_WINDING: Qt.FillRule.WindingFill,
    FILL_EVENODD: Qt.FillRule.OddEvenFill,
}


def to_qcolor(color):
    """Convert a BackendColor to a QColor with normalized channels."""
    r, g, b = color.rgb
    return QColor.fromRgbF(r / 255.0, g / 255.0, b / 255.0, color.alpha)


def stroke_pen(style):
    """Create the QPen used to stroke a path with a BackendStyle.

    A zero stroke width draws nothing (Qt would otherwise treat a
    zero-width pen as a one pixel cosmetic pen).
    """
    width = style.stroke_width()
    if width <= 0:
        return QPen(Qt.PenStyle.NoPen)
    pen = QPen(to_qcolor(style.color()))
    pen.setWidthF(float(width))
    pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
    pen.setMiterLimit(MITER_LIMIT)
    return pen


def qt_fill_rule(rule):
    """Map a FILL_* name to a Qt.FillRule."""
    try:
        return _FILL_RULES[rule]
    except KeyError:
        raise ValueError(f"unknown fill rule {rule!r}") from None
