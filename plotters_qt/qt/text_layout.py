# Qt text layout bridge
#
# Wraps one reusable QTextLayout. Each measure or draw call
# reconfigures it with the text and a QFont built from the backend
# text style, lays it out on unwrapped lines, then reads back its
# pixel extents or appends its glyph runs to a scene recorder.

import math

from PySide6.QtCore import QCoreApplication, QPointF
from PySide6.QtGui import QFont, QGuiApplication, QTextLayout, QTextOption

from .. import TextPlacement
from ..BackendTypes import (
    BackendError, FONT_NORMAL, FONT_BOLD, FONT_ITALIC, FONT_OBLIQUE,
)
from .color import to_qcolor

# Lines are never wrapped; this is only an upper bound for layout
MAX_LINE_WIDTH = 1.0e6

# QTextLayout breaks lines on U+2028, not on "\n"
LINE_SEPARATOR = "\u2028"


def points_per_pixel():
    """Point size of one device pixel at the primary screen resolution."""
    screen = QGuiApplication.primaryScreen()
    dpi = screen.logicalDotsPerInchY() if screen is not None else 96.0
    return 72.0 / dpi


def font_for_style(style):
    """Build a QFont from a BackendTextStyle.

    Weight and slant are independent: FONT_BOLD only sets the weight,
    FONT_ITALIC and FONT_OBLIQUE only set the style.
    """
    font = QFont()
    font.setFamily(style.family())
    # setPixelSize only takes whole pixels
    font.setPointSizeF(style.size() * points_per_pixel())
    kind = style.style()
    if kind == FONT_NORMAL:
        font.setStyle(QFont.Style.StyleNormal)
    elif kind == FONT_BOLD:
        font.setWeight(QFont.Weight.Bold)
    elif kind == FONT_ITALIC:
        font.setStyle(QFont.Style.StyleItalic)
    elif kind == FONT_OBLIQUE:
        font.setStyle(QFont.Style.StyleOblique)
    return font


class TextLayout:
    """Reusable text layout shared by the calls of one backend."""

    def __init__(self):
        if not isinstance(QCoreApplication.instance(), QGuiApplication):
            raise BackendError(
                "a QGuiApplication must be created before laying out text")
        self._layout = QTextLayout()
        option = QTextOption()
        option.setWrapMode(QTextOption.WrapMode.NoWrap)
        self._layout.setTextOption(option)
        self._width = 0.0
        self._height = 0.0

    def qlayout(self):
        return self._layout

    def configure(self, text, style):
        """Set text and font, then lay out one line per text line."""
        layout = self._layout
        layout.clearLayout()
        layout.setText(text.replace("\n", LINE_SEPARATOR))
        layout.setFont(font_for_style(style))

        width = height = 0.0
        layout.beginLayout()
        while True:
            line = layout.createLine()
            if not line.isValid():
                break
            line.setLineWidth(MAX_LINE_WIDTH)
            line.setPosition(QPointF(0.0, height))
            width = max(width, line.naturalTextWidth())
            height += line.height()
        layout.endLayout()
        self._width = width
        self._height = height

    def pixel_size(self):
        """Logical size of the laid out text in whole pixels."""
        return math.ceil(self._width), math.ceil(self._height)

    def pixel_extents(self):
        """Logical extents (width, height) used for anchoring."""
        return self.pixel_size()


def estimate_text_size(layout, text, style):
    """Measure `text` without drawing it.

    Returns:
        (width, height) tuple of non-negative ints.
    """
    layout.configure(text, style)
    return layout.pixel_size()


def draw_text(recorder, layout, text, style, pos):
    """Append `text` anchored and rotated at `pos` as one glyph node."""
    layout.configure(text, style)
    width, height = layout.pixel_extents()

    recorder.save()
    steps = TextPlacement.text_transform(
        pos, style.anchor(), style.transform(), width, height)
    for step in steps:
        if step[0] == TextPlacement.TRANSLATE:
            recorder.translate(step[1], step[2])
        else:
            recorder.rotate(step[1])
    recorder.append_layout(layout.qlayout(), to_qcolor(style.color()))
    recorder.restore()
