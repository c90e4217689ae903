"""Tests for the Qt text layout bridge."""

import os
import sys
import unittest

# Offscreen rendering, must be set before QApplication import
os.environ["QT_QPA_PLATFORM"] = "offscreen"

_root = os.path.join(os.path.dirname(__file__), "..")
if _root not in sys.path:
    sys.path.insert(0, _root)

from PySide6.QtCore import QPointF  # noqa: E402
from PySide6.QtGui import QFont  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

app = QApplication.instance() or QApplication(sys.argv)

from plotters_qt.BackendTypes import (  # noqa: E402
    BackendColor, BackendTextStyle, TextAnchor,
    FONT_NORMAL, FONT_BOLD, FONT_ITALIC, FONT_OBLIQUE,
    HPOS_LEFT, HPOS_CENTER, VPOS_TOP, VPOS_CENTER,
    TRANSFORM_ROTATE90,
)
from plotters_qt.qt.scene_recorder import GlyphRunItem, SceneRecorder  # noqa: E402
from plotters_qt.qt.text_layout import (  # noqa: E402
    TextLayout, draw_text, estimate_text_size, font_for_style,
    points_per_pixel,
)


class TestFontForStyle(unittest.TestCase):

    def test_family_and_pixel_size(self):
        font = font_for_style(BackendTextStyle("Monospace", 14))
        self.assertEqual(font.family(), "Monospace")
        self.assertAlmostEqual(
            font.pointSizeF() / points_per_pixel(), 14.0, places=3)

    def test_fractional_size_is_kept(self):
        font = font_for_style(BackendTextStyle("Sans", 10.5))
        self.assertAlmostEqual(
            font.pointSizeF() / points_per_pixel(), 10.5, places=3)

    def test_normal(self):
        font = font_for_style(BackendTextStyle("Sans", 10, FONT_NORMAL))
        self.assertEqual(font.style(), QFont.Style.StyleNormal)
        self.assertEqual(font.weight(), QFont.Weight.Normal)

    def test_bold_does_not_slant(self):
        font = font_for_style(BackendTextStyle("Sans", 10, FONT_BOLD))
        self.assertEqual(font.weight(), QFont.Weight.Bold)
        self.assertEqual(font.style(), QFont.Style.StyleNormal)

    def test_italic_does_not_embolden(self):
        font = font_for_style(BackendTextStyle("Sans", 10, FONT_ITALIC))
        self.assertEqual(font.style(), QFont.Style.StyleItalic)
        self.assertEqual(font.weight(), QFont.Weight.Normal)

    def test_oblique(self):
        font = font_for_style(BackendTextStyle("Sans", 10, FONT_OBLIQUE))
        self.assertEqual(font.style(), QFont.Style.StyleOblique)
        self.assertEqual(font.weight(), QFont.Weight.Normal)


class TestEstimateTextSize(unittest.TestCase):

    def setUp(self):
        self.layout = TextLayout()
        self.style = BackendTextStyle("Sans", 12)

    def test_returns_non_negative_ints(self):
        width, height = estimate_text_size(self.layout, "Hello", self.style)
        self.assertIsInstance(width, int)
        self.assertIsInstance(height, int)
        self.assertGreaterEqual(width, 0)
        self.assertGreaterEqual(height, 0)

    def test_stable_across_calls(self):
        first = estimate_text_size(self.layout, "Hello", self.style)
        estimate_text_size(self.layout, "A much longer label",
                           BackendTextStyle("Serif", 30, FONT_BOLD))
        again = estimate_text_size(self.layout, "Hello", self.style)
        self.assertEqual(first, again)
        self.assertEqual(
            estimate_text_size(self.layout, "Hello", self.style), first)

    def test_measure_draws_nothing(self):
        recorder = SceneRecorder()
        estimate_text_size(self.layout, "Hello", self.style)
        self.assertEqual(recorder.node_count(), 0)

    def test_multiline_is_at_least_as_tall(self):
        _w, one = estimate_text_size(self.layout, "a", self.style)
        _w, two = estimate_text_size(self.layout, "a\nb", self.style)
        self.assertGreaterEqual(two, one)


class TestDrawText(unittest.TestCase):

    def setUp(self):
        self.layout = TextLayout()
        self.recorder = SceneRecorder()

    def _style(self, h_pos, v_pos, transform=0):
        return BackendTextStyle(
            "Sans", 12, anchor=TextAnchor(h_pos, v_pos),
            transform=transform, color=BackendColor((255, 0, 0)))

    def test_appends_single_glyph_node(self):
        draw_text(self.recorder, self.layout, "Label",
                  self._style(HPOS_LEFT, VPOS_TOP), (10, 10))
        self.assertEqual(self.recorder.node_count(), 1)
        item = self.recorder.to_node().children()[0]
        self.assertIsInstance(item, GlyphRunItem)
        self.assertEqual(item.color().red(), 255)

    def test_restores_recorder_transform(self):
        draw_text(self.recorder, self.layout, "Label",
                  self._style(HPOS_CENTER, VPOS_CENTER, TRANSFORM_ROTATE90),
                  (40, 40))
        self.assertTrue(self.recorder.transform().isIdentity())

    def test_left_top_placed_at_position(self):
        draw_text(self.recorder, self.layout, "Label",
                  self._style(HPOS_LEFT, VPOS_TOP), (100, 100))
        item = self.recorder.to_node().children()[0]
        self.assertEqual(item.transform().map(QPointF(0, 0)),
                         QPointF(100, 100))

    def test_center_center_uses_layout_extents(self):
        style = self._style(HPOS_CENTER, VPOS_CENTER)
        draw_text(self.recorder, self.layout, "Label", style, (100, 100))
        width, height = self.layout.pixel_extents()
        item = self.recorder.to_node().children()[0]
        self.assertEqual(item.transform().map(QPointF(0, 0)),
                         QPointF(100 - width / 2.0, 100 + height / 2.0 - height))

    def test_rotation_is_about_position(self):
        draw_text(self.recorder, self.layout, "Label",
                  self._style(HPOS_LEFT, VPOS_TOP, TRANSFORM_ROTATE90),
                  (100, 100))
        transform = self.recorder.to_node().children()[0].transform()
        self.assertEqual(transform.map(QPointF(0, 0)), QPointF(100, 100))
        self.assertEqual(transform.map(QPointF(1, 0)), QPointF(100, 101))


if __name__ == "__main__":
    unittest.main()
