"""Tests for backend value types and toolkit-independent text placement."""

import os
import sys
import unittest

_root = os.path.join(os.path.dirname(__file__), "..")
if _root not in sys.path:
    sys.path.insert(0, _root)

from plotters_qt import TextPlacement  # noqa: E402
from plotters_qt.BackendTypes import (  # noqa: E402
    BackendColor, BackendStyle, BackendTextStyle, TextAnchor,
    FONT_BOLD,
    HPOS_LEFT, HPOS_CENTER, HPOS_RIGHT,
    VPOS_TOP, VPOS_CENTER, VPOS_BOTTOM,
    TRANSFORM_NONE, TRANSFORM_ROTATE90, TRANSFORM_ROTATE180,
    TRANSFORM_ROTATE270,
)


class TestValueTypes(unittest.TestCase):

    def test_color_is_immutable(self):
        color = BackendColor((255, 128, 0), 0.5)
        with self.assertRaises(AttributeError):
            color.alpha = 1.0
        self.assertEqual(color.rgb, (255, 128, 0))
        self.assertEqual(color.alpha, 0.5)

    def test_color_default_alpha_is_opaque(self):
        self.assertEqual(BackendColor((1, 2, 3)).alpha, 1.0)

    def test_style_rejects_negative_width(self):
        with self.assertRaises(ValueError):
            BackendStyle(BackendColor((0, 0, 0)), -1)

    def test_style_zero_width_allowed(self):
        self.assertEqual(BackendStyle(stroke_width=0).stroke_width(), 0)

    def test_text_style_rejects_non_positive_size(self):
        with self.assertRaises(ValueError):
            BackendTextStyle("Sans", 0)

    def test_text_style_rejects_unknown_font_style(self):
        with self.assertRaises(ValueError):
            BackendTextStyle("Sans", 12, style=7)

    def test_text_style_defaults(self):
        style = BackendTextStyle("Serif", 14, FONT_BOLD)
        self.assertEqual(style.family(), "Serif")
        self.assertEqual(style.size(), 14.0)
        self.assertEqual(style.style(), FONT_BOLD)
        self.assertEqual(style.anchor(), TextAnchor(HPOS_LEFT, VPOS_TOP))
        self.assertEqual(style.transform(), TRANSFORM_NONE)


class TestAnchorOffset(unittest.TestCase):

    def test_horizontal_offsets(self):
        for h_pos, expected in ((HPOS_LEFT, 0.0), (HPOS_CENTER, -25.0),
                                (HPOS_RIGHT, -50.0)):
            dx, _dy = TextPlacement.anchor_offset(
                TextAnchor(h_pos, VPOS_TOP), 50, 20)
            self.assertEqual(dx, expected)

    def test_vertical_offsets(self):
        for v_pos, expected in ((VPOS_TOP, 20.0), (VPOS_CENTER, 10.0),
                                (VPOS_BOTTOM, 0.0)):
            _dx, dy = TextPlacement.anchor_offset(
                TextAnchor(HPOS_LEFT, v_pos), 50, 20)
            self.assertEqual(dy, expected)

    def test_unknown_anchor_raises(self):
        with self.assertRaises(ValueError):
            TextPlacement.anchor_offset(TextAnchor(9, VPOS_TOP), 1, 1)
        with self.assertRaises(ValueError):
            TextPlacement.anchor_offset(TextAnchor(HPOS_LEFT, 9), 1, 1)

    def test_rotation_degrees(self):
        self.assertEqual(TextPlacement.rotation_degrees(TRANSFORM_NONE), 0.0)
        self.assertEqual(
            TextPlacement.rotation_degrees(TRANSFORM_ROTATE90), 90.0)
        self.assertEqual(
            TextPlacement.rotation_degrees(TRANSFORM_ROTATE180), 180.0)
        self.assertEqual(
            TextPlacement.rotation_degrees(TRANSFORM_ROTATE270), 270.0)
        with self.assertRaises(ValueError):
            TextPlacement.rotation_degrees(42)


class TestTextTransform(unittest.TestCase):
    """Placement for a text with extents 50x20 drawn at (100, 100)."""

    def _steps(self, h_pos, v_pos, transform=TRANSFORM_NONE):
        return TextPlacement.text_transform(
            (100, 100), TextAnchor(h_pos, v_pos), transform, 50, 20)

    def test_left_top(self):
        self.assertEqual(self._steps(HPOS_LEFT, VPOS_TOP),
                         [("translate", 100.0, 100.0)])

    def test_center_center(self):
        self.assertEqual(self._steps(HPOS_CENTER, VPOS_CENTER),
                         [("translate", 75.0, 90.0)])

    def test_right_bottom(self):
        self.assertEqual(self._steps(HPOS_RIGHT, VPOS_BOTTOM),
                         [("translate", 50.0, 80.0)])

    def test_rotated_translates_rotates_then_offsets(self):
        self.assertEqual(
            self._steps(HPOS_CENTER, VPOS_CENTER, TRANSFORM_ROTATE90),
            [("translate", 100.0, 100.0),
             ("rotate", 90.0),
             ("translate", -25.0, -10.0)])

    def test_rotated_left_top_has_zero_offset(self):
        steps = self._steps(HPOS_LEFT, VPOS_TOP, TRANSFORM_ROTATE270)
        self.assertEqual(steps[-1], ("translate", 0.0, 0.0))
        self.assertEqual(steps[1], ("rotate", 270.0))


if __name__ == "__main__":
    unittest.main()
