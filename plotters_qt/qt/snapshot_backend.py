# Qt Snapshot Backend - drawing backend over a caller-owned recorder
#
# Implements the backend contract by writing straight into a
# SceneRecorder the caller owns and later freezes itself. The
# backend keeps no state beyond the borrowed recorder, a text layout
# and the canvas size.

from .. import utils_core as Utils
from ..BackendTypes import FILL_RULES
from . import primitives
from .text_layout import TextLayout, draw_text, estimate_text_size


class SnapshotBackend:
    """Backend that draws into a SceneRecorder.

    Usage:
        recorder = SceneRecorder()
        backend = SnapshotBackend(recorder, (640, 480))
        backend.draw_line((0, 0), (10, 10), style)
        node = recorder.to_node()
    """

    def __init__(self, recorder, size, layout=None, fill_rule=None):
        """
        Args:
            recorder: SceneRecorder receiving the nodes (not owned).
            size: (width, height) reported to the plotting engine.
            layout: TextLayout to reuse, a new one is created if None.
            fill_rule: FILL_WINDING or FILL_EVENODD for polygons and
                filled circles, the configured default if None.
        """
        width, height = size
        self._recorder = recorder
        self._layout = layout if layout is not None else TextLayout()
        self._width = int(width)
        self._height = int(height)
        self._fill_rule = fill_rule if fill_rule is not None else Utils.fillRule()
        if self._fill_rule not in FILL_RULES:
            raise ValueError(f"unknown fill rule {self._fill_rule!r}")

    def fill_rule(self):
        return self._fill_rule

    def get_size(self):
        return self._width, self._height

    def ensure_prepared(self):
        pass

    def present(self):
        pass

    def draw_pixel(self, point, color):
        primitives.draw_pixel(self._recorder, point, color)

    def draw_line(self, from_, to, style):
        primitives.draw_line(self._recorder, from_, to, style)

    def draw_rect(self, upper_left, bottom_right, style, fill):
        primitives.draw_rect(
            self._recorder, upper_left, bottom_right, style, fill)

    def draw_path(self, path, style):
        primitives.draw_path(self._recorder, path, style)

    def fill_polygon(self, vert, style):
        primitives.fill_polygon(self._recorder, vert, style, self._fill_rule)

    def draw_circle(self, center, radius, style, fill):
        primitives.draw_circle(
            self._recorder, center, radius, style, fill, self._fill_rule)

    def estimate_text_size(self, text, style):
        return estimate_text_size(self._layout, text, style)

    def draw_text(self, text, style, pos):
        draw_text(self._recorder, self._layout, text, style, pos)
