# Qt drawing primitives
#
# Translates the backend drawing primitives into scene recorder nodes.
# Every function appends exactly one node, except draw_path and
# fill_polygon which append nothing for an empty point sequence.
# Shared by SnapshotBackend and PaintableBackend.

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QPainterPath

from ..BackendTypes import FILL_WINDING
from .color import qt_fill_rule, stroke_pen, to_qcolor


def draw_pixel(recorder, point, color):
    """Fill the 1x1 pixel at `point`."""
    recorder.append_color(
        to_qcolor(color), QRectF(float(point[0]), float(point[1]), 1.0, 1.0))


def draw_line(recorder, from_, to, style):
    """Stroke a straight segment from `from_` to `to`."""
    path = QPainterPath()
    path.moveTo(float(from_[0]), float(from_[1]))
    path.lineTo(float(to[0]), float(to[1]))
    recorder.append_stroke(path, stroke_pen(style))


def draw_rect(recorder, upper_left, bottom_right, style, fill):
    """Fill or outline the rectangle spanned by two corners.

    The size is bottom_right - upper_left as given, so corners passed in
    the other order produce a negative size.
    """
    bounds = QRectF(
        float(upper_left[0]),
        float(upper_left[1]),
        float(bottom_right[0] - upper_left[0]),
        float(bottom_right[1] - upper_left[1]),
    )
    color = to_qcolor(style.color())
    if fill:
        recorder.append_color(color, bounds)
    else:
        width = float(style.stroke_width())
        recorder.append_border(bounds, [width] * 4, [color] * 4)


def _polyline(points):
    """Build an open path through `points`, or None if there are none."""
    it = iter(points)
    try:
        x, y = next(it)
    except StopIteration:
        return None
    path = QPainterPath()
    path.moveTo(float(x), float(y))
    for x, y in it:
        path.lineTo(float(x), float(y))
    return path


def draw_path(recorder, raw_path, style):
    """Stroke an open polyline. The path is never closed."""
    path = _polyline(raw_path)
    if path is None:
        return
    recorder.append_stroke(path, stroke_pen(style))


def fill_polygon(recorder, vert, style, fill_rule=FILL_WINDING):
    """Close the polygon through `vert` and fill it."""
    path = _polyline(vert)
    if path is None:
        return
    path.closeSubpath()
    recorder.append_fill(path, qt_fill_rule(fill_rule), to_qcolor(style.color()))


def draw_circle(recorder, center, radius, style, fill, fill_rule=FILL_WINDING):
    """Fill or stroke a circle of `radius` pixels around `center`."""
    path = QPainterPath()
    path.addEllipse(QPointF(float(center[0]), float(center[1])),
                    float(radius), float(radius))
    if fill:
        recorder.append_fill(
            path, qt_fill_rule(fill_rule), to_qcolor(style.color()))
    else:
        recorder.append_stroke(path, stroke_pen(style))
