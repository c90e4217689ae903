# Qt Scene Recorder - retained drawing on a QGraphicsScene
#
# SceneRecorder accumulates drawing operations as QGraphicsItems,
# tracking a current transform and a clip stack the way a painter
# does. to_node() freezes the recording into an immutable RenderNode
# that can be replayed into any QPainter or appended to another
# recorder.

import logging

from PySide6.QtCore import Qt, QCoreApplication, QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPen, QTransform
from PySide6.QtWidgets import (
    QApplication, QGraphicsItem, QGraphicsPathItem, QGraphicsRectItem,
    QGraphicsScene, QStyleOptionGraphicsItem,
)

from ..BackendTypes import BackendError


def _require_application():
    if not isinstance(QCoreApplication.instance(), QApplication):
        raise BackendError(
            "a QApplication must be created before recording a scene")


class BorderItem(QGraphicsItem):
    """Four independent edge bands drawn inside a rectangle.

    Edges are ordered top, right, bottom, left. Each band has its own
    width and color; bands are filled rectangles, not a stroked outline.
    """

    def __init__(self, rect, widths, colors):
        super().__init__()
        self._rect = QRectF(rect)
        self._widths = tuple(float(w) for w in widths)
        self._colors = tuple(QColor(c) for c in colors)

    def rect(self):
        return QRectF(self._rect)

    def widths(self):
        return self._widths

    def colors(self):
        return self._colors

    def boundingRect(self):
        return self._rect.normalized()

    def paint(self, painter, option, widget=None):
        r = self._rect.normalized()
        top, right, bottom, left = self._widths
        # Bands never extend past the rectangle, even for thick borders
        top = min(top, r.height())
        bottom = min(bottom, r.height() - top)
        left = min(left, r.width())
        right = min(right, r.width() - left)
        inner = r.height() - top - bottom
        bands = (
            QRectF(r.left(), r.top(), r.width(), top),
            QRectF(r.right() - right, r.top() + top, right, inner),
            QRectF(r.left(), r.bottom() - bottom, r.width(), bottom),
            QRectF(r.left(), r.top() + top, left, inner),
        )
        for band, color in zip(bands, self._colors):
            if band.width() > 0 and band.height() > 0:
                painter.fillRect(band, color)


class GlyphRunItem(QGraphicsItem):
    """Laid out glyph runs with their top-left at the item origin."""

    def __init__(self, runs, color):
        super().__init__()
        self._runs = list(runs)
        self._color = QColor(color)
        bounds = QRectF()
        for run in self._runs:
            bounds = bounds.united(run.boundingRect())
        self._bounds = bounds

    def glyph_runs(self):
        return list(self._runs)

    def color(self):
        return QColor(self._color)

    def boundingRect(self):
        return QRectF(self._bounds)

    def paint(self, painter, option, widget=None):
        painter.setPen(self._color)
        for run in self._runs:
            painter.drawGlyphRun(QPointF(0.0, 0.0), run)


class NodeItem(QGraphicsItem):
    """A finished RenderNode replayed as a single item."""

    def __init__(self, node):
        super().__init__()
        self._node = node

    def node(self):
        return self._node

    def boundingRect(self):
        return self._node.bounds()

    def paint(self, painter, option, widget=None):
        self._node.render(painter)


class ClipItem(QGraphicsRectItem):
    """Container clipping its children to a rectangle."""

    def __init__(self, rect):
        super().__init__(QRectF(rect))
        self.setPen(QPen(Qt.PenStyle.NoPen))
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemClipsChildrenToShape)
        self._ordered = []

    def add(self, item):
        item.setParentItem(self)
        self._ordered.append(item)

    def ordered_children(self):
        return list(self._ordered)


def _paint_item(painter, item, option):
    painter.save()
    painter.setTransform(item.transform(), True)
    if isinstance(item, ClipItem):
        painter.setClipRect(item.rect(), Qt.ClipOperation.IntersectClip)
        for child in item.ordered_children():
            _paint_item(painter, child, option)
    else:
        item.paint(painter, option, None)
    painter.restore()


class RenderNode:
    """Immutable, replayable result of one recording session."""

    __slots__ = ("_scene", "_items", "_nodes")

    def __init__(self, scene, items, nodes):
        # The scene owns the native items; keep it alive with the node
        self._scene = scene
        self._items = tuple(items)
        self._nodes = tuple(nodes)

    def children(self):
        """Content items in the order they were appended."""
        return self._nodes

    def __len__(self):
        return len(self._nodes)

    def bounds(self):
        """Union of the scene bounding rectangles of all items."""
        rect = QRectF()
        for item in self._items:
            rect = rect.united(item.sceneBoundingRect())
        return rect

    def render(self, painter):
        """Replay the recording into a QPainter at its current transform."""
        option = QStyleOptionGraphicsItem()
        for item in self._items:
            _paint_item(painter, item, option)


class SceneRecorder:
    """Write-only accumulator of drawing operations.

    Every append_* call adds exactly one node, placed with the current
    transform and inside the innermost pushed clip. save()/restore()
    cover the transform; push_clip()/pop() cover clipping.
    """

    def __init__(self):
        _require_application()
        self._scene = QGraphicsScene()
        self._items = []       # top-level items in paint order
        self._nodes = []       # content items in append order
        self._transform = QTransform()
        self._saved = []
        self._clips = []       # (ClipItem, transform at push time)
        self._frozen = False

    # ------------------------------------------------------------------
    # Transform and clip state
    # ------------------------------------------------------------------
    def save(self):
        self._check()
        self._saved.append(QTransform(self._transform))

    def restore(self):
        self._check()
        if not self._saved:
            raise RuntimeError("restore() without a matching save()")
        self._transform = self._saved.pop()

    def translate(self, x, y):
        self._check()
        self._transform.translate(x, y)

    def rotate(self, degrees):
        self._check()
        self._transform.rotate(degrees)

    def scale(self, sx, sy):
        self._check()
        self._transform.scale(sx, sy)

    def transform(self):
        return QTransform(self._transform)

    def push_clip(self, rect):
        self._check()
        clip = ClipItem(rect)
        self._attach(clip)
        self._clips.append((clip, QTransform(self._transform)))

    def pop(self):
        self._check()
        if not self._clips:
            raise RuntimeError("pop() without a matching push_clip()")
        self._clips.pop()

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------
    def append_color(self, color, rect):
        """Fill `rect` with a solid color."""
        item = QGraphicsRectItem(QRectF(rect))
        item.setPen(QPen(Qt.PenStyle.NoPen))
        item.setBrush(QBrush(color))
        return self._append(item)

    def append_stroke(self, path, pen):
        """Stroke `path` with `pen` (width and color)."""
        item = QGraphicsPathItem(QPainterPath(path))
        item.setPen(QPen(pen))
        item.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        return self._append(item)

    def append_fill(self, path, fill_rule, color):
        """Fill `path` with a solid color using a Qt.FillRule."""
        path = QPainterPath(path)
        path.setFillRule(fill_rule)
        item = QGraphicsPathItem(path)
        item.setPen(QPen(Qt.PenStyle.NoPen))
        item.setBrush(QBrush(color))
        return self._append(item)

    def append_border(self, rect, widths, colors):
        """Draw four edge bands (top, right, bottom, left) inside `rect`."""
        return self._append(BorderItem(rect, widths, colors))

    def append_layout(self, layout, color):
        """Append the glyph runs of a laid out QTextLayout."""
        return self._append(GlyphRunItem(layout.glyphRuns(), color))

    def append_node(self, node):
        """Append a finished RenderNode as a single node."""
        return self._append(NodeItem(node))

    def node_count(self):
        return len(self._nodes)

    def to_node(self):
        """Freeze the recording.

        Returns:
            RenderNode, or None when nothing was appended.
        """
        self._check()
        self._frozen = True
        if not self._nodes:
            return None
        logging.debug("Recorded %d scene nodes", len(self._nodes))
        return RenderNode(self._scene, self._items, self._nodes)

    # ------------------------------------------------------------------
    def _check(self):
        if self._frozen:
            raise RuntimeError("recorder was already converted to a node")

    def _append(self, item):
        self._attach(item)
        self._nodes.append(item)
        return item

    def _attach(self, item):
        self._check()
        try:
            if self._clips:
                clip, clip_transform = self._clips[-1]
                inverse, _invertible = clip_transform.inverted()
                item.setTransform(self._transform * inverse)
                clip.add(item)
            else:
                item.setTransform(QTransform(self._transform))
                self._scene.addItem(item)
                self._items.append(item)
        except RuntimeError as exc:
            raise BackendError(f"scene recording failed: {exc}") from exc
