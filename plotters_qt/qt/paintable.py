# Qt Paintable - fixed-size surface holding a retained drawing
#
# Paintable owns the RenderNode of the last finished drawing session
# and paints it scaled and clipped into sinks of any size.
# PaintableBackend records one session into a fresh SceneRecorder and
# commits the frozen result to the Paintable exactly once, on
# present() or when the session's with-block exits.

import logging
import threading

from PySide6.QtCore import QObject, QRectF, Signal
from PySide6.QtGui import QPainter

from .. import utils_core as Utils
from ..BackendTypes import FILL_RULES
from .scene_recorder import SceneRecorder
from .snapshot_backend import SnapshotBackend
from .text_layout import TextLayout

# Paintable flag: the intrinsic size never changes
PAINTABLE_FLAGS_SIZE = 1

MAX_DIMENSION = 2 ** 31 - 1


class Paintable(QObject):
    """A surface with a fixed intrinsic size and replaceable content.

    The content slot is guarded by a lock; contents_changed is emitted
    synchronously after every replacement so a view can repaint.
    """

    contents_changed = Signal()

    def __init__(self, size, parent=None):
        """
        Args:
            size: (width, height) in pixels, both positive.
            parent: Optional QObject parent.
        """
        super().__init__(parent)
        width, height = size
        for name, value in (("width", width), ("height", height)):
            if int(value) != value or not 0 < value <= MAX_DIMENSION:
                raise ValueError(
                    f"paintable {name} must be an integer in "
                    f"1..{MAX_DIMENSION}, got {value!r}")
        self._width = int(width)
        self._height = int(height)
        self._node = None
        self._lock = threading.Lock()

    def width(self):
        return self._width

    def height(self):
        return self._height

    def size(self):
        return self._width, self._height

    def intrinsic_width(self):
        return self._width

    def intrinsic_height(self):
        return self._height

    def flags(self):
        return PAINTABLE_FLAGS_SIZE

    def node(self):
        """The current RenderNode, or None when empty."""
        with self._lock:
            return self._node

    def clear(self):
        """Remove the content."""
        self.set_node(None)

    def set_node(self, node):
        """Replace the content with `node` (a RenderNode or None)."""
        with self._lock:
            self._node = node
        # Notify outside the lock so slots may read the node
        self.contents_changed.emit()

    def snapshot(self, sink, width, height):
        """Paint the content into a SceneRecorder at (width, height).

        The node is scaled per axis to the requested size and clipped
        to the paintable's own rectangle. Without content nothing is
        appended to the sink.
        """
        node = self.node()
        if node is None:
            return

        sink.save()
        sink.scale(width / self._width, height / self._height)
        sink.push_clip(QRectF(0.0, 0.0, self._width, self._height))
        sink.append_node(node)
        sink.pop()
        sink.restore()

    def render(self, painter, width=None, height=None):
        """Paint the content into a QPainter at (width, height).

        Defaults to the intrinsic size.
        """
        if width is None:
            width = self._width
        if height is None:
            height = self._height

        sink = SceneRecorder()
        self.snapshot(sink, width, height)
        node = sink.to_node()
        if node is None:
            return
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing,
                              Utils.antialias())
        node.render(painter)
        painter.restore()


# Session states
SESSION_IDLE = 0
SESSION_RECORDING = 1
SESSION_FINALIZED = 2


class PaintableBackend:
    """Backend that draws one session into a Paintable.

    Usage:
        with PaintableBackend(paintable) as backend:
            backend.draw_rect((0, 0), (10, 10), style, True)
        # paintable now holds the drawing

    The recorder is created on first use (or by ensure_prepared()).
    present() commits it and ends the session; leaving the with-block
    commits too if present() was not called. The with-block is the
    only scope-exit commit: a backend used without it must call
    present() or close(), otherwise the drawing is discarded and the
    paintable keeps its old contents. A finished session cannot draw
    again.
    """

    def __init__(self, paintable, fill_rule=None):
        """
        Args:
            paintable: Paintable receiving the finished drawing.
            fill_rule: FILL_WINDING or FILL_EVENODD, the configured
                default if None.
        """
        if fill_rule is None:
            fill_rule = Utils.fillRule()
        if fill_rule not in FILL_RULES:
            raise ValueError(f"unknown fill rule {fill_rule!r}")
        self._paintable = paintable
        self._layout = TextLayout()
        self._size = paintable.size()
        self._fill_rule = fill_rule
        self._recorder = None
        self._backend = None
        self._state = SESSION_IDLE

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def state(self):
        return self._state

    def get_size(self):
        return self._size

    def ensure_prepared(self):
        """Start recording if the session has not started yet."""
        if self._state == SESSION_IDLE:
            self._recorder = SceneRecorder()
            self._backend = SnapshotBackend(
                self._recorder, self._size, self._layout, self._fill_rule)
            self._state = SESSION_RECORDING
            logging.debug("Recording session started for %dx%d paintable",
                          *self._size)

    def present(self):
        """Commit the recording to the paintable and end the session."""
        if self._state == SESSION_FINALIZED:
            return
        recorder, self._recorder = self._recorder, None
        self._backend = None
        self._state = SESSION_FINALIZED
        if recorder is None:
            return
        node = recorder.to_node()
        logging.debug("Committing %d nodes to %dx%d paintable",
                      len(node) if node is not None else 0, *self._size)
        self._paintable.set_node(node)

    close = present

    def _active(self):
        self.ensure_prepared()
        if self._backend is None:
            raise RuntimeError("drawing session was already presented")
        return self._backend

    def draw_pixel(self, point, color):
        self._active().draw_pixel(point, color)

    def draw_line(self, from_, to, style):
        self._active().draw_line(from_, to, style)

    def draw_rect(self, upper_left, bottom_right, style, fill):
        self._active().draw_rect(upper_left, bottom_right, style, fill)

    def draw_path(self, path, style):
        self._active().draw_path(path, style)

    def fill_polygon(self, vert, style):
        self._active().fill_polygon(vert, style)

    def draw_circle(self, center, radius, style, fill):
        self._active().draw_circle(center, radius, style, fill)

    def estimate_text_size(self, text, style):
        return self._active().estimate_text_size(text, style)

    def draw_text(self, text, style, pos):
        self._active().draw_text(text, style, pos)
