# plotters_qt - Qt drawing backends for a plotting engine
#
# Toolkit-independent value types live at the package top level;
# the Qt backends live in plotters_qt.qt and are re-exported here.

from .BackendTypes import (
    BackendColor, BackendError, BackendStyle, BackendTextStyle, TextAnchor,
    BLACK,
    FONT_NORMAL, FONT_BOLD, FONT_ITALIC, FONT_OBLIQUE,
    HPOS_LEFT, HPOS_CENTER, HPOS_RIGHT,
    VPOS_TOP, VPOS_CENTER, VPOS_BOTTOM,
    TRANSFORM_NONE, TRANSFORM_ROTATE90, TRANSFORM_ROTATE180,
    TRANSFORM_ROTATE270,
    FILL_WINDING, FILL_EVENODD,
)
from .qt import (
    Paintable, PaintableBackend, RenderNode, SceneRecorder, SnapshotBackend,
)
from .utils_core import __version__
