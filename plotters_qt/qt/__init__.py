# Qt implementations of the drawing backend contract

from .paintable import Paintable, PaintableBackend
from .scene_recorder import RenderNode, SceneRecorder
from .snapshot_backend import SnapshotBackend
