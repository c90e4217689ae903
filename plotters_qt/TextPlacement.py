# TextPlacement - Toolkit-independent text anchor and rotation math
#
# Converts a draw position, an anchor and a rotation into the ordered
# list of transform steps a recorder applies before appending the laid
# out text. Works on the pixel extents of the laid out text, not on
# nominal font metrics.
#
# Zero Qt dependencies. Can be used by any rendering backend.

from .BackendTypes import (
    HPOS_LEFT, HPOS_CENTER, HPOS_RIGHT,
    VPOS_TOP, VPOS_CENTER, VPOS_BOTTOM,
    TRANSFORM_NONE, TRANSFORM_ROTATE90, TRANSFORM_ROTATE180,
    TRANSFORM_ROTATE270,
)

# Rotation constant -> degrees (clockwise in y-down pixel space)
ROTATION_DEGREES = {
    TRANSFORM_NONE: 0.0,
    TRANSFORM_ROTATE90: 90.0,
    TRANSFORM_ROTATE180: 180.0,
    TRANSFORM_ROTATE270: 270.0,
}

# Transform step names, matching SceneRecorder method names
TRANSLATE = "translate"
ROTATE = "rotate"


def anchor_offset(anchor, width, height):
    """Offset of the text origin for an anchor.

    Args:
        anchor: TextAnchor with h_pos/v_pos constants.
        width: Laid out text width in pixels.
        height: Laid out text height in pixels.

    Returns:
        (dx, dy) float tuple.
    """
    if anchor.h_pos == HPOS_LEFT:
        dx = 0.0
    elif anchor.h_pos == HPOS_CENTER:
        dx = -width / 2.0
    elif anchor.h_pos == HPOS_RIGHT:
        dx = -float(width)
    else:
        raise ValueError(f"unknown horizontal anchor {anchor.h_pos!r}")

    if anchor.v_pos == VPOS_TOP:
        dy = float(height)
    elif anchor.v_pos == VPOS_CENTER:
        dy = height / 2.0
    elif anchor.v_pos == VPOS_BOTTOM:
        dy = 0.0
    else:
        raise ValueError(f"unknown vertical anchor {anchor.v_pos!r}")
    return dx, dy


def rotation_degrees(transform):
    """Map a TRANSFORM_* constant to degrees."""
    try:
        return ROTATION_DEGREES[transform]
    except KeyError:
        raise ValueError(f"unknown text transform {transform!r}") from None


def text_transform(pos, anchor, transform, width, height):
    """Compute the transform steps that place a text at `pos`.

    The vertical delta is the anchor offset minus the full extents
    height in both branches. Without rotation a single translation is
    returned; with rotation the text is translated to `pos`, rotated
    about it, then shifted by the anchor delta.

    Args:
        pos: (x, y) draw position.
        anchor: TextAnchor.
        transform: TRANSFORM_* constant.
        width, height: Pixel extents of the laid out text.

    Returns:
        List of steps, each ("translate", x, y) or ("rotate", degrees).
    """
    dx, dy = anchor_offset(anchor, width, height)
    dy -= height
    x, y = float(pos[0]), float(pos[1])
    degrees = rotation_degrees(transform)
    if degrees == 0.0:
        return [(TRANSLATE, x + dx, y + dy)]
    return [
        (TRANSLATE, x, y),
        (ROTATE, degrees),
        (TRANSLATE, dx, dy),
    ]
