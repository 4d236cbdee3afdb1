#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .canvas import Canvas
from .rotation import Rotation
from .torus import Torus, SWEEP_RADIUS, VIEWER_DISTANCE

# Intensity band table, sparse dot to dense block
SHADES = ".,-~:;=!*#$@"
MAX_SHADE = len(SHADES) - 1

CENTER_X = 40
CENTER_Y = 12
SCALE_X = 30  # wider than SCALE_Y to offset the character aspect ratio
SCALE_Y = 15
LUMA_SCALE = 8


def shade_glyph(luminance: int) -> str:
    """Pick the glyph for a brightness score; out-of-range scores are clamped."""
    if luminance <= 0:
        return SHADES[0]
    if luminance >= MAX_SHADE:
        return SHADES[MAX_SHADE]
    return SHADES[luminance]


def sample_points(rotation: Rotation, torus: Torus):
    """
    Yield (x, y, inv_z, luminance) for every torus sample, outer angle j
    first, inner angle i second.

    x and y are truncated toward zero like a C float-to-int cast, and may
    fall outside the viewport; callers do the containment test.
    """
    e, g, n, m = rotation.trig()  # sin A, cos A, sin B, cos B
    r2 = SWEEP_RADIUS
    k2 = VIEWER_DISTANCE

    for f, d in torus.tube:          # f = sin j, d = cos j
        h = d + r2
        for c, l in torus.sweep:     # c = sin i, l = cos i
            inv_z = 1 / (c * h * e + f * g + k2)
            t = c * h * g - f * e
            x = int(CENTER_X + SCALE_X * inv_z * (l * h * m - t * n))
            y = int(CENTER_Y + SCALE_Y * inv_z * (l * h * n + t * m))
            luminance = int(LUMA_SCALE * ((f * e - c * d * g) * m - c * d * e - f * g - l * d * n))
            yield x, y, inv_z, luminance


def rasterize(canvas: Canvas, rotation: Rotation, torus: Torus):
    """
    Fill `canvas` with one frame of the torus at `rotation`.

    The canvas is cleared first, so the result depends on the rotation
    alone.  Returns the canvas for chaining.
    """
    canvas.clear()
    plot = canvas.plot
    for x, y, inv_z, luminance in sample_points(rotation, torus):
        plot(x, y, inv_z, shade_glyph(luminance))
    return canvas
