#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/torus.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math

# Tube (cross-section) radius is 1 and folded into the rasterizer math.
SWEEP_RADIUS = 2.0     # distance from the central axis to the tube centre
VIEWER_DISTANCE = 5.0  # K2, camera offset along the line of sight

SWEEP_LIMIT = 6.28
TUBE_STEP = 0.07       # j, around the cross-section
SWEEP_STEP = 0.02      # i, around the central axis


def sweep(step, limit=SWEEP_LIMIT):
    """Angles 0, step, 2*step, ... strictly below limit."""
    angles = []
    k = 0
    theta = 0.0
    while theta < limit:
        angles.append(theta)
        k += 1
        theta = k * step
    return angles


class Torus:
    """
    Sample grid over the torus surface.

    The sin/cos of every sample angle is computed once up front; the
    rasterizer only combines them with the per-frame rotation.
    """
    __slots__ = ('tube', 'sweep')

    def __init__(self, tube_step=TUBE_STEP, sweep_step=SWEEP_STEP):
        # (sin j, cos j) pairs, outer loop
        self.tube = [(math.sin(j), math.cos(j)) for j in sweep(tube_step)]
        # (sin i, cos i) pairs, inner loop
        self.sweep = [(math.sin(i), math.cos(i)) for i in sweep(sweep_step)]

    def __len__(self):
        return len(self.tube) * len(self.sweep)
