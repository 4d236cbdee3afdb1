#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/rotation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math


class Rotation:
    """
    Rotation state carried from one frame to the next.

    `a` spins the torus about the viewer's horizontal axis, `b` about the
    line of sight.  Both only ever grow; sin/cos take care of wrap-around.
    """
    __slots__ = ('a', 'b')

    def __init__(self, a: float = 0.0, b: float = 0.0):
        self.a = float(a)
        self.b = float(b)

    def __repr__(self):
        return f"Rotation(a={self.a:.2f}, b={self.b:.2f})"

    def advance(self, da: float, db: float):
        """Step both angles by their per-frame delta (radians)."""
        self.a += da
        self.b += db

    def trig(self):
        """Return (sin A, cos A, sin B, cos B)."""
        return math.sin(self.a), math.cos(self.a), math.sin(self.b), math.cos(self.b)
