#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

WIDTH = 80
HEIGHT = 22
SIZE = WIDTH * HEIGHT  # 1760 cells

BLANK = ' '


def index(x: int, y: int) -> int:
    """Map a screen coordinate to its offset in the flat buffers."""
    if x < 0 or x >= WIDTH or y < 0 or y >= HEIGHT:
        raise IndexError(f"cell ({x}, {y}) outside {WIDTH}x{HEIGHT} viewport")
    return x + WIDTH * y


class Canvas:
    """
    Character buffer plus depth buffer for a single frame.

    Both buffers are flat, row-major and exactly SIZE cells long.  Depth is
    stored as inverse distance (1 / z), so larger values are nearer and a
    cleared cell holds 0.0.
    """
    __slots__ = ['chars', 'depth']

    def __init__(self):
        self.chars = [BLANK] * SIZE
        self.depth = [0.0] * SIZE

    def clear(self):
        """Reset every cell to blank / zero depth."""
        self.chars[:] = [BLANK] * SIZE
        self.depth[:] = [0.0] * SIZE

    def plot(self, x, y, inv_z, glyph):
        """
        Depth-tested write of one surface sample.

        Only cells strictly inside the viewport border are eligible, and only
        a strictly nearer sample replaces what is already there.  Returns True
        when the cell was written.
        """
        if not (0 < x < WIDTH and 0 < y < HEIGHT):
            return False
        o = index(x, y)
        if inv_z > self.depth[o]:
            self.depth[o] = inv_z
            self.chars[o] = glyph
            return True
        return False

    def glyph_at(self, x, y) -> str:
        return self.chars[index(x, y)]

    def depth_at(self, x, y) -> float:
        return self.depth[index(x, y)]

    def rows(self):
        """Yield each screen row as a string of WIDTH glyphs."""
        chars = self.chars
        for y in range(HEIGHT):
            yield ''.join(chars[y * WIDTH:(y + 1) * WIDTH])

    def written_cells(self):
        """Number of cells holding a surface sample this frame."""
        return sum(1 for z in self.depth if z > 0.0)
