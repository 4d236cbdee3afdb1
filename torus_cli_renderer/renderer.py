#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from typing import Optional

from .canvas import Canvas, WIDTH, HEIGHT
from .color import Palette, RESET, band_of
from .rasterizer import rasterize, SHADES
from .rotation import Rotation
from .torus import Torus

CURSOR_HOME = "\x1b[H"


def cell_table(palette: Optional[Palette]):
    """
    Precompute the emitted text for every shading glyph.

    Each colored glyph carries its own color start and reset so color never
    bleeds into the next cell.  Glyphs outside the bands (the blank) are
    absent from the table and are emitted as-is.
    """
    table = {}
    for glyph in SHADES:
        band = band_of(glyph)
        if palette is None or band < 0:
            table[glyph] = glyph
        else:
            table[glyph] = palette[band] + glyph + RESET
    return table


def compose_frame(canvas: Canvas, palette: Optional[Palette], table=None) -> str:
    """
    Turn a populated canvas into one printable frame.

    Layout: cursor home, then for each of the HEIGHT rows a newline followed
    by that row's WIDTH cells.  The buffer itself holds no line breaks.
    """
    if table is None:
        table = cell_table(palette)
    get = table.get
    chars = canvas.chars

    out = [CURSOR_HOME]
    for y in range(HEIGHT):
        out.append('\n')
        row = y * WIDTH
        for ch in chars[row:row + WIDTH]:
            out.append(get(ch, ch))
    return ''.join(out)


class Renderer:
    """
    Rasterize + composite, one frame at a time.

    render(rotation) returns the frame string for the given angles.  The
    torus sample grid, canvas and glyph table are built once and reused;
    the canvas is fully rewritten each frame.
    """

    def __init__(self, palette: Optional[Palette] = None, torus: Optional[Torus] = None):
        self.palette = palette
        self.torus = torus if torus is not None else Torus()
        self.canvas = Canvas()
        self._table = cell_table(palette)

    def rasterize(self, rotation: Rotation) -> Canvas:
        return rasterize(self.canvas, rotation, self.torus)

    def compose(self, canvas: Canvas) -> str:
        return compose_frame(canvas, self.palette, self._table)

    def render(self, rotation: Rotation) -> str:
        """Produce the complete frame for `rotation`."""
        return self.compose(self.rasterize(rotation))
