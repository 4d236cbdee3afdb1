#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import sys
from typing import NamedTuple, Optional

RESET = "\x1b[0m"

# Glyph membership per intensity band (low, medium, high)
BANDS = (".,-", "~:;=", "!*#$@")

DEFAULT_COLOR = "green"


def fg_escape(rgb):
    """ANSI 24-bit foreground escape for an (r, g, b) tuple."""
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m"


class Palette(NamedTuple):
    """Color-start sequences for the low, medium and high intensity bands."""
    low: str
    medium: str
    high: str

    @classmethod
    def from_rgb(cls, low, medium, high):
        return cls(fg_escape(low), fg_escape(medium), fg_escape(high))


GREEN = Palette.from_rgb((0, 100, 0), (0, 180, 0), (100, 255, 100))
RED = Palette.from_rgb((100, 0, 0), (180, 0, 0), (255, 100, 100))
BLUE = Palette.from_rgb((0, 0, 100), (0, 0, 180), (100, 100, 255))
CYAN = Palette.from_rgb((0, 100, 100), (0, 180, 180), (100, 255, 255))
MAGENTA = Palette.from_rgb((100, 0, 100), (180, 0, 180), (255, 100, 255))
YELLOW = Palette.from_rgb((100, 100, 0), (180, 180, 0), (255, 255, 100))
WHITE = Palette.from_rgb((100, 100, 100), (180, 180, 180), (255, 255, 255))

# English name first; the rest are accepted synonyms
_SYNONYMS = (
    (("green", "gruen", "grün"), GREEN),
    (("red", "rot"), RED),
    (("blue", "blau"), BLUE),
    (("cyan",), CYAN),
    (("magenta",), MAGENTA),
    (("yellow", "gelb"), YELLOW),
    (("white", "weiss", "weiß"), WHITE),
)

PALETTES = {name: palette for names, palette in _SYNONYMS for name in names}
AVAILABLE = tuple(names[0] for names, _ in _SYNONYMS)


def lookup_palette(name) -> Optional[Palette]:
    """Return the palette for `name` (case-insensitive), or None."""
    if name is None:
        return None
    return PALETTES.get(str(name).strip().lower())


def select_palette(name, stream=None) -> Palette:
    """
    Resolve a color name to its palette.

    Unknown names fall back to green and print a warning listing the
    available colors.
    """
    palette = lookup_palette(name)
    if palette is not None:
        return palette
    print(f"Warning: Unknown color '{name}'. Using default '{DEFAULT_COLOR}'.\n"
          f"Available: {', '.join(AVAILABLE)}",
          file=stream if stream is not None else sys.stderr)
    return PALETTES[DEFAULT_COLOR]


def band_of(glyph: str) -> int:
    """Intensity band 0-2 for a shading glyph, -1 for anything else."""
    for band, members in enumerate(BANDS):
        if glyph and glyph in members:
            return band
    return -1
