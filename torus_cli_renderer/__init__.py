#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .canvas import Canvas, WIDTH, HEIGHT, SIZE, index
from .rotation import Rotation
from .torus import Torus
from .rasterizer import rasterize, sample_points, shade_glyph, SHADES
from .color import Palette, select_palette, band_of
from .renderer import Renderer, compose_frame
from .config import RenderConfig, parse_speed_factor
from .terminal import Terminal, TerminalError
from .demo import DonutApp
