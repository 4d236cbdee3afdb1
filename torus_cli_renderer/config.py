#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math
import os
import sys
from dataclasses import dataclass

from .color import DEFAULT_COLOR

DEFAULT_SPEED = 1.0
BASE_SLEEP = 0.033333  # seconds, ~30 FPS at speed 1.0


def parse_speed_factor(text, stream=None) -> float:
    """
    Parse a speed multiplier.  Anything that is not a finite positive
    number falls back to 1.0 with a warning.
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        value = -1.0
    if not math.isfinite(value) or value <= 0:
        print(f"Warning: Invalid speed factor '{text}'. Must be a positive number. "
              f"Using default {DEFAULT_SPEED}.",
              file=stream if stream is not None else sys.stderr)
        return DEFAULT_SPEED
    return value


@dataclass
class RenderConfig:
    """Runtime settings for the donut loop."""
    color: str = DEFAULT_COLOR
    speed_factor: float = DEFAULT_SPEED
    base_sleep: float = BASE_SLEEP
    delta_a: float = 0.04
    delta_b: float = 0.02
    use_color: bool = True

    @property
    def frame_interval(self) -> float:
        """Sleep between frames; a higher speed factor means a shorter sleep."""
        return self.base_sleep / self.speed_factor

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Default config for the current terminal.
        Color is off for dumb terminals and when NO_COLOR is set.
        """
        term = os.environ.get('TERM', '').lower()
        is_dumb = term in ('dumb', 'unknown')
        return cls(use_color=not is_dumb and 'NO_COLOR' not in os.environ)
