#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import time

from .color import select_palette
from .config import RenderConfig
from .renderer import Renderer
from .rotation import Rotation
from .terminal import is_quit_key


class DonutApp:
    """
    Host loop: poll a key, draw a frame, advance the angles, sleep.

    `terminal` needs poll_key() and write_frame(); anything with those two
    methods works, which keeps the loop testable without a TTY.
    """

    def __init__(self, terminal, config: RenderConfig, renderer=None, sleep=time.sleep):
        self.terminal = terminal
        self.config = config
        if renderer is None:
            palette = select_palette(config.color) if config.use_color else None
            renderer = Renderer(palette)
        self.renderer = renderer
        self.rotation = Rotation()
        self.sleep = sleep
        self.running = True
        self.frame_count = 0

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        key = self.terminal.poll_key()
        if key is not None and is_quit_key(key):
            self.running = False

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def step(self):
        """Draw the current frame, then move on to the next rotation."""
        self.terminal.write_frame(self.renderer.render(self.rotation))
        self.frame_count += 1
        self.rotation.advance(self.config.delta_a, self.config.delta_b)

    def run(self, max_frames=None) -> int:
        """Loop until a quit key (or max_frames); returns frames drawn."""
        interval = self.config.frame_interval
        while self.running:
            self.handle_input()
            if not self.running:
                break
            self.step()
            if max_frames is not None and self.frame_count >= max_frames:
                break
            self.sleep(interval)
        return self.frame_count
