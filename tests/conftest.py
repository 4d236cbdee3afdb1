import pytest

from torus_cli_renderer.canvas import Canvas
from torus_cli_renderer.rasterizer import rasterize
from torus_cli_renderer.rotation import Rotation
from torus_cli_renderer.torus import Torus


@pytest.fixture(scope="session")
def torus():
    return Torus()


@pytest.fixture
def front_frame(torus):
    """The A=0, B=0 frame."""
    return rasterize(Canvas(), Rotation(0.0, 0.0), torus)


class FakeTerminal:
    """Scripted stand-in for Terminal: keys come from a list, frames are kept."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.frames = []

    def poll_key(self):
        if self.keys:
            return self.keys.pop(0)
        return None

    def write_frame(self, frame):
        self.frames.append(frame)


@pytest.fixture
def fake_terminal():
    return FakeTerminal
