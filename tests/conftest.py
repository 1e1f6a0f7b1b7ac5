import pytest
from PIL import Image

from ansipix.model import Canvas, Sample


def make_canvas(width, height, background=(0, 0, 0), sample_for=None):
    """Build a canvas whose cells come from sample_for(x, y), defaulting to a per-row brightness ramp."""
    if sample_for is None:

        def sample_for(x, y):
            level = (y * 40) % 256
            return Sample(brightness=level, r=level, g=x % 256, b=255 - level)

    grid = tuple(tuple(sample_for(x, y) for x in range(width)) for y in range(height))
    return Canvas(width=width, height=height, background=background, grid=grid)


@pytest.fixture
def red_image():
    return Image.new("RGB", (32, 64), (255, 0, 0))


@pytest.fixture
def not_a_tty(monkeypatch):
    monkeypatch.setattr("ansipix.terminal.is_terminal", lambda: False)
