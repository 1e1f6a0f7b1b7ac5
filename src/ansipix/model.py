from dataclasses import dataclass

import numpy as np

# One character cell covers an 8-row x 4-column block of pixels
BLOCK_COLS = 4
BLOCK_ROWS = 8
BLOCK_PIXELS = BLOCK_COLS * BLOCK_ROWS

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)


@dataclass(frozen=True)
class Sample:
    brightness: int
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Canvas:
    """Character grid of reduced samples plus the background drawn under every cell."""

    width: int
    height: int
    background: RGB
    grid: tuple[tuple[Sample, ...], ...]

    def __post_init__(self):
        if len(self.grid) != self.height:
            raise ValueError(f"Grid has {len(self.grid)} rows, expected {self.height}")
        for y, row in enumerate(self.grid):
            if len(row) != self.width:
                raise ValueError(f"Grid row {y} has {len(row)} cells, expected {self.width}")

    @classmethod
    def from_arrays(cls, rgb: np.ndarray, brightness: np.ndarray, background: RGB) -> "Canvas":
        """Build a canvas from a (rows, cols, 3) colour array and a (rows, cols) brightness array."""
        if rgb.shape[:2] != brightness.shape:
            raise ValueError(f"Colour shape {rgb.shape[:2]} does not match brightness shape {brightness.shape}")
        height, width = brightness.shape
        grid = tuple(
            tuple(
                Sample(
                    brightness=int(brightness[y, x]),
                    r=int(rgb[y, x, 0]),
                    g=int(rgb[y, x, 1]),
                    b=int(rgb[y, x, 2]),
                )
                for x in range(width)
            )
            for y in range(height)
        )
        return cls(width=width, height=height, background=tuple(background[:3]), grid=grid)

    def row(self, y: int) -> tuple[Sample, ...]:
        return self.grid[y]
