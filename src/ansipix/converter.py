import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image

from ansipix.model import BLACK, BLOCK_COLS, BLOCK_ROWS, RGBA, Canvas
from ansipix.sampling import reduce_blocks
from ansipix.scheduler import render_canvas
from ansipix.terminal import grid_size

log = logging.getLogger(__name__)

HIGH_DEPTH_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N", "F")


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file; the format is detected from its content."""
    log.debug("Opening %s", path)
    with Image.open(path) as image:
        image.load()
        return image


def load_image_from_reader(reader: BinaryIO) -> Image.Image:
    image = Image.open(reader)
    image.load()
    return image


def to_colour(image: Image.Image) -> Image.Image:
    """Convert any decoded mode to 8-bit RGB, or RGBA when the image carries transparency.

    16-bit and float greyscale (modes I, I;16*, F) are scaled down by 257 rather
    than clipped; palette and bilevel images are expanded so resampling filters apply.
    """
    if image.mode in HIGH_DEPTH_MODES:
        arr = np.asarray(image, dtype=np.float64)
        image = Image.fromarray(np.clip(np.rint(arr / 257.0), 0, 255).astype(np.uint8))
    if "A" in image.getbands() or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


def scale_image(image: Image.Image, cols: int, rows: int) -> Image.Image:
    """Resize so each of the cols x rows cells covers exactly one pixel block."""
    image = to_colour(image)
    return image.resize((cols * BLOCK_COLS, rows * BLOCK_ROWS), Image.LANCZOS)


def compose_image(image: Image.Image, background: RGBA) -> Image.Image:
    """Flatten transparency onto an opaque background, returning an RGBA image.

    With a translucent background no blending happens; the image is only
    converted to RGBA if it isn't already.
    """
    if background[3] >= 255:
        base = Image.new("RGBA", image.size, tuple(background))
        return Image.alpha_composite(base, image.convert("RGBA"))
    if image.mode == "RGBA":
        return image
    return image.convert("RGBA")


def image_to_canvas(image: Image.Image, cols: int, rows: int, background: RGBA = BLACK) -> Canvas:
    scaled = scale_image(image, cols, rows)
    composed = compose_image(scaled, background)
    return reduce_blocks(composed, background[:3])


def image_to_ansi(
    image: Image.Image | str | Path,
    cols: int | None = None,
    rows: int | None = None,
    background: RGBA = BLACK,
    workers: int | None = None,
) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)

    if cols is None or rows is None:
        term_cols, term_rows = grid_size()
        cols = term_cols if cols is None else cols
        rows = term_rows if rows is None else rows
    log.debug("Scaling %dx%d image to a %dx%d grid", image.width, image.height, cols, rows)

    canvas = image_to_canvas(image, cols, rows, background)
    return render_canvas(canvas, workers)
