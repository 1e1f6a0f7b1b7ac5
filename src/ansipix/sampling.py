import numpy as np
from PIL import Image

from ansipix.model import BLOCK_COLS, BLOCK_PIXELS, BLOCK_ROWS, RGB, Canvas


def to_perceptual(pixels: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Convert 8-bit RGB(A) pixels to normalised RGB and HSV value.

    Accepts any leading shape; the last axis holds the channels. Returns
    ``(rgb, value)`` where ``rgb`` has the same leading shape plus 3 and
    ``value`` is ``max(r, g, b)``, both as floats in [0, 1]. Fully transparent
    pixels read as black.
    """
    arr = np.asarray(pixels, dtype=np.float64)
    rgb = arr[..., :3] / 255.0
    if arr.shape[-1] == 4:
        rgb = np.where(arr[..., 3:4] > 0, rgb, 0.0)
    return rgb, rgb.max(axis=-1)


def quantize(mean: np.ndarray) -> np.ndarray:
    """Scale [0, 1] means to bytes, rounding half up."""
    return np.clip(np.floor(np.asarray(mean) * 255.0 + 0.5), 0, 255).astype(np.uint8)


def reduce_blocks(image: Image.Image, background: RGB) -> Canvas:
    """Average every BLOCK_ROWS x BLOCK_COLS block of an RGBA image into one sample.

    The image size must be an exact multiple of the block size.
    """
    rows = image.height // BLOCK_ROWS
    cols = image.width // BLOCK_COLS
    rgb, value = to_perceptual(np.asarray(image))

    # (rows, block_rows, cols, block_cols, ...) -> sum over each block
    rgb_sums = rgb.reshape(rows, BLOCK_ROWS, cols, BLOCK_COLS, 3).sum(axis=(1, 3))
    value_sums = value.reshape(rows, BLOCK_ROWS, cols, BLOCK_COLS).sum(axis=(1, 3))

    return Canvas.from_arrays(
        quantize(rgb_sums / BLOCK_PIXELS),
        quantize(value_sums / BLOCK_PIXELS),
        background,
    )
