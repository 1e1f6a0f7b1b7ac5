import numpy as np
import pytest
from PIL import Image

from ansipix.model import Sample
from ansipix.sampling import quantize, reduce_blocks, to_perceptual


def test_to_perceptual_single_pixel():
    rgb, value = to_perceptual(np.array([255, 51, 0, 255], dtype=np.uint8))
    np.testing.assert_allclose(rgb, [1.0, 0.2, 0.0])
    assert value == pytest.approx(1.0)


def test_to_perceptual_value_is_channel_max():
    pixels = np.array([[[10, 200, 30], [0, 0, 0]]], dtype=np.uint8)
    rgb, value = to_perceptual(pixels)
    assert rgb.shape == (1, 2, 3)
    np.testing.assert_allclose(value, [[200 / 255, 0.0]])


def test_to_perceptual_transparent_reads_black():
    rgb, value = to_perceptual(np.array([200, 100, 50, 0], dtype=np.uint8))
    np.testing.assert_array_equal(rgb, [0.0, 0.0, 0.0])
    assert value == 0.0


def test_quantize_rounds_half_up_and_clips():
    result = quantize(np.array([0.0, 0.6 / 255, 0.4 / 255, 1.0, 1.2, -0.1]))
    np.testing.assert_array_equal(result, [0, 1, 0, 255, 255, 0])
    assert result.dtype == np.uint8


def test_grid_dimensions_follow_block_size():
    canvas = reduce_blocks(Image.new("RGBA", (40, 24), (1, 2, 3, 255)), (0, 0, 0))
    assert (canvas.width, canvas.height) == (10, 3)


@pytest.mark.parametrize("colour", [(200, 100, 50), (0, 0, 0), (255, 255, 255), (17, 230, 99)])
def test_uniform_block_keeps_colour(colour):
    canvas = reduce_blocks(Image.new("RGBA", (4, 8), colour + (255,)), (0, 0, 0))
    sample = canvas.grid[0][0]
    assert all(abs(a - b) <= 1 for a, b in zip(sample.rgb, colour))
    assert sample.brightness == max(colour)


def test_block_average():
    # Left half white, right half black within a single 4x8 block
    img = Image.new("RGBA", (4, 8), (0, 0, 0, 255))
    pixels = img.load()
    for y in range(8):
        for x in range(2):
            pixels[x, y] = (255, 255, 255, 255)
    sample = reduce_blocks(img, (0, 0, 0)).grid[0][0]
    assert sample == Sample(brightness=128, r=128, g=128, b=128)


def test_brightness_averages_per_pixel_value():
    # Half pure red, half pure blue: averaged RGB is dim but every pixel has full value
    img = Image.new("RGBA", (4, 8), (255, 0, 0, 255))
    pixels = img.load()
    for y in range(4, 8):
        for x in range(4):
            pixels[x, y] = (0, 0, 255, 255)
    sample = reduce_blocks(img, (0, 0, 0)).grid[0][0]
    assert sample.rgb == (128, 0, 128)
    assert sample.brightness == 255


def test_blocks_are_independent():
    img = Image.new("RGBA", (8, 16), (0, 0, 0, 255))
    img.paste((255, 255, 0, 255), (4, 8, 8, 16))
    canvas = reduce_blocks(img, (9, 9, 9))
    assert canvas.grid[0][0].rgb == (0, 0, 0)
    assert canvas.grid[0][1].rgb == (0, 0, 0)
    assert canvas.grid[1][0].rgb == (0, 0, 0)
    assert canvas.grid[1][1] == Sample(brightness=255, r=255, g=255, b=0)
    assert canvas.background == (9, 9, 9)
