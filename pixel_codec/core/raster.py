"""Rasterizer — draw decoded pixels onto a fixed 8x8 canvas.

The canvas starts as a grey/white checkerboard so that pixels the learner
has not typed yet are visibly unset. Decoded pixels fill PIXEL_SIZE squares
in row-major order; anything past the 64th pixel falls off the canvas.

Channel values are scaled from 0..max_value (which depends on bpp) to 0..255.
"""

import numpy as np
from PIL import Image

from pixel_codec.core.codec import channel_max, decode_pixels
from pixel_codec.core.types import Pixel

GRID_WIDTH = 8
GRID_HEIGHT = 8
PIXEL_SIZE = 32
PATTERN_SIZE = 6

CHECKER_DARK = (0xEE, 0xEE, 0xEE)
CHECKER_LIGHT = (0xFF, 0xFF, 0xFF)


def check_bpp(bpp: int) -> None:
    """Raise ValueError unless bpp splits evenly into three channels (or is 1)."""
    if bpp == 1:
        return
    if bpp <= 0 or bpp % 3 != 0:
        raise ValueError(f'Cannot render {bpp} bits per pixel: must be 1 or a positive multiple of 3')


def scale_pixel(pixel: Pixel, bpp: int) -> Pixel:
    """Scale each channel to 0..255 (clipped, so stray digits cannot overflow)."""
    max_val = channel_max(bpp)
    r, g, b = (min(255, max(0, round(v * 255 / max_val))) for v in pixel)
    return (r, g, b)


def pixel_hex(pixel: Pixel, bpp: int) -> str:
    r, g, b = scale_pixel(pixel, bpp)
    return f'#{r:02x}{g:02x}{b:02x}'


def visible_pixels(pixels: list[Pixel]) -> list[Pixel]:
    """The pixels that land on the grid."""
    return pixels[: GRID_WIDTH * GRID_HEIGHT]


def checkerboard(width: int, height: int) -> np.ndarray:
    """Background canvas: tiles matching in x/y parity are dark, the rest light."""
    ys, xs = np.indices((height, width)) // PATTERN_SIZE
    dark = (xs % 2) == (ys % 2)
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[dark] = CHECKER_DARK
    canvas[~dark] = CHECKER_LIGHT
    return canvas


def render(binary: str, bpp: int, pixel_size: int = PIXEL_SIZE) -> Image.Image:
    """Render a bit string as an 8x8 grid of pixel_size squares."""
    check_bpp(bpp)
    if pixel_size <= 0:
        raise ValueError(f'Pixel size must be positive, got {pixel_size}')

    canvas = checkerboard(GRID_WIDTH * pixel_size, GRID_HEIGHT * pixel_size)
    if not binary:
        return Image.fromarray(canvas)

    for i, pixel in enumerate(visible_pixels(decode_pixels(binary, bpp))):
        row, col = divmod(i, GRID_WIDTH)
        y, x = row * pixel_size, col * pixel_size
        canvas[y : y + pixel_size, x : x + pixel_size] = scale_pixel(pixel, bpp)

    return Image.fromarray(canvas)
