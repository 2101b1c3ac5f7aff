"""Tests for pixel_codec.core.raster — checkerboard canvas and pixel drawing."""

import numpy as np
import pytest
from pixel_codec.core.raster import (
    CHECKER_DARK,
    CHECKER_LIGHT,
    checkerboard,
    pixel_hex,
    render,
    scale_pixel,
    visible_pixels,
)


class TestScalePixel:
    def test_one_bit_white(self):
        assert scale_pixel((1, 1, 1), 1) == (255, 255, 255)

    def test_six_bit(self):
        assert scale_pixel((3, 0, 1), 6) == (255, 0, 85)

    def test_twelve_bit(self):
        assert scale_pixel((7, 15, 0), 12) == (119, 255, 0)

    def test_twenty_four_bit_identity(self):
        assert scale_pixel((12, 34, 56), 24) == (12, 34, 56)

    def test_clipped(self):
        assert scale_pixel((2, 2, 2), 1) == (255, 255, 255)


class TestPixelHex:
    def test_green(self):
        assert pixel_hex((0, 15, 0), 12) == '#00ff00'

    def test_black(self):
        assert pixel_hex((0, 0, 0), 3) == '#000000'


class TestVisiblePixels:
    def test_clips_to_grid(self):
        assert len(visible_pixels([(0, 0, 0)] * 70)) == 64

    def test_short_list_untouched(self):
        assert visible_pixels([(1, 1, 1)]) == [(1, 1, 1)]


class TestCheckerboard:
    def test_shape(self):
        assert checkerboard(12, 6).shape == (6, 12, 3)

    def test_tiles(self):
        board = checkerboard(18, 12)
        assert tuple(board[0, 0]) == CHECKER_DARK
        assert tuple(board[0, 6]) == CHECKER_LIGHT
        assert tuple(board[6, 0]) == CHECKER_LIGHT
        assert tuple(board[6, 6]) == CHECKER_DARK
        assert tuple(board[11, 11]) == CHECKER_DARK
        assert tuple(board[11, 17]) == CHECKER_LIGHT


class TestRender:
    def test_canvas_size(self):
        img = render('', 1)
        assert img.size == (256, 256)
        assert img.mode == 'RGB'

    def test_empty_is_checkerboard(self):
        img = render('', 3)
        assert img.getpixel((0, 0)) == CHECKER_DARK
        assert img.getpixel((6, 0)) == CHECKER_LIGHT

    def test_one_bit_white_pixel(self):
        img = render('1', 1)
        assert img.getpixel((0, 0)) == (255, 255, 255)
        assert img.getpixel((31, 31)) == (255, 255, 255)
        # Next cell is unset, checkerboard shows through
        assert img.getpixel((36, 0)) == CHECKER_DARK

    def test_one_bit_black_pixel(self):
        assert render('0', 1).getpixel((10, 10)) == (0, 0, 0)

    def test_three_bit_red(self):
        assert render('100', 3).getpixel((5, 5)) == (255, 0, 0)

    def test_six_bit_scaled(self):
        assert render('010000', 6).getpixel((5, 5)) == (85, 0, 0)

    def test_row_major(self):
        img = render('000000001', 1, pixel_size=4)
        assert img.size == (32, 32)
        assert img.getpixel((0, 4)) == (255, 255, 255)
        assert img.getpixel((28, 0)) == (0, 0, 0)

    def test_excess_pixels_clipped(self):
        img = render('1' * 70, 1)
        assert img.size == (256, 256)
        arr = np.array(img)
        assert (arr == 255).all()

    def test_partial_pixel_not_drawn(self):
        # 12 bpp needs 4 bits for red; '11' alone draws nothing
        assert render('11', 12).getpixel((0, 0)) == CHECKER_DARK

    def test_invalid_bpp(self):
        with pytest.raises(ValueError):
            render('1', 4)
        with pytest.raises(ValueError):
            render('1', 0)

    def test_invalid_pixel_size(self):
        with pytest.raises(ValueError):
            render('1', 1, pixel_size=0)
