"""Tests for pixel_codec.core.levels — the level catalog and Level properties."""

import pytest
from pixel_codec.core.levels import LEVELS, NUM_LEVELS, custom_level, get_level
from pixel_codec.core.types import EditMode


class TestCatalog:
    def test_five_levels(self):
        assert NUM_LEVELS == 5
        assert len(LEVELS) == 5

    def test_bit_depths_in_order(self):
        assert [lvl.bpp for lvl in LEVELS] == [1, 3, 6, 12, 24]

    def test_edit_modes(self):
        modes = [lvl.edit for lvl in LEVELS]
        assert modes[:4] == [EditMode.BINARY] * 4
        assert modes[4] is EditMode.HEXADECIMAL

    def test_indices_match_position(self):
        for i, lvl in enumerate(LEVELS):
            assert lvl.index == i
            assert lvl.number == i + 1

    def test_titles(self):
        assert LEVELS[0].title == 'On and Off'
        assert LEVELS[4].title == 'Your Masterpiece'

    def test_instructions_plain_text(self):
        for lvl in LEVELS:
            assert lvl.instructions
            assert '<' not in lvl.instructions

    def test_rgb_levels_split_evenly(self):
        for lvl in LEVELS:
            if lvl.bpp != 1:
                assert lvl.bpp % 3 == 0

    def test_levels_are_immutable(self):
        with pytest.raises(AttributeError):
            LEVELS[0].bpp = 3  # type: ignore[misc]


class TestGetLevel:
    def test_first(self):
        assert get_level(0).bpp == 1

    def test_last(self):
        assert get_level(4).edit is EditMode.HEXADECIMAL

    def test_out_of_range(self):
        with pytest.raises(KeyError):
            get_level(5)

    def test_negative_rejected(self):
        with pytest.raises(KeyError):
            get_level(-1)


class TestCustomLevel:
    def test_defaults_to_binary(self):
        lvl = custom_level(6)
        assert lvl.edit is EditMode.BINARY
        assert lvl.index is None
        assert lvl.number is None

    def test_accepts_edit_string(self):
        assert custom_level(24, 'hexadecimal').edit is EditMode.HEXADECIMAL

    def test_slug(self):
        assert custom_level(6).slug == 'custom-6bpp'
        assert LEVELS[2].slug == 'level-3'

    def test_unsupported_bpp(self):
        with pytest.raises(ValueError):
            custom_level(5)

    def test_unknown_edit_mode(self):
        with pytest.raises(ValueError):
            custom_level(3, 'octal')


class TestLevelProperties:
    @pytest.mark.parametrize(('index', 'expected'), [(0, 1), (1, 1), (2, 3), (3, 15), (4, 255)])
    def test_max_value(self, index, expected):
        assert LEVELS[index].max_value == expected

    def test_colour_count(self):
        assert LEVELS[2].colour_count == 64
        assert LEVELS[3].colour_count == 4096

    def test_hex_view_only_on_twelve_bit_binary(self):
        assert [lvl.shows_hex_view for lvl in LEVELS] == [False, False, False, True, False]
