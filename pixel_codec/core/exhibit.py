"""Exhibit pipeline: learner text for a level -> digits, bits, hex and pixels.

Binary levels decode the typed digits directly and derive hex from them.
Hexadecimal levels decode the expansion of the typed hex digits.
"""

from pixel_codec.core.codec import binary_to_hex, decode_pixels, format_hex, hex_to_binary, normalize
from pixel_codec.core.types import EditMode, Exhibit, Level


def build_exhibit(level: Level, text: str | None) -> Exhibit:
    data = normalize(text) or ''
    if level.edit is EditMode.HEXADECIMAL:
        binary = hex_to_binary(data) or ''
        hex_digits = data
    else:
        binary = data
        hex_digits = binary_to_hex(data) or ''

    hex_view = format_hex(hex_digits, level.bpp) if level.shows_hex_view else None
    return Exhibit(
        level=level,
        text=text or '',
        data=data,
        binary=binary,
        hex=hex_digits,
        pixels=decode_pixels(binary, level.bpp),
        hex_view=hex_view,
    )
