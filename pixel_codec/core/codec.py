"""Digit string codec: normalize learner text, convert bases, decode pixels.

All functions are pure and never raise on malformed text. Invalid symbols
are filtered, empty input passes straight through and incomplete trailing
groups are padded or dropped.

    >>> decode_pixels(normalize('010 // green\\n101 // magenta'), 3)
    [(0, 1, 0), (1, 0, 1)]
"""

import re

HEX_DIGITS = '0123456789ABCDEF'
BINARY_DIGITS = '01'
COMMENT_MARKER = '//'

# U+FEFF (byte-order mark) counts as whitespace too
_WHITESPACE = re.compile(r'[\s\ufeff]')


def normalize(text):
    """Strip // comments and whitespace from learner text, uppercase the rest.

    Falsy input is returned as-is (None stays None).
    """
    if not text:
        return text
    code = ''.join(line.split(COMMENT_MARKER, 1)[0] for line in text.split('\n'))
    return _WHITESPACE.sub('', code).upper()


def hex_to_binary(hex_digits):
    """Expand each hex digit to four bits, MSB first. Non-hex symbols are dropped."""
    if not hex_digits:
        return hex_digits
    return ''.join(f'{int(c, 16):04b}' for c in hex_digits.upper() if c in HEX_DIGITS)


def binary_to_hex(binary):
    """Pack bits into hex digits, four at a time from the left.

    A short final chunk is read as if zero-padded on the right, so '101'
    becomes 'A'. When no 0/1 symbols survive filtering the original input
    is returned unchanged.
    """
    if not binary:
        return binary
    bits = ''.join(c for c in binary if c in BINARY_DIGITS)
    if not bits:
        return binary
    chunks = _chunk(bits, 4)
    return ''.join(HEX_DIGITS[int(chunk.ljust(4, '0'), 2)] for chunk in chunks)


def channel_max(bpp: int) -> int:
    """Largest value a single channel can hold at this bit depth."""
    if bpp == 1:
        return 1
    return (1 << (bpp // 3)) - 1


def _digit_value(symbol: str) -> int:
    return int(symbol) if symbol in '0123456789' else 0


def decode_pixels(binary: str, bpp: int) -> list[tuple[int, int, int]]:
    """Group a bit string into (R, G, B) triples.

    With bpp=1 every symbol is a grey pixel of its own. Otherwise each
    channel takes bpp/3 bits, MSB first, cycling red, green, blue. Pixels
    exist for every completed red group; a green or blue group that never
    completed reads as 0.
    """
    if bpp == 1:
        return [(_digit_value(bit),) * 3 for bit in binary]

    group_size = bpp // 3
    red: list[int] = []
    green: list[int] = []
    blue: list[int] = []
    channels = (red, green, blue)

    channel = 0
    bit_count = 0
    accumulator = 0
    for bit in binary:
        accumulator += _digit_value(bit)
        bit_count += 1
        if bit_count == group_size:
            channels[channel].append(accumulator)
            accumulator = 0
            bit_count = 0
            channel = (channel + 1) % 3
        else:
            accumulator <<= 1

    return [
        (r, green[i] if i < len(green) else 0, blue[i] if i < len(blue) else 0)
        for i, r in enumerate(red)
    ]


def format_hex(hex_string, bpp: int = 24):
    """Lay a hex string out as one line per pixel row, one cell per pixel.

    A row holds eight pixels, i.e. (bpp * 8) / 4 digits; a cell holds bpp / 4.
    """
    if not hex_string:
        return hex_string
    line_length = (bpp * 8) // 4
    cell_width = bpp // 4
    if line_length <= 0 or cell_width <= 0:
        raise ValueError(f'Cannot format hex at {bpp} bits per pixel: a pixel is less than one hex digit')

    lines = [' '.join(_chunk(line, cell_width)) for line in _chunk(hex_string, line_length)]
    return '\n'.join(lines).upper()


def _chunk(text: str, size: int) -> list[str]:
    """Split text into consecutive pieces of `size`; the last may be shorter."""
    return [text[i : i + size] for i in range(0, len(text), size)]
