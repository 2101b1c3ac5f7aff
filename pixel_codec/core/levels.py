"""Level catalog — the five stages of the exercise, in order.

Each level raises the bit depth of a pixel. The first four are typed in
binary; the last switches to hexadecimal because 24 bits per pixel is too
tedious to type one bit at a time.
"""

from pixel_codec.core.types import EditMode, Level

SUPPORTED_BPP = (1, 3, 6, 12, 24)

LEVELS: tuple[Level, ...] = (
    Level(
        index=0,
        bpp=1,
        edit=EditMode.BINARY,
        title='On and Off',
        instructions=(
            'Each pixel in the image is represented by a single bit. Use 1 to make a pixel white, '
            'and 0 to make a pixel black.\n'
            "Draw a picture using 1's and 0's.\n"
            'All white space (spaces and new lines) is ignored so you can format the text as you please.'
        ),
    ),
    Level(
        index=1,
        bpp=3,
        edit=EditMode.BINARY,
        title='Red, Green, and Blue',
        instructions=(
            'Each pixel in the image is now represented by three bits. The first bit represents red, '
            'the second green, and the third blue.\n'
            'You can create new colours by mixing red, green, and blue.\n'
            'e.g. 010 is just green (red off, green on, blue off), but 101 mixes red and blue to make magenta.\n'
            "Draw a colourful picture using 1's and 0's."
        ),
    ),
    Level(
        index=2,
        bpp=6,
        edit=EditMode.BINARY,
        title='More Colours',
        instructions=(
            'Each pixel in the image is now represented by six bits. Two for red, two for green, '
            'and two for blue.\n'
            'You can now create even more colours by using four shades of each colour component: '
            '00, 01, 10, and 11.\n'
            'e.g. Bright green is 001100 (zero red, full green, zero blue), but dark green is 000100.\n'
            'As each pixel is six bits, you can now choose from 64 different colours in total.\n'
            "Draw another colourful picture using 1's and 0's."
        ),
    ),
    Level(
        index=3,
        bpp=12,
        edit=EditMode.BINARY,
        title='Even More Colours',
        instructions=(
            'Each pixel in the image is now represented by twelve bits. Four for red, four for green, '
            'and four for blue.\n'
            'e.g. Bright green is represented as 000011110000 (zero red, full green, zero blue).\n'
            'As each pixel is twelve bits, you can now choose from 4096 different colours in total.\n'
            "Draw an even more colourful picture using 1's and 0's.\n"
            'A hexadecimal view is also shown so that you can see how binary can be abbreviated '
            'as hexadecimal.\n'
            'e.g. 000011110000 is written in hexadecimal as 0F0. This makes it much easier to see '
            'the red, green, and blue values at a glance.'
        ),
    ),
    Level(
        index=4,
        bpp=24,
        edit=EditMode.HEXADECIMAL,
        title='Your Masterpiece',
        instructions=(
            'Each pixel in the image is now represented by twenty-four bits. Eight for red, eight for green, '
            'and eight for blue.\n'
            'As each pixel is twenty-four bits, you can now choose from over 16 million different colours.\n'
            "Drawing a picture using binary will be very tedious, so this time you'll be using hexadecimal "
            'to draw your final masterpiece.\n'
            'Each pixel is 6 hexadecimal digits. e.g. Bright green is written as 00FF00 '
            '(zero red, full green, zero blue).'
        ),
    ),
)

NUM_LEVELS = len(LEVELS)


def get_level(index: int) -> Level:
    """Get a catalog level by 0-based index."""
    if not 0 <= index < NUM_LEVELS:
        raise KeyError(f'Unknown level index: {index}. Valid: 0-{NUM_LEVELS - 1}')
    return LEVELS[index]


def custom_level(bpp: int, edit: EditMode | str = EditMode.BINARY) -> Level:
    """Build an ad-hoc level outside the catalog."""
    if bpp not in SUPPORTED_BPP:
        raise ValueError(f'Unsupported bits per pixel: {bpp}. Supported: {", ".join(map(str, SUPPORTED_BPP))}')
    mode = EditMode(edit)
    return Level(index=None, bpp=bpp, edit=mode, title=f'{bpp}-bit {mode.value}')
