"""Decoded (R, G, B) triples, in row-major order.

At 1 bpp every bit is one grey pixel (0 black, 1 white). Otherwise each
channel takes bpp/3 bits, most significant bit first, cycling red, green,
blue. A trailing red group that is not complete yields no pixel; missing
green or blue values read as 0.

Each pixel is reported with its raw channel values and the 8-bit colour
it is drawn with. Only the first 64 pixels land on the 8x8 grid.

Example:
    pixel-codec pixels ./out drawing.txt --level 2 --json
"""

from pixel_codec.core.raster import pixel_hex, visible_pixels
from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='pixels',
    help='Decoded RGB triples and the colour each is drawn with.',
)


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    bpp = exhibit.level.bpp
    pixels = [
        {'index': i, 'rgb': list(px), 'hex': pixel_hex(px, bpp)}
        for i, px in enumerate(exhibit.pixels)
    ]
    report.add(
        'pixels',
        {
            'count': len(exhibit.pixels),
            'visible': len(visible_pixels(exhibit.pixels)),
            'max_value': exhibit.level.max_value,
            'pixels': pixels,
        },
    )
