"""Hex grid: one line per pixel row, one space-separated cell per pixel.

A line holds eight pixels of hex digits ((bpp * 8) / 4) and a cell holds
one pixel (bpp / 4). Levels whose pixels are smaller than a hex digit
(1 and 3 bpp) cannot be laid out and are reported as skipped.

The exercise itself only shows this grid on binary levels of 12 bpp or
more; this view lays it out for any level on request.

Example:
    pixel-codec hexview ./out drawing.txt --level 4
"""

from pixel_codec.core.codec import format_hex
from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='hexview',
    help='Hex digits grouped per pixel, one line per pixel row.',
)


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    if exhibit.hex_view is not None:
        text = exhibit.hex_view
    else:
        try:
            text = format_hex(exhibit.hex, exhibit.level.bpp)
        except ValueError as exc:
            report.add('hexview', {'skipped': str(exc)})
            return
    report.add('hexview', {'lines': text.split('\n') if text else []})
