"""Draw the exhibit as a PNG on the 8x8 grid.

Saves to <out_dir>/<level-slug>.png, e.g. ./out/level-3.png. Unset cells
show the grey/white checkerboard. Pixel size comes from --pixel-size or
PIXEL_CODEC_PIXEL_SIZE (default 32, giving a 256x256 image).

Errors from the rasterizer are recorded in the report rather than raised.

Example:
    pixel-codec render ./out drawing.txt --level 3
"""

import os

from pixel_codec.core.raster import PIXEL_SIZE, render
from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='render',
    help='Rasterize the exhibit to <out_dir>/<level>.png.',
)


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    pixel_size = getattr(args, 'pixel_size', None)
    if pixel_size is None:
        pixel_size = PIXEL_SIZE
    try:
        image = render(exhibit.binary, exhibit.level.bpp, pixel_size=pixel_size)
    except ValueError as exc:
        report.record_error('render', str(exc))
        return

    os.makedirs(args.out_dir, exist_ok=True)
    path = os.path.join(args.out_dir, f'{exhibit.level.slug}.png')
    image.save(path)
    report.add('render', {'file': path, 'width': image.width, 'height': image.height})
