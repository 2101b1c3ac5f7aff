"""Count the colours drawn on the 8x8 grid. Output percentages.

Each visible pixel is scaled to its 8-bit colour; identical colours are
counted together. Percentages are of the pixels drawn, and cells the
learner has not reached yet are reported as unset.

Output: top 10 colours with percentages.

Example:
    pixel-codec census ./out drawing.txt --level 3
"""

import numpy as np

from pixel_codec.core.raster import GRID_HEIGHT, GRID_WIDTH, scale_pixel, visible_pixels
from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='census',
    help='Distinct colours on the grid with percentages.',
)

TOP_N = 10


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    cells = GRID_WIDTH * GRID_HEIGHT
    shown = visible_pixels(exhibit.pixels)
    if not shown:
        report.add('census', {'top': [], 'distinct': 0, 'unset': cells, 'cells': cells})
        return

    scaled = np.array([scale_pixel(px, exhibit.level.bpp) for px in shown], dtype=np.uint8)
    unique, counts = np.unique(scaled, axis=0, return_counts=True)
    # Stable sort keeps equal counts in colour order
    order = np.argsort(-counts, kind='stable')[:TOP_N]

    total = int(counts.sum())
    top = []
    for i in order:
        r, g, b = (int(v) for v in unique[i])
        count = int(counts[i])
        top.append({'hex': f'#{r:02x}{g:02x}{b:02x}', 'count': count, 'pct': round(count / total * 100, 1)})

    report.add(
        'census',
        {
            'top': top,
            'distinct': len(unique),
            'unset': cells - len(shown),
            'cells': cells,
        },
    )
