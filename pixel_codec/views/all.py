"""Run every view except render, combine into a single report.

Runs: normalize, binary, hex, hexview, pixels, census.
Skips: render (writes files — run explicitly).

Example:
    pixel-codec all ./out drawing.txt --level 4
    pixel-codec all ./out drawing.txt --level 4 --json
"""

from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='all',
    help='Run every view (except render). Combine into a single report.',
)

# Views never run automatically
SKIP = {'all', 'render'}

# Pipeline order, so the report reads top to bottom
ORDER = ('normalize', 'binary', 'hex', 'hexview', 'pixels', 'census')


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    from pixel_codec.registry import all_views

    views = all_views()
    names = [n for n in ORDER if n in views]
    names += sorted(n for n in views if n not in ORDER and n not in SKIP)
    for name in names:
        views[name].execute(exhibit, report, args)
