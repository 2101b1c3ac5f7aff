"""Show the learner's digits as hexadecimal.

On binary levels bits are packed four at a time from the left. A short
final group is padded with zeros on the right, so 101 reads as A. Text
with no 0/1 symbols at all is shown unchanged.
On the hexadecimal level this is the normalized text itself.

Example:
    pixel-codec hex ./out drawing.txt --level 4
"""

from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='hex',
    help='Hexadecimal form of the learner digits.',
)


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    report.add('hex', {'digits': exhibit.hex, 'length': len(exhibit.hex)})
