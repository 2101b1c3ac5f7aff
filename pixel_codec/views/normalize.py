"""Show the learner's text with comments and whitespace stripped.

Everything after // on a line is a comment. Spaces, tabs and newlines are
removed and the remaining symbols are uppercased. Symbols are not checked
against the binary or hex alphabet here.

Example:
    pixel-codec normalize ./out drawing.txt --level 2
"""

from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='normalize',
    help='Strip comments and whitespace from the learner text.',
)


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    report.add('normalize', {'digits': exhibit.data, 'length': len(exhibit.data)})
