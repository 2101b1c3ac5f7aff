"""Show the bit string that is decoded into pixels.

On binary levels this is the normalized text itself. On the hexadecimal
level every hex digit expands to four bits and other symbols are dropped.

Example:
    pixel-codec binary ./out masterpiece.txt --level 5
"""

from pixel_codec.core.types import Exhibit, Report, View

view = View(
    name='binary',
    help='Bit string fed to the pixel decoder.',
)


@view.run
def run(exhibit: Exhibit, report: Report, args) -> None:
    report.add('binary', {'digits': exhibit.binary, 'length': len(exhibit.binary)})
