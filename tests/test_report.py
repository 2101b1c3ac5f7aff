"""Tests for pixel_codec.core.report — text and JSON formatting."""

import json

from pixel_codec.core.levels import LEVELS, custom_level
from pixel_codec.core.report import format_json, format_text
from pixel_codec.core.types import Report


def _report() -> Report:
    report = Report(source_path='drawing.txt', level=LEVELS[3])
    report.add('hex', {'digits': '0F0', 'length': 3})
    report.add('hexview', {'lines': ['0F0 F00', '000']})
    report.add(
        'pixels',
        {
            'count': 1,
            'visible': 1,
            'max_value': 15,
            'pixels': [{'index': 0, 'rgb': [0, 15, 0], 'hex': '#00ff00'}],
        },
    )
    report.add(
        'census',
        {
            'top': [{'hex': '#00ff00', 'count': 1, 'pct': 100.0}],
            'distinct': 1,
            'unset': 63,
            'cells': 64,
        },
    )
    return report


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        first = text.splitlines()[0]
        assert 'drawing.txt' in first
        assert 'level 4: Even More Colours (12 bpp, binary)' in first

    def test_custom_level_header(self):
        text = format_text(Report(source_path='x.txt', level=custom_level(6)))
        assert 'custom level' in text.splitlines()[0]

    def test_stdin_header(self):
        assert '<stdin>' in format_text(Report())

    def test_sections(self):
        text = format_text(_report())
        assert '0F0  [3 digits]' in text
        assert '  0F0 F00' in text
        assert '(0, 15, 0)  #00ff00' in text
        assert '#00ff00:100.0%' in text
        assert 'unset: 63 of 64 cells' in text

    def test_empty_digits(self):
        report = Report()
        report.add('binary', {'digits': '', 'length': 0})
        assert '(empty)' in format_text(report)

    def test_error_section(self):
        report = Report()
        report.record_error('render', 'boom')
        text = format_text(report)
        assert 'error: boom' in text
        assert 'ERRORS 1' in text

    def test_generic_fallback(self):
        report = Report()
        report.add('hexview', {'skipped': 'too small'})
        assert 'hexview.skipped: too small' in format_text(report)


class TestFormatJson:
    def test_round_trips_through_json(self):
        obj = json.loads(format_json(_report()))
        assert obj['source'] == 'drawing.txt'
        assert obj['level'] == {'number': 4, 'title': 'Even More Colours', 'bpp': 12, 'edit': 'binary'}
        assert obj['sections']['hex']['digits'] == '0F0'
        assert obj['errors'] == []

    def test_no_level(self):
        obj = json.loads(format_json(Report(source_path='a')))
        assert 'level' not in obj
