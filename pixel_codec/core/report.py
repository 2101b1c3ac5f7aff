"""Report builder — text and JSON output for pixel-codec results."""

import json
from typing import Any

from pixel_codec.core.types import Level, Report


def _level_line(level: Level) -> str:
    label = f'level {level.number}' if level.number is not None else 'custom level'
    return f'{label}: {level.title} ({level.bpp} bpp, {level.edit.value})'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'pixel-codec: {report.source_path or "<stdin>"}'
    if report.level is not None:
        header += f' — {_level_line(report.level)}'
    lines.append(header)
    lines.append('')

    for view_name, data in report.sections.items():
        lines.append(f'── {view_name}')
        if 'error' in data:
            lines.append(f'  error: {data["error"]}')
        elif view_name in ('normalize', 'binary', 'hex') and 'digits' in data:
            lines.append(f'  {data["digits"] or "(empty)"}  [{data["length"]} digits]')
        elif view_name == 'hexview' and 'lines' in data:
            for row in data['lines']:
                lines.append(f'  {row}')
            if not data['lines']:
                lines.append('  (empty)')
        elif view_name == 'pixels' and 'pixels' in data:
            lines.append(f'  {data["count"]} decoded, {data["visible"]} on the grid')
            for px in data['pixels']:
                r, g, b = px['rgb']
                lines.append(f'  {px["index"]:>3}  ({r}, {g}, {b})  {px["hex"]}')
        elif view_name == 'census' and 'top' in data:
            parts = [f'{c["hex"]}:{c["pct"]:.1f}%' for c in data['top']]
            lines.append(f'  colours: {", ".join(parts) or "(none)"}')
            lines.append(f'  unset: {data["unset"]} of {data["cells"]} cells')
        elif view_name == 'render' and 'file' in data:
            lines.append(f'  wrote {data["file"]} ({data["width"]}×{data["height"]})')
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {view_name}.{k}: {v}')
        lines.append('')

    if report.errors:
        lines.append(f'ERRORS {len(report.errors)}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'source': report.source_path}
    if report.level is not None:
        level = report.level
        obj['level'] = {
            'number': level.number,
            'title': level.title,
            'bpp': level.bpp,
            'edit': level.edit.value,
        }
    obj['sections'] = report.sections
    obj['errors'] = report.errors
    return json.dumps(obj, indent=2)
