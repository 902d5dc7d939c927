"""Report builder — text and JSON output for swatchbook runs."""

import json
from typing import Any

from swatchbook.core.types import RenderReport


def format_text(report: RenderReport) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'swatchbook: {report.input_path} ({len(report.ordering)} colours, order={report.sequencer})'
    if report.output_path:
        header += f' \u2192 {report.output_path} ({report.image_width}\u00d7{report.image_height})'
    lines.append(header)
    lines.append('')

    if report.swatches:
        for s in report.swatches:
            label = s.get('label', '?')
            scales = f'name@{s["name_scale"]:.1f} hex@{s["hex_scale"]:.1f}' if 'name_scale' in s else ''
            lines.append(f'  [{s["row"]},{s["col"]}] {s["name"]:<24} {s["hex"]:<8} label {label}  {scales}'.rstrip())
    else:
        lines.append(f'  order: {" ".join(str(i) for i in report.ordering)}')

    lines.append('')
    if report.output_path:
        lines.append(f'Saved {len(report.ordering)} colour blocks to {report.output_path}')
    return '\n'.join(lines)


def format_json(report: RenderReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'input': report.input_path,
        'order': report.sequencer,
        'ordering': report.ordering,
    }
    if report.output_path:
        obj['output'] = report.output_path
        obj['dimensions'] = {'width': report.image_width, 'height': report.image_height, 'columns': report.columns}
    obj['swatches'] = report.swatches
    return json.dumps(obj, indent=2)
