"""Load colour entries from JSON.

Input is a JSON array of objects with "name" and "hex" keys:

    [{"name": "Red", "hex": "#FF0000"}, {"name": "Green", "hex": "#00FF00"}]

Every hex code is parsed up front so a bad entry fails the whole run with its
index, name and code instead of being rendered as some default colour.
"""

import json
from typing import Any

from swatchbook.core.colour import parse_hex
from swatchbook.core.errors import EntryFileError, ParseError
from swatchbook.core.types import ColorEntry


def load_entries(path: str) -> list[ColorEntry]:
    """Parse a colour entry file from disk."""
    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise EntryFileError(f'{path}: not valid JSON ({exc})') from exc
    return parse_entries(data)


def parse_entries(data: Any) -> list[ColorEntry]:
    """Validate decoded JSON and build ColorEntry records."""
    if not isinstance(data, list):
        raise EntryFileError(f'expected a JSON array of colour entries, got {type(data).__name__}')
    if not data:
        raise EntryFileError('no colour entries to render')

    entries = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise EntryFileError(f'entry {index}: expected an object, got {type(item).__name__}')
        name, code = item.get('name'), item.get('hex')
        if not isinstance(name, str) or not isinstance(code, str):
            raise EntryFileError(f'entry {index}: "name" and "hex" must both be strings')
        try:
            parse_hex(code)
        except ParseError as exc:
            raise ParseError(code, exc.reason, index=index, name=name) from exc
        entries.append(ColorEntry(name=name, hex=code))
    return entries
