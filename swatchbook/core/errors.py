"""Exception types raised by the swatchbook core."""

from __future__ import annotations


class SwatchbookError(Exception):
    """Base class for every error swatchbook raises on purpose."""


class ParseError(SwatchbookError, ValueError):
    """A hex colour code could not be parsed.

    `index` and `name` identify the offending entry when the code came from an
    entry list, so the caller can report exactly which swatch is broken.
    """

    def __init__(self, code: str, reason: str, index: int | None = None, name: str | None = None):
        self.code = code
        self.reason = reason
        self.index = index
        self.name = name
        if index is None:
            msg = f'invalid hex colour {code!r}: {reason}'
        else:
            msg = f'entry {index} ({name!r}): invalid hex colour {code!r}: {reason}'
        super().__init__(msg)


class LayoutError(SwatchbookError):
    """A text run could not be fitted into its box, even at the smallest scale."""

    def __init__(self, text: str, width: int, height: int):
        self.text = text
        self.width = width
        self.height = height
        super().__init__(f'cannot fit {text!r} into a {width}x{height} box')


class EntryFileError(SwatchbookError):
    """The colour entry input is structurally wrong (not a list of name/hex objects)."""
