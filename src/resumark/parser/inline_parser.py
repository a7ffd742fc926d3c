"""Recursive-descent parser for ``**bold**`` and ``*italic*`` spans.

The parser walks an index cursor over the original string and never fails:
a delimiter without a closer is kept as literal text.
"""

from __future__ import annotations

from .base import Bold, InlineSpan, Italic, PlainText

_BOLD = "**"
_ITALIC = "*"


def parse_inline(text: str) -> list[InlineSpan]:
    """Parse *text* into spans covering the whole string."""
    return _parse_range(text, 0, len(text))


def _parse_range(text: str, start: int, end: int) -> list[InlineSpan]:
    spans: list[InlineSpan] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            spans.append(PlainText("".join(literal)))
            literal.clear()

    # A failed closer search means every later search in this range fails too.
    bold_closable = True
    italic_closable = True

    i = start
    while i < end:
        if text.startswith(_BOLD, i, end):
            close = text.find(_BOLD, i + 2, end) if bold_closable else -1
            if close != -1:
                flush()
                spans.append(Bold(_parse_range(text, i + 2, close)))
                i = close + 2
                continue
            bold_closable = False
            literal.append(_BOLD)
            i += 2
            continue

        if text[i] == _ITALIC:
            close = _find_italic_close(text, i + 1, end) if italic_closable else -1
            if close != -1:
                flush()
                spans.append(Italic(_parse_range(text, i + 1, close)))
                i = close + 1
                continue
            italic_closable = False

        literal.append(text[i])
        i += 1

    flush()
    return spans


def _find_italic_close(text: str, start: int, end: int) -> int:
    """Return the index of the nearest closing ``*``.

    A ``**`` that opens a bold pair closed inside the range is stepped over
    whole; any other ``*`` closes the italic.
    """
    j = text.find(_ITALIC, start, end)
    while j != -1:
        if text.startswith(_BOLD, j, end):
            bold_close = text.find(_BOLD, j + 2, end)
            if bold_close != -1:
                j = text.find(_ITALIC, bold_close + 2, end)
                continue
        return j
    return -1
