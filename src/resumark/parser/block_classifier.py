"""Line-level classification of resume markdown into typed blocks."""

from __future__ import annotations

from .base import Blank, Block, Heading, ListItem, Paragraph, RawPassthrough

# Longest prefix first: "### x" also starts with "#".
_HEADING_PREFIXES: tuple[tuple[str, int], ...] = (
    ("### ", 3),
    ("## ", 2),
    ("# ", 1),
)
_LIST_PREFIX = "- "


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and drop a trailing ``\\r`` from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def classify_line(line: str) -> Block:
    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level=level, text=line[len(prefix):])

    if line.startswith(_LIST_PREFIX):
        return ListItem(text=line[len(_LIST_PREFIX):])

    stripped = line.lstrip()
    if stripped.startswith("<"):
        return RawPassthrough(content=line)

    if stripped:
        return Paragraph(text=line)

    return Blank()


def classify(text: str) -> list[Block]:
    """Classify every line of *text*, preserving input order."""
    return [classify_line(line) for line in split_lines(text)]
