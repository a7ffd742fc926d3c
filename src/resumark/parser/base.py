"""Core intermediate representation (IR) for resume markdown."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PlainText:
    text: str


@dataclass(slots=True)
class Bold:
    children: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class Italic:
    children: list[InlineSpan] = field(default_factory=list)


InlineSpan = PlainText | Bold | Italic


@dataclass(slots=True)
class Heading:
    level: int
    text: str
    spans: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class ListItem:
    text: str
    spans: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class Paragraph:
    text: str
    spans: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class RawPassthrough:
    """A line that already holds markup; emitted without wrapping or escaping."""

    content: str


@dataclass(slots=True)
class Blank:
    pass


Block = Heading | ListItem | Paragraph | RawPassthrough | Blank


@dataclass(slots=True)
class ListGroup:
    items: list[ListItem] = field(default_factory=list)


RenderGroup = Heading | Paragraph | ListGroup | RawPassthrough
