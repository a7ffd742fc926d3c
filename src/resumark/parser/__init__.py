"""Parser package."""

from .base import (
    Blank,
    Block,
    Bold,
    Heading,
    InlineSpan,
    Italic,
    ListGroup,
    ListItem,
    Paragraph,
    PlainText,
    RawPassthrough,
)
from .block_classifier import classify, classify_line
from .inline_parser import parse_inline
from .md_parser import MarkdownParser

__all__ = [
    "Blank",
    "Block",
    "Bold",
    "Heading",
    "InlineSpan",
    "Italic",
    "ListGroup",
    "ListItem",
    "Paragraph",
    "PlainText",
    "RawPassthrough",
    "classify",
    "classify_line",
    "parse_inline",
    "MarkdownParser",
]
