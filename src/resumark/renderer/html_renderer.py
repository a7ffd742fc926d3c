"""Render resume blocks into an HTML fragment."""

from __future__ import annotations

import html

from loguru import logger

from resumark.parser.base import (
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
    RenderGroup,
)
from resumark.parser.inline_parser import parse_inline


class HTMLRenderer:
    """Map a block sequence to an HTML fragment.

    Rendering is a pure function of the blocks: list items are first folded
    into ``ListGroup`` runs, then every group is emitted on its own line.
    """

    def render(self, blocks: list[Block]) -> str:
        groups = group_blocks(blocks)
        logger.debug(f"Rendering {len(groups)} groups from {len(blocks)} blocks")
        return "\n".join(self._render_group(group) for group in groups)

    def _render_group(self, group: RenderGroup) -> str:
        if isinstance(group, Heading):
            return f"<h{group.level}>{self._render_text(group)}</h{group.level}>"

        if isinstance(group, Paragraph):
            return f"<p>{self._render_text(group)}</p>"

        if isinstance(group, ListGroup):
            items = "".join(f"<li>{self._render_text(item)}</li>" for item in group.items)
            return f"<ul>{items}</ul>"

        if isinstance(group, RawPassthrough):
            return group.content

        return ""

    def _render_text(self, block: Heading | ListItem | Paragraph) -> str:
        spans = block.spans if block.spans or not block.text else parse_inline(block.text)
        return render_spans(spans)


def render_spans(spans: list[InlineSpan]) -> str:
    parts: list[str] = []
    for span in spans:
        if isinstance(span, PlainText):
            parts.append(html.escape(span.text, quote=False))
        elif isinstance(span, Bold):
            parts.append(f"<strong>{render_spans(span.children)}</strong>")
        elif isinstance(span, Italic):
            parts.append(f"<em>{render_spans(span.children)}</em>")
    return "".join(parts)


def group_blocks(blocks: list[Block]) -> list[RenderGroup]:
    """Fold adjacent list items into ``ListGroup`` runs and drop blanks.

    A run survives a single blank line; a second consecutive blank or any
    other block closes it.
    """
    groups: list[RenderGroup] = []
    current: ListGroup | None = None
    blanks = 0

    for block in blocks:
        if isinstance(block, Blank):
            blanks += 1
            if blanks >= 2:
                current = None
            continue

        if isinstance(block, ListItem):
            if current is None:
                current = ListGroup()
                groups.append(current)
            current.items.append(block)
        else:
            current = None
            groups.append(block)
        blanks = 0

    return groups
