"""Markdown parser producing resume blocks with resolved inline spans."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .base import Block, Heading, ListItem, Paragraph
from .block_classifier import classify
from .inline_parser import parse_inline


class MarkdownParser:
    """Parse resume markdown into an ordered list of blocks."""

    def parse(self, input_path: Path) -> list[Block]:
        input_path = Path(input_path)
        raw = input_path.read_text(encoding="utf-8")
        return self.parse_text(raw)

    def parse_text(self, text: str) -> list[Block]:
        blocks = classify(text)
        for block in blocks:
            if isinstance(block, (Heading, ListItem, Paragraph)):
                block.spans = parse_inline(block.text)

        logger.debug(f"Classified {len(blocks)} lines into blocks")
        return blocks
