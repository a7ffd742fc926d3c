"""Resume export pipeline: markdown in, print-ready HTML document out."""

from __future__ import annotations

from resumark.generator import ResumeData, generate_markdown
from resumark.parser.md_parser import MarkdownParser
from resumark.renderer.assembler import DocumentAssembler
from resumark.renderer.html_renderer import HTMLRenderer


def render_markdown(markdown: str) -> str:
    """Return the HTML fragment for *markdown*."""
    blocks = MarkdownParser().parse_text(markdown)
    return HTMLRenderer().render(blocks)


def export_resume(markdown: str, title: str | None = None) -> str:
    """Return the complete print document for *markdown*."""
    return DocumentAssembler().assemble(render_markdown(markdown), title)


def export_resume_data(data: ResumeData) -> str:
    return export_resume(generate_markdown(data), data.header.full_name)
