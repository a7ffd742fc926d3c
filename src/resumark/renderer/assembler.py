"""Wrap a rendered fragment into a self-contained, print-ready document."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from loguru import logger

DEFAULT_TITLE = "Resume"


class DocumentAssembler:
    """Render the fragment and title through the print template."""

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "resume_print.html"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def assemble(self, fragment: str, title: str | None = None) -> str:
        page_title = resolve_title(title)
        logger.debug(f"Assembling document '{page_title}' with template {self._template_name}")

        template = self._env.get_template(self._template_name)
        return template.render(page_title=page_title, body=fragment)


def resolve_title(title: str | None) -> str:
    """Return the stripped display title, or ``"Resume"`` when it is blank."""
    return (title or "").strip() or DEFAULT_TITLE
