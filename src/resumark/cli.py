"""resumark CLI entrypoint."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from loguru import logger

from resumark.exceptions import PrintSurfaceUnavailableError
from resumark.export import export_resume
from resumark.generator import ResumeData, generate_markdown
from resumark.printing import open_for_print

_MARKDOWN_EXTENSIONS = (".md", ".markdown", ".txt")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output HTML path")
@click.option("--title", type=str, default=None, help="Override document title")
@click.option("--print", "print_", is_flag=True, help="Open the document in a browser and print it")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(
    input_path: Path,
    output: Path,
    title: str | None,
    print_: bool,
    verbose: bool,
) -> None:
    """Convert resume markdown (or resume JSON) into a print-ready HTML file."""
    _configure_logging(verbose)

    markdown, default_title = _load_markdown(input_path)
    html = export_resume(markdown, title or default_title)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    click.echo(f"Rendered: {output}")

    if print_:
        try:
            open_for_print(html)
        except PrintSurfaceUnavailableError as exc:
            raise click.ClickException(str(exc)) from exc


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("resumark")


def _load_markdown(input_path: Path) -> tuple[str, str | None]:
    lowered = input_path.name.lower()
    if lowered.endswith(_MARKDOWN_EXTENSIONS):
        return input_path.read_text(encoding="utf-8"), None
    if lowered.endswith(".json"):
        try:
            raw = json.loads(input_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"Invalid resume JSON in {input_path.name}: {exc}") from exc
        try:
            data = ResumeData.from_dict(raw)
        except ValueError as exc:
            raise click.ClickException(f"Invalid resume data in {input_path.name}: {exc}") from exc
        return generate_markdown(data), data.header.full_name
    raise click.ClickException(
        f"Unsupported input type: {input_path.name} (expected .md, .markdown, .txt, or .json)"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
