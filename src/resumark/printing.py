"""Hand an assembled document to the system browser for printing."""

from __future__ import annotations

import tempfile
import webbrowser
from pathlib import Path
from typing import Callable

from loguru import logger

from resumark.exceptions import PrintSurfaceUnavailableError

PRINT_DELAY_MS = 250

_PRINT_TRIGGER = f"<script>setTimeout(function () {{ window.print(); }}, {PRINT_DELAY_MS});</script>"


def open_for_print(
    document: str,
    *,
    opener: Callable[[str], bool] = webbrowser.open,
    directory: Path | None = None,
) -> Path:
    """Write *document* with a delayed print trigger and open it.

    Returns the path of the written file. Raises
    ``PrintSurfaceUnavailableError`` when the opener cannot show it.

    The file is never deleted here: the browser loads it after this call
    returns, so removing it is left to the caller (or the OS temp cleanup).
    """
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        suffix=".html",
        prefix="resume-",
        dir=directory,
        delete=False,
    ) as handle:
        handle.write(_with_print_trigger(document))
        path = Path(handle.name)

    logger.debug(f"Print document written to {path}")

    try:
        opened = opener(path.resolve().as_uri())
    except webbrowser.Error as exc:
        raise PrintSurfaceUnavailableError(f"Could not open a browser window: {exc}", path) from exc

    if not opened:
        raise PrintSurfaceUnavailableError("Popup blocked. Please allow a browser window to open.", path)

    return path


def _with_print_trigger(document: str) -> str:
    marker = "</body>"
    idx = document.rfind(marker)
    if idx == -1:
        return document + _PRINT_TRIGGER
    return document[:idx] + _PRINT_TRIGGER + "\n" + document[idx:]
