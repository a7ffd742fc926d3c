from __future__ import annotations

import pytest
from loguru import logger

from resumark.export import export_resume
from resumark.printing import open_for_print


def test_library_calls_emit_no_log_records(tmp_path, capfd: pytest.CaptureFixture[str]) -> None:
    records: list[str] = []
    handler_id = logger.add(records.append, level="DEBUG")
    try:
        doc = export_resume("# Jane\n- *a**\n")
        open_for_print(doc, opener=lambda uri: True, directory=tmp_path)
    finally:
        logger.remove(handler_id)

    assert records == []
    captured = capfd.readouterr()
    assert captured.err == ""
    assert captured.out == ""
