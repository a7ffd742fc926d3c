"""Exceptions raised at the resume export boundary."""

from __future__ import annotations

from pathlib import Path


class ResumarkError(Exception):
    """Base class for resumark errors."""


class PrintSurfaceUnavailableError(ResumarkError):
    """
    Raised when no display surface could be opened for printing.

    Attributes:
        message: Error description
        document_path: The written document that could not be displayed
    """

    def __init__(self, message: str, document_path: Path | None = None) -> None:
        self.message = message
        self.document_path = document_path

        parts = [message]
        if document_path is not None:
            parts.append(f"Document saved at: {document_path}")

        super().__init__("\n".join(parts))
