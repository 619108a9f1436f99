"""Reading uploaded Markdown report files."""
from __future__ import annotations

from pathlib import Path

SUPPORTED_SUFFIXES = frozenset({".md", ".markdown", ".txt"})


class UnsupportedReportError(RuntimeError):
    """Raised when an uploaded report is not a Markdown or text file."""


def decode_report_upload(filename: str, content: bytes) -> str:
    """Return the text of an uploaded report.

    UTF-8 is tried first; legacy uploads fall back to cp1251.
    """

    suffix = Path(filename or "").suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedReportError("Only Markdown (.md, .markdown) and text (.txt) reports are supported")

    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        text = content.decode("cp1251", errors="ignore")
    if not text.strip():
        raise ValueError("Uploaded report is empty or unreadable")
    return text


__all__ = ["SUPPORTED_SUFFIXES", "UnsupportedReportError", "decode_report_upload"]
