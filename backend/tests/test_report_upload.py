"""Unit tests for decoding uploaded reports."""

from __future__ import annotations

import pytest

from ddr_report.report_upload import UnsupportedReportError, decode_report_upload


@pytest.mark.parametrize("filename", ["report.md", "REPORT.MARKDOWN", "notes.txt"])
def test_supported_suffixes(filename: str) -> None:
    assert decode_report_upload(filename, b"# Title") == "# Title"


@pytest.mark.parametrize("filename", ["report.pdf", "report.docx", "", "report"])
def test_unsupported_suffixes(filename: str) -> None:
    with pytest.raises(UnsupportedReportError):
        decode_report_upload(filename, b"# Title")


def test_cp1251_fallback() -> None:
    assert decode_report_upload("report.txt", "Спецификация".encode("cp1251")) == "Спецификация"


def test_empty_upload_raises_value_error() -> None:
    with pytest.raises(ValueError):
        decode_report_upload("report.md", b" \n\t")
