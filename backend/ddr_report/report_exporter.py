"""Utilities for saving generated reports as Markdown or printable HTML files."""
from __future__ import annotations

import html
import re
from datetime import date
from pathlib import Path
from typing import Literal

from .markdown_renderer import render_markdown

ExportFormat = Literal["md", "html"]

DEFAULT_TITLE = "DDR Report"

_DEFAULT_EXPORT_DIR = Path(__file__).resolve().parent / "exports"

_MEDIA_TYPES: dict[str, str] = {
    "md": "text/markdown; charset=utf-8",
    "html": "text/html; charset=utf-8",
}

_heading_re = re.compile(r"^#{1,4}\s+(.+)$")

_PRINT_STYLES = """
body { font-family: system-ui, sans-serif; line-height: 1.5; margin: 2rem; color: #1f2933; }
.table-wrapper { overflow-x: auto; }
table { border-collapse: collapse; width: 100%; margin: 1rem 0; }
th, td { border: 1px solid #cbd2d9; padding: 0.4rem 0.6rem; text-align: left; }
th { background: #f0f4f8; }
blockquote { border-left: 4px solid #9fb3c8; margin: 1rem 0; padding-left: 1rem; color: #486581; }
.citation { color: #627d98; }
.severity-badge { border-radius: 0.75rem; padding: 0.1rem 0.6rem; font-weight: 600; }
.severity-high { background: #ffe3e3; color: #a61b1b; }
.severity-medium { background: #fff3c4; color: #8d6708; }
.severity-low { background: #e3f9e5; color: #207227; }
@media print { body { margin: 0; } }
""".strip()


def _sanitize_stem(value: str) -> str:
    """Return a filesystem-safe stem for the exported file."""

    sanitized = re.sub(r"[^0-9A-Za-z_-]+", "_", value).strip("._")
    return sanitized or "DDR_Report"


def _ensure_export_dir(path: Path | None) -> Path:
    export_dir = Path(path or _DEFAULT_EXPORT_DIR)
    export_dir.mkdir(parents=True, exist_ok=True)
    return export_dir


def _next_available_path(directory: Path, filename: str) -> Path:
    candidate = directory / filename
    if not candidate.exists():
        return candidate

    stem = candidate.stem
    suffix = candidate.suffix
    counter = 1
    while True:
        updated = directory / f"{stem}_{counter}{suffix}"
        if not updated.exists():
            return updated
        counter += 1


def report_title(markdown: str) -> str:
    """Return the text of the first heading, or the default report title."""

    for line in markdown.split("\n"):
        match = _heading_re.match(line.strip())
        if match:
            # Headings may carry inline markup; a <title> cannot.
            return match.group(1).replace("*", "").replace("`", "").strip() or DEFAULT_TITLE
    return DEFAULT_TITLE


def build_html_document(markdown: str) -> str:
    """Wrap the rendered report in a standalone, printable HTML page."""

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(report_title(markdown))}</title>\n"
        f"<style>\n{_PRINT_STYLES}\n</style>\n"
        "</head>\n"
        "<body>\n"
        '<article class="report">\n'
        f"{render_markdown(markdown)}\n"
        "</article>\n"
        "</body>\n"
        "</html>\n"
    )


def media_type_for(fmt: str) -> str:
    try:
        return _MEDIA_TYPES[fmt]
    except KeyError:
        raise ValueError(f"Unsupported export format: {fmt!r}") from None


def export_report(
    markdown: str,
    *,
    fmt: ExportFormat = "md",
    export_dir: Path | None = None,
    report_date: date | None = None,
    filename_prefix: str = "DDR_Report",
) -> tuple[Path, bytes]:
    """Write the report to ``<prefix>_<YYYY-MM-DD>.<fmt>`` and return the path and bytes."""

    if not markdown or not markdown.strip():
        raise ValueError("Report is empty")
    if fmt not in _MEDIA_TYPES:
        raise ValueError(f"Unsupported export format: {fmt!r}")

    if fmt == "html":
        payload = build_html_document(markdown).encode("utf-8")
    else:
        payload = markdown.encode("utf-8")

    stamp = (report_date or date.today()).isoformat()
    filename = f"{_sanitize_stem(filename_prefix)}_{stamp}.{fmt}"
    target_path = _next_available_path(_ensure_export_dir(export_dir), filename)
    target_path.write_bytes(payload)

    return target_path, payload


__all__ = [
    "DEFAULT_TITLE",
    "ExportFormat",
    "build_html_document",
    "export_report",
    "media_type_for",
    "report_title",
]
