"""Conversion of pipe-delimited Markdown tables into HTML tables."""
from __future__ import annotations

import logging
import re
from typing import Sequence

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = ("high", "medium", "low")
TABLE_WRAPPER_CLASS = "table-wrapper"

_separator_re = re.compile(r"^\|[\s\-|:]+\|$")


def is_table_line(line: str) -> bool:
    """Return ``True`` when the trimmed line both starts and ends with a pipe."""

    trimmed = line.strip()
    return trimmed.startswith("|") and trimmed.endswith("|")


def is_separator_row(line: str) -> bool:
    return bool(_separator_re.match(line.strip()))


def split_row(line: str) -> list[str]:
    """Split a table row into trimmed cells, dropping the outer-pipe padding."""

    cells = [cell.strip() for cell in line.strip().split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def apply_severity_badge(cell: str) -> str:
    """Wrap ``high``/``medium``/``low`` cells in a severity badge span."""

    text = cell.strip()
    level = text.casefold()
    if level in SEVERITY_LEVELS:
        return f'<span class="severity-badge severity-{level}">{text}</span>'
    return text


def convert_table(lines: Sequence[str]) -> str:
    """Render one contiguous run of table lines.

    Runs that do not hold at least a header and one body row once separator
    rows are removed are returned verbatim.
    """

    rows = [line for line in lines if not is_separator_row(line)]
    if len(rows) < 2:
        logger.debug("Table run with %s usable row(s) left unconverted", len(rows))
        return "\n".join(lines)

    header, *body = rows
    parts = [f'<div class="{TABLE_WRAPPER_CLASS}"><table>', "<thead><tr>"]
    parts.extend(f"<th>{cell}</th>" for cell in split_row(header))
    parts.append("</tr></thead><tbody>")
    for row in body:
        parts.append("<tr>")
        parts.extend(f"<td>{apply_severity_badge(cell)}</td>" for cell in split_row(row))
        parts.append("</tr>")
    parts.append("</tbody></table></div>")
    return "".join(parts)


__all__ = [
    "SEVERITY_LEVELS",
    "apply_severity_badge",
    "convert_table",
    "is_separator_row",
    "is_table_line",
    "split_row",
]
