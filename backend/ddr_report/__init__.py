"""Markdown-to-HTML rendering for generated DDR reports."""

from ddr_report.markdown_inline import convert_inline
from ddr_report.markdown_renderer import render_markdown
from ddr_report.markdown_tables import convert_table

__all__ = ["convert_inline", "convert_table", "render_markdown"]
