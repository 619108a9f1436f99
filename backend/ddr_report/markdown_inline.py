"""Inline Markdown rewriting (emphasis, code spans, links)."""
from __future__ import annotations

import re

# Order matters: the longest asterisk run has to be consumed first so the
# italic pass never splits an already produced bold span.
_INLINE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*\*(.+?)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"`(.+?)`"), r"<code>\1</code>"),
    (
        re.compile(r"\[([^\]]+)\]\(([^)]+)\)"),
        r'<a href="\2" target="_blank" rel="noopener noreferrer">\1</a>',
    ),
)


def convert_inline(text: str) -> str:
    """Return ``text`` with inline Markdown replaced by HTML tags.

    Text is not HTML-escaped and unmatched markers are left as they are.
    """

    for pattern, replacement in _INLINE_RULES:
        text = pattern.sub(replacement, text)
    return text


__all__ = ["convert_inline"]
