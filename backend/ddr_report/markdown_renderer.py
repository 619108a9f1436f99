"""Line-oriented Markdown to HTML rendering for generated DDR reports.

The renderer understands the constrained Markdown subset the report prompt asks
the model for: headings up to level four, bullet and numbered lists, pipe
tables, block quotes, horizontal rules and four inline styles. Anything else is
rendered as a paragraph.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator

from .markdown_inline import convert_inline
from .markdown_models import Block, BlockKind, ListState, ScannerState
from .markdown_tables import convert_table, is_table_line

logger = logging.getLogger(__name__)

CITATION_CLASS = "citation"

_rule_re = re.compile(r"^---+$")
_heading_re = re.compile(r"^(#{1,4})\s+(.+)$")
_quote_re = re.compile(r"^>\s*(.*)$")
_unordered_re = re.compile(r"^[-*+]\s+(.+)$")
_ordered_re = re.compile(r"^\d+\.\s+(.+)$")
_citation_re = re.compile(r"^\*([^*]+)\*$")

_OPEN_LIST_TAGS = {ListState.UNORDERED: "<ul>", ListState.ORDERED: "<ol>"}
_CLOSE_LIST_TAGS = {ListState.UNORDERED: "</ul>", ListState.ORDERED: "</ol>"}

# Container state every block kind requires: (list, quote open).
_TRANSITIONS: dict[BlockKind, tuple[ListState, bool]] = {
    BlockKind.BLANK: (ListState.NONE, False),
    BlockKind.HORIZONTAL_RULE: (ListState.NONE, False),
    BlockKind.TABLE: (ListState.NONE, False),
    BlockKind.HEADING: (ListState.NONE, False),
    BlockKind.QUOTE_LINE: (ListState.NONE, True),
    BlockKind.UNORDERED_ITEM: (ListState.UNORDERED, False),
    BlockKind.ORDERED_ITEM: (ListState.ORDERED, False),
    BlockKind.CITATION: (ListState.NONE, False),
    BlockKind.PARAGRAPH: (ListState.NONE, False),
}


def classify_line(line: str) -> Block:
    """Classify a single line by its leading token.

    Table lines are reported with just the one line; grouping consecutive table
    lines into a run is done by :func:`iter_blocks`.
    """

    trimmed = line.strip()
    if not trimmed:
        return Block(kind=BlockKind.BLANK)
    if _rule_re.match(trimmed):
        return Block(kind=BlockKind.HORIZONTAL_RULE)
    if is_table_line(trimmed):
        return Block(kind=BlockKind.TABLE, lines=[line])

    match = _heading_re.match(trimmed)
    if match:
        return Block(kind=BlockKind.HEADING, text=match.group(2), level=len(match.group(1)))
    match = _quote_re.match(trimmed)
    if match:
        return Block(kind=BlockKind.QUOTE_LINE, text=match.group(1))
    match = _unordered_re.match(trimmed)
    if match:
        return Block(kind=BlockKind.UNORDERED_ITEM, text=match.group(1))
    match = _ordered_re.match(trimmed)
    if match:
        return Block(kind=BlockKind.ORDERED_ITEM, text=match.group(1))
    match = _citation_re.match(trimmed)
    if match:
        return Block(kind=BlockKind.CITATION, text=match.group(1))
    return Block(kind=BlockKind.PARAGRAPH, text=trimmed)


def iter_blocks(lines: Iterable[str]) -> Iterator[Block]:
    """Yield blocks in document order, folding consecutive table lines into one."""

    table_run: list[str] = []
    for line in lines:
        if is_table_line(line):
            table_run.append(line)
            continue
        if table_run:
            yield Block(kind=BlockKind.TABLE, lines=table_run)
            table_run = []
        yield classify_line(line)
    if table_run:
        yield Block(kind=BlockKind.TABLE, lines=table_run)


def transition(state: ScannerState, kind: BlockKind) -> tuple[ScannerState, list[str]]:
    """Move the container state to what ``kind`` needs.

    Returns the new state and the closing/opening tags to emit before the
    block itself.
    """

    target_list, target_quote = _TRANSITIONS[kind]
    fragments: list[str] = []

    if state.list_state is not ListState.NONE and state.list_state is not target_list:
        fragments.append(_CLOSE_LIST_TAGS[state.list_state])
    if state.quote_open and not target_quote:
        fragments.append("</blockquote>")
    if target_quote and not state.quote_open:
        fragments.append("<blockquote>")
    if target_list is not ListState.NONE and target_list is not state.list_state:
        fragments.append(_OPEN_LIST_TAGS[target_list])

    return ScannerState(list_state=target_list, quote_open=target_quote), fragments


def close_containers(state: ScannerState) -> list[str]:
    """Return the tags closing whatever is still open at the end of a document."""

    _, fragments = transition(state, BlockKind.BLANK)
    return fragments


def render_block(block: Block) -> str | None:
    """Return the HTML for one block, or ``None`` for blank lines."""

    kind = block.kind
    if kind is BlockKind.BLANK:
        return None
    if kind is BlockKind.HORIZONTAL_RULE:
        return "<hr/>"
    if kind is BlockKind.TABLE:
        return convert_table(block.lines or [])
    if kind is BlockKind.HEADING:
        return f"<h{block.level}>{convert_inline(block.text)}</h{block.level}>"
    if kind in (BlockKind.UNORDERED_ITEM, BlockKind.ORDERED_ITEM):
        return f"<li>{convert_inline(block.text)}</li>"
    if kind is BlockKind.CITATION:
        return f'<p class="{CITATION_CLASS}"><em>{convert_inline(block.text)}</em></p>'
    # Quote lines and paragraphs are both wrapped in <p>.
    return f"<p>{convert_inline(block.text)}</p>"


def render_blocks(blocks: Iterable[Block], parts: list[str] | None = None) -> list[str]:
    """Append the HTML fragments for ``blocks`` to ``parts`` and return it."""

    parts = [] if parts is None else parts
    state = ScannerState()
    for block in blocks:
        state, fragments = transition(state, block.kind)
        parts.extend(fragments)
        html = render_block(block)
        if html is not None:
            parts.append(html)
    parts.extend(close_containers(state))
    return parts


def count_blocks(markdown: str | None) -> int:
    """Return the number of non-blank blocks in ``markdown``."""

    if not markdown:
        return 0
    return sum(1 for block in iter_blocks(markdown.split("\n")) if block.kind is not BlockKind.BLANK)


def render_markdown(markdown: str | None) -> str:
    """Convert a Markdown report into an HTML fragment.

    Never raises: empty input gives an empty string, malformed tables are
    passed through and open containers are closed at the end of input.
    """

    if not markdown:
        return ""

    parts = render_blocks(iter_blocks(markdown.split("\n")))
    logger.debug("Rendered %s characters of markdown into %s fragments", len(markdown), len(parts))
    return "\n".join(parts)


__all__ = [
    "classify_line",
    "close_containers",
    "count_blocks",
    "iter_blocks",
    "render_block",
    "render_blocks",
    "render_markdown",
    "transition",
]
