"""Block and container-state definitions used by the Markdown renderer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BlockKind(str, Enum):
    """Classification of a single Markdown line (or a run of table lines)."""

    BLANK = "blank"
    HORIZONTAL_RULE = "horizontal_rule"
    TABLE = "table"
    HEADING = "heading"
    QUOTE_LINE = "quote_line"
    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    CITATION = "citation"
    PARAGRAPH = "paragraph"


class ListState(str, Enum):
    """Which list container, if any, is currently open."""

    NONE = "none"
    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass(slots=True)
class Block:
    """A classified piece of the Markdown document.

    Parameters
    ----------
    kind:
        What the scanner recognised.
    text:
        Payload text with the block marker stripped. Empty for blank lines,
        rules and tables.
    level:
        Heading depth (1-4). Zero for every other kind.
    lines:
        The raw, untrimmed lines of a table run.
    """

    kind: BlockKind
    text: str = ""
    level: int = 0
    lines: list[str] | None = None


@dataclass(frozen=True, slots=True)
class ScannerState:
    """Open containers while scanning; lists and quotes never overlap."""

    list_state: ListState = ListState.NONE
    quote_open: bool = False


__all__ = ["Block", "BlockKind", "ListState", "ScannerState"]
