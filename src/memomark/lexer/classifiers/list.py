"""List item classifier mixin.

Task items are tried before plain bullets because both share the ``- ``
prefix.
"""

from __future__ import annotations

import re

from memomark.config import ParseConfig
from memomark.inline import tokenize
from memomark.nodes import Block, OrderedListItem, TaskListItem, UnorderedListItem

TASK_ITEM_RE = re.compile(r"(\s*)- \[([ xX])\] (.*)")
UNORDERED_ITEM_RE = re.compile(r"(\s*)- (.*)")
ORDERED_ITEM_RE = re.compile(r"(\s*)([0-9]+)\. (.*)")

# Columns of leading whitespace per nesting level
INDENT_WIDTH = 2


def indent_level(leading: str) -> int:
    """Nesting level for a run of leading whitespace."""
    return len(leading) // INDENT_WIDTH


class ListClassifierMixin:
    """Mixin providing task, bullet and numbered item classification."""

    _pos: int
    _config: ParseConfig

    def _emit(self, block: Block) -> None:
        """Append a finished block. Implemented by BlockScanner."""
        raise NotImplementedError

    def _flush_paragraph(self) -> None:
        """Close the buffered paragraph. Implemented by BlockScanner."""
        raise NotImplementedError

    def _match_task_item(self, line: str) -> re.Match[str] | None:
        if not self._config.task_lists_enabled:
            return None
        return TASK_ITEM_RE.match(line)

    def _handle_task_item(self, match: re.Match[str]) -> None:
        self._flush_paragraph()
        self._emit(
            TaskListItem(
                indent=indent_level(match.group(1)),
                complete=match.group(2) in "xX",
                children=tokenize(match.group(3)),
            )
        )
        self._pos += 1

    def _match_unordered_item(self, line: str) -> re.Match[str] | None:
        return UNORDERED_ITEM_RE.match(line)

    def _handle_unordered_item(self, match: re.Match[str]) -> None:
        self._flush_paragraph()
        self._emit(
            UnorderedListItem(
                indent=indent_level(match.group(1)),
                children=tokenize(match.group(2)),
            )
        )
        self._pos += 1

    def _match_ordered_item(self, line: str) -> re.Match[str] | None:
        return ORDERED_ITEM_RE.match(line)

    def _handle_ordered_item(self, match: re.Match[str]) -> None:
        self._flush_paragraph()
        self._emit(
            OrderedListItem(
                indent=indent_level(match.group(1)),
                marker=match.group(2),
                children=tokenize(match.group(3)),
            )
        )
        self._pos += 1
