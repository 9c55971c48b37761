"""ATX heading classifier mixin."""

from __future__ import annotations

import re

from memomark.inline import tokenize
from memomark.nodes import Block, Heading

# One to six #, exactly one space, then the heading text
HEADING_RE = re.compile(r"(#{1,6}) (.*)")


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    _pos: int

    def _emit(self, block: Block) -> None:
        """Append a finished block. Implemented by BlockScanner."""
        raise NotImplementedError

    def _flush_paragraph(self) -> None:
        """Close the buffered paragraph. Implemented by BlockScanner."""
        raise NotImplementedError

    def _match_heading(self, line: str) -> re.Match[str] | None:
        """Match ``# `` through ``###### `` at the very start of the line.

        Leading whitespace is not allowed and ``#tag`` (no space) is not a
        heading, so it stays paragraph text and tokenizes as a tag.
        """
        return HEADING_RE.match(line)

    def _handle_heading(self, match: re.Match[str]) -> None:
        self._flush_paragraph()
        self._emit(
            Heading(
                level=len(match.group(1)),  # type: ignore[arg-type]
                children=tokenize(match.group(2)),
            )
        )
        self._pos += 1
