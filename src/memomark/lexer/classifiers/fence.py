"""Fenced code block classifier mixin."""

from __future__ import annotations

import re

from memomark.lexer.modes import ScanMode
from memomark.nodes import Block, CodeBlock
from memomark.utils.logger import get_logger

logger = get_logger(__name__)

# Leading whitespace, three backticks, then the language / info text
FENCE_RE = re.compile(r"\s*```(.*)")


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # These will be set by the BlockScanner class
    _lines: list[str]
    _pos: int
    _mode: ScanMode

    def _emit(self, block: Block) -> None:
        """Append a finished block. Implemented by BlockScanner."""
        raise NotImplementedError

    def _flush_paragraph(self) -> None:
        """Close the buffered paragraph. Implemented by BlockScanner."""
        raise NotImplementedError

    def _match_fence(self, line: str) -> re.Match[str] | None:
        """Match a line whose trimmed form starts with three backticks."""
        return FENCE_RE.match(line)

    def _handle_fence(self, match: re.Match[str]) -> None:
        """Consume a whole fenced code block starting at the current line.

        Lines after the opening fence are taken verbatim until the next fence
        line. Both fence lines are consumed. Without a closing fence the block
        absorbs the rest of the input.
        """
        self._flush_paragraph()
        start = self._pos
        language = match.group(1).strip()

        self._mode = ScanMode.CODE_FENCE
        self._pos += 1
        content: list[str] = []
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            self._pos += 1
            if FENCE_RE.match(line):
                self._mode = ScanMode.BLOCK
                break
            content.append(line)

        if self._mode is ScanMode.CODE_FENCE:
            logger.debug(
                "Unterminated code fence opened at line %d; absorbed %d line(s)",
                start + 1,
                len(content),
            )
            self._mode = ScanMode.BLOCK

        self._emit(CodeBlock(language=language, content="\n".join(content)))
