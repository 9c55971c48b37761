"""Line-based block scanner.

Walks a single cursor over the lines of a note and classifies each line with
an ordered rule table; the first rule whose predicate matches handles the
line. The order is the precedence contract:

    fence > task item > bullet > numbered item > heading > blank > paragraph

Fences pre-empt everything because code content is never classified, and
task items come before bullets because both start with ``- ``.

Malformed constructs simply fail their predicate and fall through, ending as
paragraph text. Scanning never raises.

Thread Safety:
BlockScanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeAlias

from memomark.config import ParseConfig, get_parse_config
from memomark.inline import tokenize
from memomark.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
)
from memomark.lexer.modes import ScanMode
from memomark.nodes import Block, Document, Inline, LineBreak, Paragraph

Predicate: TypeAlias = Callable[[str], re.Match[str] | None]
Handler: TypeAlias = Callable[[re.Match[str]], None]
Rule: TypeAlias = tuple[str, Predicate, Handler]

_BLANK_RE = re.compile(r"\s*$")
_ANY_RE = re.compile(r".*")


class BlockScanner(
    FenceClassifierMixin,
    ListClassifierMixin,
    HeadingClassifierMixin,
):
    """Scan note text into a Document of block nodes.

    Usage:
        >>> BlockScanner("## Title").scan()
        Document(children=(Heading(level=2, children=(Text(content='Title'),)),))

    Configuration is read from the active ParseConfig when the scanner is
    created, unless one is passed explicitly.

    """

    __slots__ = (
        "_lines",
        "_pos",
        "_mode",
        "_config",
        "_blocks",
        "_paragraph",
        "_rules",
    )

    def __init__(self, source: str, config: ParseConfig | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: Raw note text
            config: Parse configuration (defaults to the context's config)
        """
        self._lines = source.split("\n")
        self._pos = 0
        self._mode = ScanMode.BLOCK
        self._config = config if config is not None else get_parse_config()
        self._blocks: list[Block] = []
        # Raw lines of the paragraph being buffered
        self._paragraph: list[str] = []
        self._rules: tuple[Rule, ...] = (
            ("fence", self._match_fence, self._handle_fence),
            ("task_item", self._match_task_item, self._handle_task_item),
            ("unordered_item", self._match_unordered_item, self._handle_unordered_item),
            ("ordered_item", self._match_ordered_item, self._handle_ordered_item),
            ("heading", self._match_heading, self._handle_heading),
            ("blank", self._match_blank, self._handle_blank),
            ("paragraph", self._match_paragraph_line, self._handle_paragraph_line),
        )

    @property
    def rule_names(self) -> tuple[str, ...]:
        """Rule names in precedence order."""
        return tuple(name for name, _, _ in self._rules)

    def classify(self, line: str) -> str:
        """Name of the rule that would handle ``line`` in block mode."""
        for name, predicate, _ in self._rules:
            if predicate(line) is not None:
                return name
        return self._rules[-1][0]

    def scan(self) -> Document:
        """Scan the whole source.

        An empty or whitespace-only source yields an empty Document.

        Complexity: O(n) in the number of lines; every handler advances the
        cursor by at least one line.
        """
        if not any(line.strip() for line in self._lines):
            return Document(children=())

        lines_count = len(self._lines)
        while self._pos < lines_count:
            line = self._lines[self._pos]
            for _name, predicate, handler in self._rules:
                match = predicate(line)
                if match is not None:
                    handler(match)
                    break

        self._flush_paragraph()
        return Document(children=tuple(self._blocks))

    # =========================================================================
    # Block assembly
    # =========================================================================

    def _emit(self, block: Block) -> None:
        self._blocks.append(block)

    def _flush_paragraph(self) -> None:
        """Emit the buffered lines as one Paragraph.

        Each line is tokenized on its own; LineBreak nodes separate the
        per-line runs (none after the last).
        """
        if not self._paragraph:
            return

        children: list[Inline] = []
        for index, line in enumerate(self._paragraph):
            if index:
                children.append(LineBreak())
            children.extend(tokenize(line))
        self._paragraph = []

        if children:
            self._emit(Paragraph(children=tuple(children)))

    # =========================================================================
    # Blank and paragraph rules
    # =========================================================================

    def _match_blank(self, line: str) -> re.Match[str] | None:
        return _BLANK_RE.match(line)

    def _handle_blank(self, match: re.Match[str]) -> None:
        self._flush_paragraph()
        if self._config.preserve_blank_lines:
            self._emit(LineBreak())
        self._pos += 1

    def _match_paragraph_line(self, line: str) -> re.Match[str] | None:
        return _ANY_RE.match(line)

    def _handle_paragraph_line(self, match: re.Match[str]) -> None:
        self._paragraph.append(match.string)
        self._pos += 1
