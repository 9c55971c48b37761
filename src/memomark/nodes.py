"""Typed content nodes for memomark.

All nodes are frozen dataclasses with slots for:
- Immutability: a parsed note is a value, safe to share across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements over the node classes work naturally

Every node class carries a class-level ``kind`` discriminant. The set of
kinds is closed; renderers match on the classes and treat anything else as
an error.

Node Hierarchy:
Node (base)
├── Block (one or more full lines)
│   ├── Paragraph
│   ├── Heading
│   ├── CodeBlock
│   ├── UnorderedListItem
│   ├── OrderedListItem
│   ├── TaskListItem
│   └── LineBreak (blank-line separator)
└── Inline (a span of one line)
    ├── Text
    ├── Tag
    ├── AutoLink
    ├── Code
    └── LineBreak (between buffered paragraph lines)

Document is the root and holds the top-level blocks in source order.

"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal, TypeAlias


class NodeKind(Enum):
    """Discriminant for every node class."""

    PARAGRAPH = "PARAGRAPH"
    HEADING = "HEADING"
    CODE_BLOCK = "CODE_BLOCK"
    UNORDERED_LIST_ITEM = "UNORDERED_LIST_ITEM"
    ORDERED_LIST_ITEM = "ORDERED_LIST_ITEM"
    TASK_LIST_ITEM = "TASK_LIST_ITEM"
    LINE_BREAK = "LINE_BREAK"
    TEXT = "TEXT"
    TAG = "TAG"
    AUTO_LINK = "AUTO_LINK"
    CODE = "CODE"


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all content nodes."""

    kind: ClassVar[NodeKind]


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text, kept verbatim (whitespace included)."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    content: str


@dataclass(frozen=True, slots=True)
class Tag(Node):
    """Hashtag.

    Source: #work
    The name is stored without the leading ``#``.

    """

    kind: ClassVar[NodeKind] = NodeKind.TAG

    name: str


@dataclass(frozen=True, slots=True)
class AutoLink(Node):
    """Bare absolute URL.

    Source: https://example.com/path

    """

    kind: ClassVar[NodeKind] = NodeKind.AUTO_LINK

    url: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code.

    Source: `code`
    The content is stored without the surrounding backticks.

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE

    content: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Line separator.

    Inside a paragraph it separates two buffered source lines. At the top
    level it stands for a blank source line.

    """

    kind: ClassVar[NodeKind] = NodeKind.LINE_BREAK


# Type alias for inline elements
Inline: TypeAlias = Text | Tag | AutoLink | Code | LineBreak


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Run of consecutive plain lines.

    Children are the per-line inline runs joined by LineBreak nodes.

    """

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Source: ## Title

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Source:
        ```python
        print("hi")
        ```

    ``content`` holds the raw lines between the fences joined by newlines.

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    language: str
    content: str


@dataclass(frozen=True, slots=True)
class UnorderedListItem(Node):
    """Bullet item.

    Source: - item
    ``indent`` counts two-space units of leading whitespace.

    """

    kind: ClassVar[NodeKind] = NodeKind.UNORDERED_LIST_ITEM

    indent: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class OrderedListItem(Node):
    """Numbered item.

    Source: 3. item
    ``marker`` keeps the digits exactly as written.

    """

    kind: ClassVar[NodeKind] = NodeKind.ORDERED_LIST_ITEM

    indent: int
    marker: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class TaskListItem(Node):
    """Checkbox item.

    Source: - [ ] todo / - [x] done

    """

    kind: ClassVar[NodeKind] = NodeKind.TASK_LIST_ITEM

    indent: int
    complete: bool
    children: tuple[Inline, ...]


# Type alias for block elements
Block: TypeAlias = (
    Paragraph
    | Heading
    | CodeBlock
    | UnorderedListItem
    | OrderedListItem
    | TaskListItem
    | LineBreak
)


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a parsed note.

    Holds the top-level blocks in source order. Produced fresh by every
    parse call and never mutated.

    """

    children: tuple[Block, ...]
