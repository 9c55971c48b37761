"""Markdown serializer: the inverse of the block scanner.

Turns a node tree back into storable note text, one line per block (several
for code blocks), joined with newlines in document order.

Round-trip notes:
- TAG and AUTO_LINK nodes are written back as ``#name`` and the URL, so
  hashtags and links survive structured edits.
- Paragraph-internal LineBreak nodes become ``line_break`` (a newline by
  default), restoring the original line boundaries.
- Top-level LineBreak nodes become empty lines.
- Whitespace that the scanner does not keep (fence indentation, blank lines
  made only of spaces) is not restored.

Thread Safety:
Renderers hold only immutable settings. Safe to share across threads.

"""

from __future__ import annotations

from memomark.errors import RenderError
from memomark.nodes import (
    AutoLink,
    Block,
    Code,
    CodeBlock,
    Document,
    Heading,
    Inline,
    LineBreak,
    OrderedListItem,
    Paragraph,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
)

FENCE = "```"
INDENT_UNIT = "  "


class MarkdownRenderer:
    """Render a node tree to note text.

    Usage:
        >>> from memomark import parse_document
        >>> MarkdownRenderer().render(parse_document("- [x] done"))
        '- [x] done'

    Args:
        line_break: Text written for a LineBreak inside a paragraph. Pass
            ``""`` to reproduce the historical output that glued buffered
            lines together.

    """

    __slots__ = ("_line_break",)

    def __init__(self, *, line_break: str = "\n") -> None:
        self._line_break = line_break

    def render(self, node: Document) -> str:
        """Serialize a Document to text."""
        lines: list[str] = []
        for block in node.children:
            lines.extend(self.render_block(block))
        return "\n".join(lines)

    def render_block(self, block: Block) -> list[str]:
        """Serialize one block node to its source lines."""
        match block:
            case TaskListItem():
                checkbox = "x" if block.complete else " "
                return [
                    f"{INDENT_UNIT * block.indent}- [{checkbox}] "
                    + self.render_inlines(block.children)
                ]
            case UnorderedListItem():
                return [f"{INDENT_UNIT * block.indent}- " + self.render_inlines(block.children)]
            case OrderedListItem():
                return [
                    f"{INDENT_UNIT * block.indent}{block.marker}. "
                    + self.render_inlines(block.children)
                ]
            case CodeBlock():
                if block.content:
                    return [FENCE + block.language, block.content, FENCE]
                # A single empty content line is not written back
                return [FENCE + block.language, FENCE]
            case Heading():
                return ["#" * block.level + " " + self.render_inlines(block.children)]
            case Paragraph():
                return [self.render_inlines(block.children)]
            case LineBreak():
                return [""]
            case _:
                raise RenderError(block, type(self).__name__)

    def render_inlines(self, inlines: tuple[Inline, ...]) -> str:
        """Serialize a run of inline nodes to a single string."""
        return "".join(self._render_inline(inline) for inline in inlines)

    def _render_inline(self, inline: Inline) -> str:
        match inline:
            case Text():
                return inline.content
            case Tag():
                return "#" + inline.name
            case AutoLink():
                return inline.url
            case Code():
                return f"`{inline.content}`"
            case LineBreak():
                return self._line_break
            case _:
                raise RenderError(inline, type(self).__name__)
