"""
memomark: note content model for Python

Compiles free-form note text into a tree of typed content nodes and back,
and answers the cheap questions (links? tasks? code? which tags?) that
search, filtering and statistics ask of every note.

Quick Start:
    >>> from memomark import parse_document, serialize_document
    >>> doc = parse_document("- [ ] call #mom\\n## Plan")
    >>> doc.children[0]
    TaskListItem(indent=0, complete=False, children=(Text(content='call '), Tag(name='mom')))
    >>> serialize_document(doc)
    '- [ ] call #mom\\n## Plan'

    >>> from memomark import classify, extract_tags
    >>> classify("see https://example.com").has_link
    True
    >>> sorted(extract_tags("#work and #家"))
    ['work', '家']

Wire form:
    >>> from memomark import to_json, from_json
    >>> from_json(to_json(doc)) == doc
    True
"""

from memomark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from memomark.errors import MemomarkError, RenderError, SerializationError
from memomark.inline import scan_spans, tokenize
from memomark.lexer import BlockScanner
from memomark.nodes import (
    AutoLink,
    Block,
    Code,
    CodeBlock,
    Document,
    Heading,
    Inline,
    LineBreak,
    Node,
    NodeKind,
    OrderedListItem,
    Paragraph,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
)
from memomark.properties import NoteProperty, classify
from memomark.renderers.html import HtmlRenderer
from memomark.renderers.markdown import MarkdownRenderer
from memomark.renderers.protocol import ASTRenderer
from memomark.serialization import from_dict, from_json, to_dict, to_json
from memomark.stats import NoteTypeStats, collect_stats
from memomark.tags import extract_tags, tags_in_document
from memomark.text import extract_text
from memomark.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse_document(text: str, *, config: ParseConfig | None = None) -> Document:
    """Parse note text into a Document.

    Args:
        text: Raw note text
        config: Parse configuration for this call only (defaults to the
            config active in the current context)

    Returns:
        Document root node. Never raises for any input string.

    Example:
        >>> parse_document("```js\\nconsole.log(1)\\n```").children
        (CodeBlock(language='js', content='console.log(1)'),)
    """
    return BlockScanner(text, config).scan()


def serialize_document(doc: Document, *, line_break: str = "\n") -> str:
    """Serialize a Document back to note text.

    Args:
        doc: Document to serialize
        line_break: Text written for a LineBreak inside a paragraph

    Raises:
        RenderError: If the tree contains a node outside the node set.

    Example:
        >>> serialize_document(parse_document("## Title"))
        '## Title'
    """
    return MarkdownRenderer(line_break=line_break).render(doc)


def render(doc: Document, *, tag_href: str | None = None) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        tag_href: Optional format string for tag links, e.g.
            ``"/explore?tag={tag}"``

    Example:
        >>> print(render(parse_document("## Title")), end="")
        <h2>Title</h2>
    """
    return HtmlRenderer(tag_href=tag_href).render(doc)


__all__ = [
    # Renderers
    "ASTRenderer",
    # Nodes
    "AutoLink",
    # Visitor
    "BaseVisitor",
    "Block",
    # Scanner
    "BlockScanner",
    "Code",
    "CodeBlock",
    "Document",
    "Heading",
    "HtmlRenderer",
    "Inline",
    "LineBreak",
    "MarkdownRenderer",
    # Errors
    "MemomarkError",
    "Node",
    "NodeKind",
    # Classification
    "NoteProperty",
    "NoteTypeStats",
    "OrderedListItem",
    # Configuration
    "ParseConfig",
    "Paragraph",
    "RenderError",
    "SerializationError",
    "Tag",
    "TaskListItem",
    "Text",
    "UnorderedListItem",
    "__version__",
    "classify",
    "collect_stats",
    "extract_tags",
    "extract_text",
    # Serialization
    "from_dict",
    "from_json",
    "get_parse_config",
    # API
    "parse_document",
    "parse_config_context",
    "render",
    "reset_parse_config",
    "scan_spans",
    "serialize_document",
    "set_parse_config",
    "tags_in_document",
    "to_dict",
    "to_json",
    # Inline
    "tokenize",
    "transform",
]
