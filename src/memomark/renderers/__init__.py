"""memomark renderers.

Renderers convert a note's node tree into output formats.

Available Renderers:
- HtmlRenderer: structured HTML view of a note
- MarkdownRenderer: note text, the inverse of the block scanner

Thread Safety:
Renderers keep per-render state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from memomark.renderers.html import HtmlRenderer
from memomark.renderers.markdown import MarkdownRenderer
from memomark.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "MarkdownRenderer"]
