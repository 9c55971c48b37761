"""ASTRenderer protocol: the stable interface for node-tree renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
``HtmlRenderer`` and ``MarkdownRenderer`` are the built-in implementations.

Example:
    from memomark.renderers.protocol import ASTRenderer

    def render_note(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from memomark.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for node-tree renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string."""
        ...
