"""HTML renderer using StringBuilder pattern.

Renders a note's node tree to HTML for the structured note view.

List items are flat nodes in the tree; consecutive items of the same family
are grouped into one ``<ul>`` (bullets and tasks) or ``<ol>`` (numbered), and
nesting depth is exposed as a ``data-indent`` attribute. A top-level
LineBreak renders nothing but closes an open list.

Thread Safety:
All per-render state lives in local variables created by each render() call.
Multiple threads can safely share a single HtmlRenderer instance.
"""

import html
from typing import Literal, TypeAlias
from urllib.parse import quote as url_quote

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
from memomark.stringbuilder import StringBuilder

ListTag: TypeAlias = Literal["ul", "ol"]


def html_escape(s: str) -> str:
    """Escape HTML special characters (<, >, &, ")."""
    return html.escape(s, quote=False).replace('"', "&quot;")


def _encode_url(url: str) -> str:
    """Percent-encode characters that are not valid in an href.

    Already-encoded sequences and reserved URL characters are kept.
    """
    return url_quote(url, safe="/:?#[]@!$&'()*+,;=-_.~%")


def _list_tag(block: Block) -> ListTag | None:
    match block:
        case UnorderedListItem() | TaskListItem():
            return "ul"
        case OrderedListItem():
            return "ol"
        case _:
            return None


class HtmlRenderer:
    """Render a node tree to HTML.

    Usage:
        >>> from memomark import parse_document
        >>> HtmlRenderer().render(parse_document("hello #work"))
        '<p>hello <span class="tag">#work</span></p>\\n'

    Args:
        tag_href: Optional format string for tag links, e.g.
            ``"/explore?tag={tag}"``. When set, tags render as anchors.

    """

    __slots__ = ("_tag_href",)

    def __init__(self, *, tag_href: str | None = None) -> None:
        self._tag_href = tag_href

    def render(self, node: Document) -> str:
        """Render document to an HTML string."""
        sb = StringBuilder()
        open_list: ListTag | None = None

        for block in node.children:
            list_tag = _list_tag(block)
            if list_tag != open_list:
                if open_list is not None:
                    sb.append_line(f"</{open_list}>")
                if list_tag is not None:
                    sb.append_line(f"<{list_tag}>")
                open_list = list_tag
            self._render_block(block, sb)

        if open_list is not None:
            sb.append_line(f"</{open_list}>")

        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.children, sb)
                sb.append_line("</p>")
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(block.children, sb)
                sb.append_line(f"</h{block.level}>")
            case CodeBlock():
                self._render_code_block(block, sb)
            case TaskListItem():
                checked = " checked" if block.complete else ""
                sb.append(f'<li class="task-list-item"{self._indent_attr(block.indent)}>')
                sb.append(f'<input type="checkbox" disabled{checked} /> ')
                self._render_inlines(block.children, sb)
                sb.append_line("</li>")
            case UnorderedListItem():
                sb.append(f"<li{self._indent_attr(block.indent)}>")
                self._render_inlines(block.children, sb)
                sb.append_line("</li>")
            case OrderedListItem():
                sb.append(f'<li value="{html_escape(block.marker)}"{self._indent_attr(block.indent)}>')
                self._render_inlines(block.children, sb)
                sb.append_line("</li>")
            case LineBreak():
                pass
            case _:
                raise RenderError(block, type(self).__name__)

    def _render_code_block(self, code: CodeBlock, sb: StringBuilder) -> None:
        # First word of the info text is the language
        lang = code.language.split()[0] if code.language.strip() else None
        lang_class = f' class="language-{html_escape(lang)}"' if lang else ""
        sb.append(f"<pre><code{lang_class}>")
        sb.append(html_escape(code.content))
        sb.append_line("</code></pre>")

    @staticmethod
    def _indent_attr(indent: int) -> str:
        return f' data-indent="{indent}"' if indent else ""

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: StringBuilder) -> None:
        match inline:
            case Text():
                sb.append(html_escape(inline.content))
            case Tag():
                label = html_escape("#" + inline.name)
                if self._tag_href:
                    href = html_escape(self._tag_href.format(tag=url_quote(inline.name)))
                    sb.append(f'<a class="tag" href="{href}">{label}</a>')
                else:
                    sb.append(f'<span class="tag">{label}</span>')
            case AutoLink():
                href = html_escape(_encode_url(inline.url))
                sb.append(f'<a href="{href}">{html_escape(inline.url)}</a>')
            case Code():
                sb.append("<code>")
                sb.append(html_escape(inline.content))
                sb.append("</code>")
            case LineBreak():
                sb.append("<br />\n")
            case _:
                raise RenderError(inline, type(self).__name__)
