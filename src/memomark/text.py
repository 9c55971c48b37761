"""Extract plain text from memomark nodes.

Used for search snippets and previews.

Example:
    >>> from memomark import parse_document, extract_text
    >>> extract_text(parse_document("## Plan #work"))
    'Plan #work'
"""

from memomark.nodes import (
    AutoLink,
    Code,
    CodeBlock,
    Document,
    Heading,
    LineBreak,
    Node,
    OrderedListItem,
    Paragraph,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
)


def extract_text(node: Node | Document) -> str:
    """Extract plain text from any node.

    Tags keep their ``#`` and links their URL so the text stays searchable.
    Paragraph line breaks contribute a space; top-level blocks are joined
    with a space and blank-line separators are dropped.

    """
    match node:
        case Text():
            return node.content
        case Tag():
            return "#" + node.name
        case AutoLink():
            return node.url
        case Code():
            return node.content
        case LineBreak():
            return " "
        case CodeBlock():
            return node.content
        case (
            Paragraph()
            | Heading()
            | UnorderedListItem()
            | OrderedListItem()
            | TaskListItem()
        ):
            return "".join(extract_text(c) for c in node.children)
        case Document():
            return " ".join(
                extract_text(c) for c in node.children if not isinstance(c, LineBreak)
            )
        case _:
            return ""
