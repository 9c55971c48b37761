"""Node visitor and transformer for memomark.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen node trees.

Example, collecting all headings:

    class HeadingCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.headings: list[Heading] = []

        def visit_heading(self, node: Heading) -> None:
            self.headings.append(node)

    collector = HeadingCollector()
    collector.visit(doc)

Example, ticking every task:

    def complete_tasks(node):
        if isinstance(node, TaskListItem):
            return dataclasses.replace(node, complete=True)
        return node

    new_doc = transform(doc, complete_tasks)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeAlias, TypeVar

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

Visitable: TypeAlias = Node | Document


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Visitable) -> T:
        """Dispatch to the matching ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Visitable) -> T:
        """Called for node types without an overridden ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_unordered_list_item(self, node: UnorderedListItem) -> T:
        return self.visit_default(node)

    def visit_ordered_list_item(self, node: OrderedListItem) -> T:
        return self.visit_default(node)

    def visit_task_list_item(self, node: TaskListItem) -> T:
        return self.visit_default(node)

    def visit_line_break(self, node: LineBreak) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_tag(self, node: Tag) -> T:
        return self.visit_default(node)

    def visit_auto_link(self, node: AutoLink) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Visitable) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case Heading():
                return self.visit_heading(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case UnorderedListItem():
                return self.visit_unordered_list_item(node)
            case OrderedListItem():
                return self.visit_ordered_list_item(node)
            case TaskListItem():
                return self.visit_task_list_item(node)
            case LineBreak():
                return self.visit_line_break(node)
            case Text():
                return self.visit_text(node)
            case Tag():
                return self.visit_tag(node)
            case AutoLink():
                return self.visit_auto_link(node)
            case Code():
                return self.visit_code(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Visitable) -> None:
        match node:
            case (
                Document(children=children)
                | Paragraph(children=children)
                | Heading(children=children)
                | UnorderedListItem(children=children)
                | OrderedListItem(children=children)
                | TaskListItem(children=children)
            ):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent is transformed with its new children. Return ``None`` from ``fn``
    to remove a node. The root Document itself is not passed to ``fn``.

    Since all nodes are frozen dataclasses, this produces a new tree; the
    original is untouched.

    """
    return Document(children=_filtered(doc.children, fn))  # type: ignore[arg-type]


def _filtered(children: tuple[Node, ...], fn: Callable[[Node], Node | None]) -> tuple[Node, ...]:
    return tuple(
        result for child in children
        if (result := _transform_node(child, fn)) is not None
    )


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    match node:
        case (
            Paragraph(children=children)
            | Heading(children=children)
            | UnorderedListItem(children=children)
            | OrderedListItem(children=children)
            | TaskListItem(children=children)
        ):
            new_children = _filtered(children, fn)
            if new_children != children:
                node = dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: transform as-is
    return fn(node)
