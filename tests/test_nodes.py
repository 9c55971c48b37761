"""Tests for the typed node model."""

import dataclasses

import pytest

from memomark.nodes import (
    AutoLink,
    Code,
    CodeBlock,
    Document,
    Heading,
    LineBreak,
    NodeKind,
    OrderedListItem,
    Paragraph,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
)


class TestNodeKinds:
    """Every node class carries its own kind discriminant."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (Paragraph(children=()), NodeKind.PARAGRAPH),
            (Heading(level=1, children=()), NodeKind.HEADING),
            (CodeBlock(language="", content=""), NodeKind.CODE_BLOCK),
            (UnorderedListItem(indent=0, children=()), NodeKind.UNORDERED_LIST_ITEM),
            (OrderedListItem(indent=0, marker="1", children=()), NodeKind.ORDERED_LIST_ITEM),
            (TaskListItem(indent=0, complete=False, children=()), NodeKind.TASK_LIST_ITEM),
            (LineBreak(), NodeKind.LINE_BREAK),
            (Text(content="x"), NodeKind.TEXT),
            (Tag(name="x"), NodeKind.TAG),
            (AutoLink(url="https://x.io"), NodeKind.AUTO_LINK),
            (Code(content="x"), NodeKind.CODE),
        ],
    )
    def test_kind(self, node, kind: NodeKind) -> None:  # type: ignore[no-untyped-def]
        assert node.kind is kind

    def test_kind_is_not_a_field(self) -> None:
        """kind is class-level, so it never shows up in the payload."""
        assert [f.name for f in dataclasses.fields(Tag)] == ["name"]
        assert dataclasses.fields(LineBreak) == ()

    def test_kind_set_is_closed(self) -> None:
        assert len(NodeKind) == 11


class TestImmutability:
    """Nodes are values: frozen, hashable, comparable."""

    def test_frozen(self) -> None:
        node = Text(content="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "b"  # type: ignore[misc]

    def test_document_frozen(self) -> None:
        doc = Document(children=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.children = (LineBreak(),)  # type: ignore[misc]

    def test_slots(self) -> None:
        assert not hasattr(Text(content="a"), "__dict__")

    def test_equality_and_hash(self) -> None:
        a = Paragraph(children=(Text(content="a"), Tag(name="t")))
        b = Paragraph(children=(Text(content="a"), Tag(name="t")))
        assert a == b
        assert hash(a) == hash(b)
        assert LineBreak() == LineBreak()

    def test_different_classes_not_equal(self) -> None:
        assert Text(content="x") != Code(content="x")
