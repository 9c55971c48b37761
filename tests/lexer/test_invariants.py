"""Property-based tests for block scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from memomark import parse_document
from memomark.lexer.classifiers.fence import FENCE_RE
from memomark.nodes import (
    AutoLink,
    Code,
    CodeBlock,
    Heading,
    LineBreak,
    OrderedListItem,
    Paragraph,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
)

# Fragments that exercise every block rule
_parts = st.sampled_from(
    [
        "```",
        "```js",
        "- ",
        "- [ ] ",
        "- [x] ",
        "1. ",
        "## ",
        "#",
        "  ",
        "\n",
        "\n\n",
        "a",
        "word",
        "#tag",
        "https://x.io",
        "[",
        "]",
        "`x`",
        "`#a`",
    ]
)
notes = st.lists(_parts, max_size=40).map("".join)

_BLOCK_TYPES = (
    Paragraph,
    Heading,
    CodeBlock,
    UnorderedListItem,
    OrderedListItem,
    TaskListItem,
    LineBreak,
)
_INLINE_TYPES = (Text, Tag, AutoLink, Code, LineBreak)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        """Any string parses to a Document of block nodes."""
        doc = parse_document(source)
        assert all(isinstance(block, _BLOCK_TYPES) for block in doc.children)

    @given(notes)
    @settings(max_examples=200)
    def test_idempotent(self, source: str) -> None:
        """Parsing is a pure function of the input."""
        assert parse_document(source) == parse_document(source)

    @given(notes)
    @settings(max_examples=200)
    def test_inline_children_only(self, source: str) -> None:
        for block in parse_document(source).children:
            if isinstance(block, CodeBlock | LineBreak):
                continue
            assert all(isinstance(child, _INLINE_TYPES) for child in block.children)

    @given(st.text(alphabet=" \t\n", max_size=50))
    @settings(max_examples=100)
    def test_blank_source_is_empty(self, source: str) -> None:
        assert parse_document(source).children == ()


class TestFenceInvariants:
    """Code blocks never swallow their closing fence."""

    @given(notes)
    @settings(max_examples=300)
    def test_content_has_no_fence_line(self, source: str) -> None:
        for block in parse_document(source).children:
            if isinstance(block, CodeBlock):
                for line in block.content.split("\n"):
                    assert FENCE_RE.match(line) is None

    @given(notes)
    @settings(max_examples=200)
    def test_language_trimmed(self, source: str) -> None:
        for block in parse_document(source).children:
            if isinstance(block, CodeBlock):
                assert block.language == block.language.strip()


class TestParagraphInvariants:
    """Paragraph line breaks only separate non-empty line runs."""

    @given(notes)
    @settings(max_examples=300)
    def test_line_breaks_between_runs(self, source: str) -> None:
        for block in parse_document(source).children:
            if not isinstance(block, Paragraph):
                continue
            children = block.children
            assert children
            assert not isinstance(children[0], LineBreak)
            assert not isinstance(children[-1], LineBreak)
            for left, right in zip(children, children[1:], strict=False):
                assert not (isinstance(left, LineBreak) and isinstance(right, LineBreak))

    @given(notes)
    @settings(max_examples=200)
    def test_no_adjacent_paragraphs(self, source: str) -> None:
        """Consecutive plain lines always land in the same paragraph."""
        blocks = parse_document(source).children
        for left, right in zip(blocks, blocks[1:], strict=False):
            assert not (isinstance(left, Paragraph) and isinstance(right, Paragraph))


class TestListInvariants:
    """List items carry non-negative indents."""

    @given(notes)
    @settings(max_examples=200)
    def test_indent_non_negative(self, source: str) -> None:
        for block in parse_document(source).children:
            if isinstance(block, UnorderedListItem | OrderedListItem | TaskListItem):
                assert block.indent >= 0

    @given(notes)
    @settings(max_examples=200)
    def test_ordered_marker_is_digits(self, source: str) -> None:
        for block in parse_document(source).children:
            if isinstance(block, OrderedListItem):
                assert block.marker.isdigit()
