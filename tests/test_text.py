"""Tests for plain-text extraction."""

from memomark import extract_text, parse_document
from memomark.nodes import Code, CodeBlock, LineBreak, Tag, Text


class TestExtractText:
    def test_leaf_nodes(self) -> None:
        assert extract_text(Text(content="a b")) == "a b"
        assert extract_text(Tag(name="work")) == "#work"
        assert extract_text(Code(content="ls")) == "ls"
        assert extract_text(LineBreak()) == " "
        assert extract_text(CodeBlock(language="py", content="x = 1")) == "x = 1"

    def test_heading(self) -> None:
        assert extract_text(parse_document("## Plan #work")) == "Plan #work"

    def test_paragraph_lines(self) -> None:
        assert extract_text(parse_document("one\ntwo")) == "one two"

    def test_blocks_joined(self) -> None:
        text = "- [ ] call https://x.io\n\n```\ncode\n```"
        assert extract_text(parse_document(text)) == "call https://x.io code"

    def test_empty(self) -> None:
        assert extract_text(parse_document("")) == ""
