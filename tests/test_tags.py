"""Tests for tag extraction and its agreement with the parser."""

from hypothesis import given, settings
from hypothesis import strategies as st

from memomark import extract_tags, parse_document, tags_in_document
from memomark.nodes import Document, Heading, Paragraph, Tag, Text
from memomark.tags import TagCollector

# Fragments that exercise tags, links, fences and block prefixes
_parts = st.sampled_from(
    [
        "#",
        "#a",
        "#家",
        "-b",
        "_",
        "x",
        " ",
        "\n",
        "```",
        "  ```js",
        "http://",
        "https://x.io/",
        "- ",
        "- [ ] ",
        "1. ",
        "## ",
        "`",
        "`x`",
        "`#a`",
    ]
)
notes = st.lists(_parts, max_size=50).map("".join)


class TestExtractTags:
    """Example-based extraction."""

    def test_scenario(self) -> None:
        assert extract_tags("check out https://example.com #work") == {"work"}

    def test_empty(self) -> None:
        assert extract_tags("") == set()

    def test_distinct(self) -> None:
        assert extract_tags("#a #b #a") == {"a", "b"}

    def test_cjk(self) -> None:
        assert extract_tags("买菜 #家务 #home") == {"家务", "home"}

    def test_alphabet(self) -> None:
        assert extract_tags("#a-b_c1.") == {"a-b_c1"}

    def test_url_fragment_ignored(self) -> None:
        assert extract_tags("https://x.io/page#section #real") == {"real"}

    def test_code_block_ignored(self) -> None:
        text = "#before\n```sh\necho #not\n```\n#after"
        assert extract_tags(text) == {"before", "after"}

    def test_fence_line_ignored(self) -> None:
        assert extract_tags("``` #lang\ncode\n```") == set()

    def test_unterminated_fence_ignores_rest(self) -> None:
        assert extract_tags("#a\n```\n#b\n#c") == {"a"}

    def test_list_and_heading_lines(self) -> None:
        text = "## Plan #q3\n- [ ] call #mom\n1. ship #release"
        assert extract_tags(text) == {"q3", "mom", "release"}

    def test_heading_marks_not_tags(self) -> None:
        assert extract_tags("### Title") == set()

    def test_code_span_ignored(self) -> None:
        assert extract_tags("`#a` #b") == {"b"}

    def test_code_span_hides_link(self) -> None:
        assert extract_tags("`https://x.io` #c") == {"c"}


class TestTagsInDocument:
    """Tags read from a parsed tree."""

    def test_collects_nested(self) -> None:
        doc = Document(
            children=(
                Heading(level=1, children=(Tag(name="a"),)),
                Paragraph(children=(Text(content="x"), Tag(name="b"), Tag(name="a"))),
            )
        )
        assert tags_in_document(doc) == {"a", "b"}

    def test_collector_reusable_state(self) -> None:
        collector = TagCollector()
        collector.visit(parse_document("#one"))
        collector.visit(parse_document("#two"))
        assert collector.tags == {"one", "two"}


class TestTagAgreement:
    """Raw-text extraction reports exactly the parser's TAG nodes."""

    def test_agreement_examples(self) -> None:
        text = "#a https://x.io/#b\n```\n#c\n```\n- [x] #d\n## #e"
        assert extract_tags(text) == tags_in_document(parse_document(text)) == {"a", "d", "e"}

    def test_agreement_with_code_spans(self) -> None:
        text = "- [ ] run `make #all` #ci\n`x`#y https://x.io/`#z`"
        assert extract_tags(text) == tags_in_document(parse_document(text)) == {"ci", "y"}

    @given(notes)
    @settings(max_examples=500)
    def test_agreement(self, text: str) -> None:
        assert extract_tags(text) == tags_in_document(parse_document(text))

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_agreement_arbitrary_text(self, text: str) -> None:
        assert extract_tags(text) == tags_in_document(parse_document(text))
