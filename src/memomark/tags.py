"""Hashtag extraction for tag indexing.

``extract_tags`` is what the persistence layer calls when a note is created
or updated, to materialize tag-to-note associations. It works on raw text,
line by line, without building a node tree, but it must report exactly the
tags the inline tokenizer marks as TAG nodes when the same text is parsed:

- a tag is ``#`` followed by ASCII letters, digits, ``_``, ``-`` or CJK
  ideographs; the name excludes the ``#``
- text inside `` `code` `` spans never yields tags, and neither does text
  inside ``http://`` / ``https://`` links outside code spans
- lines of a fenced code block, fence lines included, never yield tags

``tags_in_document`` reads the TAG nodes of an already parsed document.

"""

from __future__ import annotations

import re

from memomark.nodes import Document, Tag
from memomark.visitor import BaseVisitor

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_TAG_RE = re.compile(r"#([A-Za-z0-9_\-\u4e00-\u9fa5]+)")
_URL_RE = re.compile(r"https?://\S+")
_FENCE = "```"


def _blank_out(match: re.Match[str]) -> str:
    return " " * (match.end() - match.start())


def extract_tags(text: str) -> set[str]:
    """Collect the distinct tag names in raw note text.

    Example:
        >>> sorted(extract_tags("#work notes\\n- [ ] call #家 https://x.io/#frag `#no`"))
        ['work', '家']

    """
    tags: set[str] = set()
    in_fence = False

    for line in text.split("\n"):
        if line.lstrip().startswith(_FENCE):
            in_fence = not in_fence
            continue
        if in_fence or "#" not in line:
            continue
        # Same masking order as the tokenizer: code spans, then links
        masked = _URL_RE.sub(_blank_out, _CODE_SPAN_RE.sub(_blank_out, line))
        tags.update(_TAG_RE.findall(masked))

    return tags


class TagCollector(BaseVisitor[None]):
    """Visitor that records the name of every Tag node it meets."""

    def __init__(self) -> None:
        self.tags: set[str] = set()

    def visit_tag(self, node: Tag) -> None:
        self.tags.add(node.name)


def tags_in_document(doc: Document) -> set[str]:
    """Distinct tag names among the TAG nodes of a parsed document."""
    collector = TagCollector()
    collector.visit(doc)
    return collector.tags
