"""Inline tokenizer: one line of note text to TEXT / CODE / AUTO_LINK / TAG nodes.

Three pattern families are scanned in precedence order and merged by start
offset:

- code spans: a backtick, one or more non-backtick characters, a backtick
- autolinks: ``http://`` or ``https://`` followed by a non-whitespace run
- hashtags: ``#`` followed by the tag alphabet (ASCII letters, digits,
  ``_``, ``-`` and CJK ideographs)

Each family's extents are masked before the next family is scanned, so a link
or tag inside a code span stays code, a ``#fragment`` inside a URL never
becomes a tag, and the match lists cannot overlap. Gaps between matches
become Text nodes.

Thread Safety:
All functions are pure; the compiled patterns are module-level constants.

"""

from __future__ import annotations

import re

from memomark.inline.tokens import InlineMatch, InlineSpan, MatchKind
from memomark.nodes import AutoLink, Code, Inline, Tag, Text

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_AUTOLINK_RE = re.compile(r"https?://\S+")
_HASHTAG_RE = re.compile(r"#([A-Za-z0-9_\-\u4e00-\u9fa5]+)")

# Precedence order; the value group is what the node keeps
_FAMILIES: tuple[tuple[MatchKind, re.Pattern[str], int], ...] = (
    ("code", _CODE_SPAN_RE, 1),
    ("autolink", _AUTOLINK_RE, 0),
    ("tag", _HASHTAG_RE, 1),
)

# Replaces masked characters; never part of any pattern's body
_MASK_CHAR = " "


def _mask(line: str, matches: list[InlineMatch]) -> str:
    chars = list(line)
    for match in matches:
        chars[match.start : match.end] = _MASK_CHAR * (match.end - match.start)
    return "".join(chars)


def find_matches(line: str) -> list[InlineMatch]:
    """Find all code span, autolink and hashtag hits in a line.

    Args:
        line: A single line (no newline characters).

    Returns:
        Non-overlapping matches in ascending start order.

    """
    matches: list[InlineMatch] = []
    masked = line

    for kind, pattern, group in _FAMILIES:
        found = [
            InlineMatch(kind, m.start(), m.end(), m.group(group))
            for m in pattern.finditer(masked)
        ]
        if found:
            matches.extend(found)
            masked = _mask(masked, found)

    # list.sort is stable: discovery order breaks ties
    matches.sort(key=lambda match: match.start)
    return matches


def _node_for(hit: InlineMatch) -> Inline:
    match hit.kind:
        case "code":
            return Code(content=hit.value)
        case "autolink":
            return AutoLink(url=hit.value)
        case _:
            return Tag(name=hit.value)


def scan_spans(line: str) -> list[InlineSpan]:
    """Partition a line into spans, each carrying the node it produced.

    The spans are gap-free: the first starts at 0, each starts where the
    previous one ended, and the last ends at ``len(line)``. An empty line
    yields no spans.

    """
    spans: list[InlineSpan] = []
    pos = 0

    for match in find_matches(line):
        if match.start < pos:
            # Overlapping hit: the earlier match keeps its extent
            continue
        if match.start > pos:
            spans.append(InlineSpan(pos, match.start, Text(content=line[pos : match.start])))
        spans.append(InlineSpan(match.start, match.end, _node_for(match)))
        pos = match.end

    if pos < len(line):
        spans.append(InlineSpan(pos, len(line), Text(content=line[pos:])))

    return spans


def tokenize(line: str) -> tuple[Inline, ...]:
    """Tokenize one line into inline nodes.

    Example:
        >>> tokenize("run `ls` on https://example.com #work")
        (Text(content='run '), Code(content='ls'), Text(content=' on '), AutoLink(url='https://example.com'), Text(content=' '), Tag(name='work'))

    A non-empty line always yields at least one node; the empty line yields
    an empty tuple.

    """
    return tuple(span.node for span in scan_spans(line))
