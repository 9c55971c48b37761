"""Typed inline match and span records.

NamedTuples keep the scan results immutable and cheap:
- Tuple unpacking support
- Lower memory footprint than dataclass instances
- Safe to share across threads

Usage:
    from memomark.inline.tokens import InlineMatch

    match token:
        case InlineMatch(kind="tag", value=name):
            print(f"tag {name}")

"""

from __future__ import annotations

from typing import Literal, NamedTuple, TypeAlias

from memomark.nodes import Inline

MatchKind: TypeAlias = Literal["code", "autolink", "tag"]


class InlineMatch(NamedTuple):
    """One pattern hit inside a line.

    Attributes:
        kind: Which pattern family produced the hit.
        start: Offset of the first character (backtick, ``h`` or ``#``).
        end: Offset one past the last character.
        value: Code content without backticks, the full URL, or the tag name
            without ``#``.

    """

    kind: MatchKind
    start: int
    end: int
    value: str


class InlineSpan(NamedTuple):
    """A node together with the ``[start, end)`` extent it covers in its line.

    Spans for a line are contiguous and non-overlapping; joined in order they
    cover the whole line.

    """

    start: int
    end: int
    node: Inline
