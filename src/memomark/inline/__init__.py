"""Inline tokenizer for note lines."""

from memomark.inline.core import find_matches, scan_spans, tokenize
from memomark.inline.tokens import InlineMatch, InlineSpan

__all__ = [
    "InlineMatch",
    "InlineSpan",
    "find_matches",
    "scan_spans",
    "tokenize",
]
