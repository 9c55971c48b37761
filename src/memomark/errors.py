"""Exception classes for memomark.

Parsing, classification and tag extraction never raise: malformed note text
degrades to a plainer node. Exceptions exist only at the outer seams, where
callers hand in node trees or wire data built elsewhere.
"""

from __future__ import annotations


class MemomarkError(Exception):
    """Base exception for all memomark errors."""


class RenderError(MemomarkError):
    """A renderer was given a node outside the closed node set."""

    def __init__(self, node: object, renderer: str | None = None) -> None:
        self.node = node
        self.renderer = renderer

        where = f" in {renderer}" if renderer else ""
        super().__init__(f"Cannot render node of type {type(node).__name__!r}{where}")


class SerializationError(MemomarkError, ValueError):
    """Wire data does not describe a valid node tree.

    Subclasses ValueError so callers that already guard JSON decoding with
    ``except ValueError`` keep working.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path

        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")
