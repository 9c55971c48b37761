"""Derived note properties for filtering and statistics.

``classify`` answers four yes/no questions about raw note text with
independent regex searches. It never builds a node tree: it runs on every
listing and filter request, so it has to stay a handful of single-pass scans.

The answers back the filter fields ``has_link``, ``has_task_list`` and
``has_code`` (and ``has_incomplete_tasks`` for statistics).

"""

from __future__ import annotations

import re
from dataclasses import dataclass

_LINK_RE = re.compile(r"https?://\S+")
_TASK_RE = re.compile(r"- \[[ xX]\]")
_INCOMPLETE_TASK_RE = re.compile(r"- \[ \]")
_CODE_RE = re.compile(r"```|`")


@dataclass(frozen=True, slots=True)
class NoteProperty:
    """Facts derived from a note's raw text.

    Attributes:
        has_link: Contains an ``http://`` / ``https://`` URL.
        has_task_list: Contains a task checkbox, checked or not.
        has_code: Contains a code fence or an inline backtick.
        has_incomplete_tasks: Contains an unchecked ``- [ ]`` checkbox.

    """

    has_link: bool = False
    has_task_list: bool = False
    has_code: bool = False
    has_incomplete_tasks: bool = False

    def to_filter_fields(self) -> dict[str, bool]:
        """Facts keyed by their filter-expression field names."""
        return {
            "has_link": self.has_link,
            "has_task_list": self.has_task_list,
            "has_code": self.has_code,
            "has_incomplete_tasks": self.has_incomplete_tasks,
        }


def classify(text: str) -> NoteProperty:
    """Compute the derived properties of raw note text.

    Example:
        >>> classify("check out https://example.com #work")
        NoteProperty(has_link=True, has_task_list=False, has_code=False, has_incomplete_tasks=False)

    """
    return NoteProperty(
        has_link=_LINK_RE.search(text) is not None,
        has_task_list=_TASK_RE.search(text) is not None,
        has_code=_CODE_RE.search(text) is not None,
        has_incomplete_tasks=_INCOMPLETE_TASK_RE.search(text) is not None,
    )
