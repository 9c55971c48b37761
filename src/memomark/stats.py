"""Note type statistics.

Counts, over a set of notes, how many contain links, code, task lists and
unfinished tasks. Per-user statistics are summed with ``+`` to build the
totals shown on the statistics view.

Example:
    >>> stats = collect_stats(["- [ ] buy milk", "see https://example.com"])
    >>> stats.todo_count, stats.undo_count, stats.link_count
    (1, 1, 1)

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from memomark.properties import NoteProperty, classify


@dataclass(frozen=True, slots=True)
class NoteTypeStats:
    """Number of notes having each derived property.

    Attributes:
        link_count: Notes with a link.
        code_count: Notes with code.
        todo_count: Notes with a task list.
        undo_count: Notes with at least one unfinished task.

    """

    link_count: int = 0
    code_count: int = 0
    todo_count: int = 0
    undo_count: int = 0

    @classmethod
    def from_property(cls, prop: NoteProperty) -> NoteTypeStats:
        """Stats for a single note."""
        return cls(
            link_count=int(prop.has_link),
            code_count=int(prop.has_code),
            todo_count=int(prop.has_task_list),
            undo_count=int(prop.has_incomplete_tasks),
        )

    def __add__(self, other: NoteTypeStats) -> NoteTypeStats:
        if not isinstance(other, NoteTypeStats):
            return NotImplemented
        return NoteTypeStats(
            link_count=self.link_count + other.link_count,
            code_count=self.code_count + other.code_count,
            todo_count=self.todo_count + other.todo_count,
            undo_count=self.undo_count + other.undo_count,
        )


def collect_stats(texts: Iterable[str]) -> NoteTypeStats:
    """Classify each note text and sum the results."""
    total = NoteTypeStats()
    for text in texts:
        total = total + NoteTypeStats.from_property(classify(text))
    return total
