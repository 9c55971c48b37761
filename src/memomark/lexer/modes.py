"""Block scanner operating modes."""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Scanner operating modes.

    - BLOCK: classifying lines one at a time
    - CODE_FENCE: inside a fenced code block, lines are taken verbatim

    """

    BLOCK = auto()
    CODE_FENCE = auto()
