"""Block scanner for note text.

Classifies each line with an ordered rule table and assembles block nodes,
delegating line content to the inline tokenizer.
"""

from memomark.lexer.core import BlockScanner
from memomark.lexer.modes import ScanMode

__all__ = ["BlockScanner", "ScanMode"]
