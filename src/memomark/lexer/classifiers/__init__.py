"""Line classifier mixins for the block scanner.

Each mixin contributes ``_match_*`` predicates and ``_handle_*`` handlers.
The BlockScanner orders them into its rule table.
"""

from memomark.lexer.classifiers.fence import FenceClassifierMixin
from memomark.lexer.classifiers.heading import HeadingClassifierMixin
from memomark.lexer.classifiers.list import ListClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
]
