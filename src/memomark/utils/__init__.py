"""Utility modules for memomark.

Provides:
- logger: get_logger for namespaced logging
"""

from memomark.utils.logger import get_logger

__all__ = ["get_logger"]
