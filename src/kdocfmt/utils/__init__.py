"""Utility modules for kdocfmt.

Provides:
- logger: get_logger for namespaced logging
"""

from kdocfmt.utils.logger import get_logger

__all__ = [
    "get_logger",
]
