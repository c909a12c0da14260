"""Utility modules for Rivit.

Provides:
- logger: get_logger for logging
"""

from rivit.utils.logger import get_logger

__all__ = [
    "get_logger",
]
