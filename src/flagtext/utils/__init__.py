"""Utility modules for flagtext.

Provides:
- logger: get_logger for logging
"""

from flagtext.utils.logger import get_logger

__all__ = ["get_logger"]
