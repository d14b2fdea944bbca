"""Utility modules for chunklex.

Provides:
- logger: get_logger for logging
"""

from chunklex.utils.logger import get_logger

__all__ = ["get_logger"]
