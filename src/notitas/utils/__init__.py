"""Utility modules for Notitas.

Provides:
- hashing: hash_str for placeholder tokens
- logger: get_logger for logging
"""

from notitas.utils.hashing import hash_str
from notitas.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
