"""
Utility functions and helpers for keccak_sponge.
"""

from .encoding import as_byte_view, format_hex
from .memory import secure_zero, is_zeroed

__all__ = [
    'as_byte_view',
    'format_hex',
    'secure_zero',
    'is_zeroed'
]
