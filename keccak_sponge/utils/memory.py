"""
Secure memory operations for sponge state.

Provides utilities for wiping state that has been consumed by a finalize.
"""

from typing import List, Union


def secure_zero(data: Union[bytearray, memoryview, List[int]]) -> None:
    """
    Overwrite mutable state with zeros in place.

    Args:
        data: Memory to zero (bytearray, writable memoryview, or lane list)

    Raises:
        TypeError: If data is immutable
    """
    if isinstance(data, (bytearray, memoryview, list)):
        for i in range(len(data)):
            data[i] = 0
    else:
        raise TypeError("Data must be bytearray, memoryview or list")


def is_zeroed(data: Union[bytes, bytearray, memoryview, List[int]]) -> bool:
    """Check whether every element of data is zero."""
    return not any(data)
