"""
Byte encoding helpers shared by the hashing API and the command line.
"""

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def as_byte_view(data: BytesLike) -> memoryview:
    """
    Return a flat unsigned-byte view of a bytes-like object.

    Args:
        data: bytes, bytearray or memoryview

    Returns:
        memoryview with format 'B'

    Raises:
        TypeError: If data is a str or does not support the buffer protocol
    """
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError(f"object supporting the buffer API required, got {type(data).__name__}")
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view


def format_hex(data: bytes, separator: str = "") -> str:
    """
    Format bytes as lowercase hexadecimal.

    Args:
        data: Bytes to format
        separator: Separator between hex bytes

    Returns:
        Formatted hex string
    """
    return separator.join(f"{b:02x}" for b in data)
