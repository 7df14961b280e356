"""
Hash function objects for SHA-3 and SHAKE.

Wraps the sponge contexts in a hashlib-style interface:
- ``update`` absorbs data
- ``digest`` is non-destructive (it finalizes a copy of the state)
- SHAKE objects additionally offer ``read`` for streaming XOF output

Digests are returned as ``Digest`` values, which compare in constant time.
"""

import logging
from typing import Iterator, Optional, Union

from cryptography.hazmat.primitives import constant_time

from .constants import (
    SHA3_224_LENGTH,
    SHA3_256_LENGTH,
    SHA3_384_LENGTH,
    SHA3_512_LENGTH,
    SHAKE128_LENGTH,
    SHAKE256_LENGTH,
)
from .sponge import SpongeContext, SpongeStateError, SqueezeContext
from ..utils.encoding import format_hex

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Digest:
    """
    Immutable digest value.

    Equality against another Digest or any bytes-like object is evaluated
    in constant time.
    """

    def __init__(self, data: bytes, algorithm: str):
        self._bytes = bytes(data)
        self.algorithm = algorithm

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bytes)

    def __getitem__(self, key):
        return self._bytes[key]

    def __eq__(self, other) -> bool:
        if isinstance(other, Digest):
            other_bytes = other._bytes
        elif isinstance(other, (bytes, bytearray, memoryview)):
            other_bytes = bytes(other)
        else:
            return NotImplemented
        return constant_time.bytes_eq(self._bytes, other_bytes)

    def __hash__(self) -> int:
        return hash(self._bytes)

    def hex(self) -> str:
        """Lowercase hex encoding of the digest."""
        return format_hex(self._bytes)

    def __str__(self) -> str:
        return f"{self.algorithm} digest: {self.hex()}"

    def __repr__(self) -> str:
        return f"Digest({self.algorithm!r}, {self.hex()!r})"


class _SHA3Hash:
    """Fixed-output SHA-3 hash object."""

    name = ""
    display_name = ""
    digest_size = 0

    def __init__(self, data: Optional[BytesLike] = None):
        self._ctx = SpongeContext(self.digest_size)
        if data is not None:
            self.update(data)

    @property
    def block_size(self) -> int:
        """Rate of the sponge in bytes."""
        return self._ctx.rate

    def update(self, data: BytesLike) -> None:
        """Absorb more data."""
        self._ctx.absorb(data)

    def digest(self) -> Digest:
        """Return the digest of the data absorbed so far."""
        return Digest(self._ctx.copy().finalize_fixed(), self.display_name)

    def hexdigest(self) -> str:
        """Return the digest as a hex string."""
        return self.digest().hex()

    def copy(self) -> '_SHA3Hash':
        """Return an independent copy of this hash object."""
        clone = self.__class__.__new__(self.__class__)
        clone._ctx = self._ctx.copy()
        return clone


class SHA3_224(_SHA3Hash):
    name = "sha3_224"
    display_name = "SHA3-224"
    digest_size = SHA3_224_LENGTH


class SHA3_256(_SHA3Hash):
    name = "sha3_256"
    display_name = "SHA3-256"
    digest_size = SHA3_256_LENGTH


class SHA3_384(_SHA3Hash):
    name = "sha3_384"
    display_name = "SHA3-384"
    digest_size = SHA3_384_LENGTH


class SHA3_512(_SHA3Hash):
    name = "sha3_512"
    display_name = "SHA3-512"
    digest_size = SHA3_512_LENGTH


class _SHAKEHash:
    """
    Extensible-output SHAKE hash object.

    ``digest(length)`` always returns the first ``length`` bytes of the
    output stream. ``read(length)`` returns successive bytes of the same
    stream; once reading has started no more data can be absorbed.
    """

    name = ""
    display_name = ""
    security_length = 0

    def __init__(self, data: Optional[BytesLike] = None):
        self._ctx = SpongeContext(self.security_length)
        self._squeezer: Optional[SqueezeContext] = None
        if data is not None:
            self.update(data)

    @property
    def digest_size(self) -> int:
        """Default output length in bytes."""
        return self.security_length

    @property
    def block_size(self) -> int:
        """Rate of the sponge in bytes."""
        return self._ctx.rate

    def update(self, data: BytesLike) -> None:
        """
        Absorb more data.

        Raises:
            SpongeStateError: If ``read`` has already been called
        """
        if self._squeezer is not None:
            raise SpongeStateError(f"Cannot update {self.display_name} after read() has started")
        self._ctx.absorb(data)

    def digest(self, length: Optional[int] = None) -> Digest:
        """
        Return the first ``length`` bytes of output without consuming state.

        Args:
            length: Output length in bytes (defaults to ``digest_size``)
        """
        if length is None:
            length = self.digest_size
        output = self._ctx.copy().finalize_for_squeeze().squeeze(length)
        return Digest(output, self.display_name)

    def hexdigest(self, length: Optional[int] = None) -> str:
        """Return ``digest(length)`` as a hex string."""
        return self.digest(length).hex()

    def read(self, length: int) -> Digest:
        """
        Return the next ``length`` bytes of the output stream.

        Args:
            length: Number of bytes to read
        """
        if self._squeezer is None:
            logger.debug(f"{self.display_name} entering squeeze mode")
            self._squeezer = self._ctx.copy().finalize_for_squeeze()
        return Digest(self._squeezer.squeeze(length), self.display_name)

    def copy(self) -> '_SHAKEHash':
        """Return an independent copy, including any read position."""
        clone = self.__class__.__new__(self.__class__)
        clone._ctx = self._ctx.copy()
        clone._squeezer = self._squeezer.copy() if self._squeezer is not None else None
        return clone


class SHAKE128(_SHAKEHash):
    name = "shake_128"
    display_name = "SHAKE128"
    security_length = SHAKE128_LENGTH


class SHAKE256(_SHAKEHash):
    name = "shake_256"
    display_name = "SHAKE256"
    security_length = SHAKE256_LENGTH


_ALGORITHMS = {
    cls.name: cls
    for cls in (SHA3_224, SHA3_256, SHA3_384, SHA3_512, SHAKE128, SHAKE256)
}

_ALIASES = {
    "shake128": "shake_128",
    "shake256": "shake_256",
}

algorithms_available = frozenset(_ALGORITHMS)


def canonical_name(name: str) -> str:
    """
    Normalize an algorithm name ("SHA3-256", "shake128", ...).

    Raises:
        ValueError: If the name is not a supported algorithm
    """
    normalized = name.strip().lower().replace("-", "_")
    normalized = _ALIASES.get(normalized, normalized)
    if normalized not in _ALGORITHMS:
        raise ValueError(
            f"Unsupported hash algorithm: {name}. "
            f"Available: {', '.join(sorted(algorithms_available))}"
        )
    return normalized


def new(name: str, data: BytesLike = b""):
    """
    Create a hash object by name.

    Args:
        name: Algorithm name, e.g. "sha3_256" or "shake_128"
        data: Optional initial data

    Returns:
        Hash object for the algorithm
    """
    hasher = _ALGORITHMS[canonical_name(name)]()
    if data:
        hasher.update(data)
    return hasher
