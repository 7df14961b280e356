"""
Sponge construction over Keccak-f[1600].

Implements the absorb / pad / squeeze state machine used by both the
fixed-output SHA-3 digests and the SHAKE extensible-output functions:

- ``SpongeContext`` absorbs input and is consumed by exactly one finalize
- ``finalize_fixed`` pads with the SHA-3 suffix and returns the digest
- ``finalize_for_squeeze`` pads with the SHAKE suffix and hands the state
  to a ``SqueezeContext``, the only object that can produce XOF output

The rate is derived from the requested output length as
``rate = 200 - 2 * output_len``.
"""

import logging
from typing import Union

from . import keccak
from .constants import (
    MAX_OUTPUT_LENGTH,
    PAD_LAST_BYTE,
    SHA3_SUFFIX,
    SHAKE128_LENGTH,
    SHAKE256_LENGTH,
    SHAKE_SUFFIX,
    STATE_BYTES,
    rate_for_output_length,
)
from ..utils.encoding import as_byte_view
from ..utils.memory import secure_zero

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class SpongeError(Exception):
    """Base class for sponge errors."""
    pass


class SpongeStateError(SpongeError):
    """Raised when a context is used after it has been consumed."""
    pass


class OutputLengthError(SpongeError, ValueError):
    """Raised when an output or squeeze length is invalid."""
    pass


def _validate_output_length(output_len: int) -> None:
    if isinstance(output_len, bool) or not isinstance(output_len, int):
        raise OutputLengthError(f"Output length must be an integer, got {type(output_len).__name__}")
    if not 0 <= output_len <= MAX_OUTPUT_LENGTH:
        raise OutputLengthError(
            f"Output length must be between 0 and {MAX_OUTPUT_LENGTH} bytes, got {output_len}"
        )


class SpongeContext:
    """
    Absorbing sponge state.

    Created zeroed with position 0, mutated in place by ``absorb``, and
    consumed by either ``finalize_fixed`` or ``finalize_for_squeeze``.
    A context is owned by a single caller; it carries no locking.
    """

    def __init__(self, output_len: int):
        """
        Initialize a sponge for the given output length.

        Args:
            output_len: Digest length in bytes, selects the rate

        Raises:
            OutputLengthError: If the rate would not be in (0, 200]
        """
        _validate_output_length(output_len)

        self.output_len = output_len
        self.rate = rate_for_output_length(output_len)
        self.position = 0
        self._lanes = keccak.new_state()
        self._consumed = False

        logger.debug(f"Sponge context created: output_len={output_len}, rate={self.rate}")

    @property
    def capacity(self) -> int:
        """Capacity in bytes (200 - rate)."""
        return STATE_BYTES - self.rate

    @property
    def is_consumed(self) -> bool:
        """Whether a finalize has already been applied."""
        return self._consumed

    @property
    def state_bytes(self) -> bytes:
        """Snapshot of the 200-byte little-endian state."""
        self._check_usable("read state of")
        return keccak.lanes_to_bytes(self._lanes)

    def _check_usable(self, operation: str) -> None:
        if self._consumed:
            raise SpongeStateError(f"Cannot {operation} a finalized sponge context")

    def absorb(self, data: BytesLike) -> None:
        """
        XOR input bytes into the state, permuting at each full block.

        Args:
            data: Input bytes

        Raises:
            SpongeStateError: If the context has been finalized
            TypeError: If data is not bytes-like
        """
        self._check_usable("absorb into")
        view = as_byte_view(data)

        lanes = self._lanes
        rate = self.rate
        pos = self.position
        offset = 0
        remaining = len(view)

        while remaining:
            chunk = min(rate - pos, remaining)
            keccak.xor_into_lanes(lanes, pos, view[offset:offset + chunk])
            pos += chunk
            offset += chunk
            remaining -= chunk
            if pos == rate:
                keccak.keccak_f1600(lanes)
                pos = 0

        self.position = pos

    def _pad_and_permute(self, suffix: int) -> None:
        keccak.xor_byte(self._lanes, self.position, suffix)
        keccak.xor_byte(self._lanes, self.rate - 1, PAD_LAST_BYTE)
        keccak.keccak_f1600(self._lanes)

    def finalize_fixed(self) -> bytes:
        """
        Pad with the SHA-3 domain suffix and return the digest.

        Consumes the context and wipes its state.

        Returns:
            ``output_len`` digest bytes

        Raises:
            SpongeStateError: If the context has already been finalized
        """
        self._check_usable("finalize")
        self._pad_and_permute(SHA3_SUFFIX)
        digest = keccak.extract_bytes(self._lanes, 0, self.output_len)

        secure_zero(self._lanes)
        self.position = 0
        self._consumed = True

        logger.debug(f"Sponge finalized: {self.output_len}-byte digest")
        return digest

    def finalize_for_squeeze(self) -> 'SqueezeContext':
        """
        Pad with the SHAKE domain suffix and switch to squeeze mode.

        Consumes the context; its state moves into the returned object.

        Returns:
            SqueezeContext positioned at the start of the output stream

        Raises:
            SpongeStateError: If the context has already been finalized
        """
        self._check_usable("finalize")
        self._pad_and_permute(SHAKE_SUFFIX)

        squeezer = SqueezeContext(self._lanes, self.rate, self.output_len)
        self._lanes = keccak.new_state()
        self.position = 0
        self._consumed = True

        logger.debug(f"Sponge switched to squeeze mode: rate={self.rate}")
        return squeezer

    def copy(self) -> 'SpongeContext':
        """Return an independent copy of this absorbing context."""
        self._check_usable("copy")
        clone = SpongeContext(self.output_len)
        clone._lanes = list(self._lanes)
        clone.position = self.position
        return clone


class SqueezeContext:
    """
    Squeezing sponge state produced by ``SpongeContext.finalize_for_squeeze``.

    ``squeeze`` may be called any number of times; consecutive calls read
    consecutive bytes of one unbounded output stream. ``position`` may equal
    ``rate`` after a read that ends on a block boundary; the next block is
    produced on the following read.
    """

    def __init__(self, lanes: list, rate: int, output_len: int):
        self._lanes = lanes
        self.rate = rate
        self.output_len = output_len
        self.position = 0

    def squeeze(self, length: int) -> bytes:
        """
        Read the next ``length`` bytes of output.

        Args:
            length: Number of bytes to produce

        Returns:
            Output bytes

        Raises:
            OutputLengthError: If length is negative or not an integer
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise OutputLengthError(f"Squeeze length must be an integer, got {type(length).__name__}")
        if length < 0:
            raise OutputLengthError(f"Squeeze length must be non-negative, got {length}")

        lanes = self._lanes
        rate = self.rate
        pos = self.position
        out = bytearray()

        while length:
            # Permute only when another byte is actually needed
            if pos == rate:
                keccak.keccak_f1600(lanes)
                pos = 0
            chunk = min(rate - pos, length)
            out += keccak.extract_bytes(lanes, pos, chunk)
            pos += chunk
            length -= chunk

        self.position = pos
        return bytes(out)

    def copy(self) -> 'SqueezeContext':
        """Return an independent copy positioned at the same output offset."""
        clone = SqueezeContext(list(self._lanes), self.rate, self.output_len)
        clone.position = self.position
        return clone


def init_fixed(output_len: int) -> SpongeContext:
    """Create a sponge for an ``output_len``-byte digest."""
    return SpongeContext(output_len)


def init_shake128() -> SpongeContext:
    """Create a SHAKE128 sponge (rate 168 bytes)."""
    return SpongeContext(SHAKE128_LENGTH)


def init_shake256() -> SpongeContext:
    """Create a SHAKE256 sponge (rate 136 bytes)."""
    return SpongeContext(SHAKE256_LENGTH)


def absorb(ctx: SpongeContext, data: BytesLike) -> None:
    """Absorb data into ctx."""
    ctx.absorb(data)


def finalize_fixed(ctx: SpongeContext) -> bytes:
    """Consume ctx and return its SHA-3 digest."""
    return ctx.finalize_fixed()


def finalize_for_squeeze(ctx: SpongeContext) -> SqueezeContext:
    """Consume ctx and return a squeeze context for XOF output."""
    return ctx.finalize_for_squeeze()


def squeeze(ctx: SqueezeContext, length: int) -> bytes:
    """Read the next ``length`` output bytes from ctx."""
    return ctx.squeeze(length)


def sha3(data: BytesLike, output_len: int) -> bytes:
    """
    One-shot fixed-output hash.

    Args:
        data: Input bytes
        output_len: Digest length in bytes (28, 32, 48, 64 for standard SHA-3)

    Returns:
        Digest bytes
    """
    ctx = SpongeContext(output_len)
    ctx.absorb(data)
    return ctx.finalize_fixed()


def shake(data: BytesLike, output_len: int, length: int) -> bytes:
    """
    One-shot extensible-output hash.

    Args:
        data: Input bytes
        output_len: Security parameter in bytes (16 for SHAKE128, 32 for SHAKE256)
        length: Number of output bytes

    Returns:
        ``length`` output bytes
    """
    ctx = SpongeContext(output_len)
    ctx.absorb(data)
    return ctx.finalize_for_squeeze().squeeze(length)
