"""
keccak_sponge: SHA-3 and SHAKE on a pure-Python Keccak-f[1600] sponge.

Key Features:
- Bit-exact Keccak-f[1600] permutation with an explicit little-endian byte view
- Streaming absorb with SHA-3 (0x06) and SHAKE (0x1F) domain separation
- Extensible output via a dedicated squeeze context
- hashlib-style objects with constant-time digest comparison

Basic Usage:
    >>> from keccak_sponge import sha3, init_shake128
    >>>
    >>> # One-shot SHA3-256
    >>> sha3(b"", 32).hex()[:16]
    'a7ffc6f8bf1ed766'
    >>>
    >>> # Streaming SHAKE128
    >>> ctx = init_shake128()
    >>> ctx.absorb(b"")
    >>> xof = ctx.finalize_for_squeeze()
    >>> xof.squeeze(16).hex()
    '7f9c2ba4e88f827d616045507605853e'
"""

__version__ = "1.0.0"
__author__ = "keccak_sponge authors"

# Permutation
from .crypto.keccak import keccak_f1600, lanes_to_bytes, bytes_to_lanes, permute_bytes

# Sponge API
from .crypto.sponge import (
    SpongeContext,
    SqueezeContext,
    SpongeError,
    SpongeStateError,
    OutputLengthError,
    init_fixed,
    init_shake128,
    init_shake256,
    absorb,
    finalize_fixed,
    finalize_for_squeeze,
    squeeze,
    sha3,
    shake,
)

# Hash objects
from .crypto.hashes import (
    Digest,
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    SHAKE128,
    SHAKE256,
    algorithms_available,
    new,
)

# Configuration
from .config import SpongeConfig, ConfigError


def sha3_224(data=b"") -> SHA3_224:
    """Create a SHA3-224 hash object."""
    return SHA3_224(data)


def sha3_256(data=b"") -> SHA3_256:
    """Create a SHA3-256 hash object."""
    return SHA3_256(data)


def sha3_384(data=b"") -> SHA3_384:
    """Create a SHA3-384 hash object."""
    return SHA3_384(data)


def sha3_512(data=b"") -> SHA3_512:
    """Create a SHA3-512 hash object."""
    return SHA3_512(data)


def shake_128(data=b"") -> SHAKE128:
    """Create a SHAKE128 hash object."""
    return SHAKE128(data)


def shake_256(data=b"") -> SHAKE256:
    """Create a SHAKE256 hash object."""
    return SHAKE256(data)


__all__ = [
    # Version info
    '__version__',

    # Permutation
    'keccak_f1600',
    'lanes_to_bytes',
    'bytes_to_lanes',
    'permute_bytes',

    # Sponge API
    'SpongeContext',
    'SqueezeContext',
    'SpongeError',
    'SpongeStateError',
    'OutputLengthError',
    'init_fixed',
    'init_shake128',
    'init_shake256',
    'absorb',
    'finalize_fixed',
    'finalize_for_squeeze',
    'squeeze',
    'sha3',
    'shake',

    # Hash objects
    'Digest',
    'SHA3_224',
    'SHA3_256',
    'SHA3_384',
    'SHA3_512',
    'SHAKE128',
    'SHAKE256',
    'algorithms_available',
    'new',
    'sha3_224',
    'sha3_256',
    'sha3_384',
    'sha3_512',
    'shake_128',
    'shake_256',

    # Configuration
    'SpongeConfig',
    'ConfigError',
]
