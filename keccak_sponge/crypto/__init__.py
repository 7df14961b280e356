"""
Cryptographic primitives for keccak_sponge.

This module provides:
- The Keccak-f[1600] permutation
- The sponge context (absorb, SHA-3 finalize, SHAKE squeeze)
- hashlib-style SHA-3 and SHAKE hash objects
"""

from .keccak import keccak_f1600, lanes_to_bytes, bytes_to_lanes, permute_bytes
from .sponge import (
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
from .hashes import (
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

__all__ = [
    'keccak_f1600',
    'lanes_to_bytes',
    'bytes_to_lanes',
    'permute_bytes',
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
    'Digest',
    'SHA3_224',
    'SHA3_256',
    'SHA3_384',
    'SHA3_512',
    'SHAKE128',
    'SHAKE256',
    'algorithms_available',
    'new',
]
