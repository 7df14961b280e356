"""
Keccak-f[1600] permutation for the SHA-3 / SHAKE sponge.

The state is held as one canonical list of 25 unsigned 64-bit lanes, with
lane (x, y) at index x + 5*y. The byte view used by the sponge is always
little-endian; it is produced and consumed only through the explicit
conversion functions below, so results do not depend on host byte order.
"""

import struct
from typing import List, Union

from .constants import (
    LANE_COUNT,
    MASK64,
    PI_LANES,
    ROTATION_OFFSETS,
    ROUND_CONSTANTS,
    STATE_BYTES,
)

BytesLike = Union[bytes, bytearray, memoryview]

_STATE_FORMAT = struct.Struct(f"<{LANE_COUNT}Q")
_RHO_PI = tuple(zip(ROTATION_OFFSETS, PI_LANES))


def rotl64(value: int, shift: int) -> int:
    """Rotate a 64-bit lane left by ``shift`` bits (0 < shift < 64)."""
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def keccak_f1600(lanes: List[int]) -> None:
    """
    Apply the 24-round Keccak-f[1600] permutation in place.

    Args:
        lanes: List of 25 unsigned 64-bit lanes, modified in place
    """
    mask = MASK64
    for round_constant in ROUND_CONSTANTS:
        # Theta
        c0 = lanes[0] ^ lanes[5] ^ lanes[10] ^ lanes[15] ^ lanes[20]
        c1 = lanes[1] ^ lanes[6] ^ lanes[11] ^ lanes[16] ^ lanes[21]
        c2 = lanes[2] ^ lanes[7] ^ lanes[12] ^ lanes[17] ^ lanes[22]
        c3 = lanes[3] ^ lanes[8] ^ lanes[13] ^ lanes[18] ^ lanes[23]
        c4 = lanes[4] ^ lanes[9] ^ lanes[14] ^ lanes[19] ^ lanes[24]
        d = (
            c4 ^ (((c1 << 1) | (c1 >> 63)) & mask),
            c0 ^ (((c2 << 1) | (c2 >> 63)) & mask),
            c1 ^ (((c3 << 1) | (c3 >> 63)) & mask),
            c2 ^ (((c4 << 1) | (c4 >> 63)) & mask),
            c3 ^ (((c0 << 1) | (c0 >> 63)) & mask),
        )
        for i in range(LANE_COUNT):
            lanes[i] ^= d[i % 5]

        # Rho and Pi, walking the single Pi cycle from lane 1
        current = lanes[1]
        for shift, target in _RHO_PI:
            rotated = ((current << shift) | (current >> (64 - shift))) & mask
            current = lanes[target]
            lanes[target] = rotated

        # Chi, from the row values before the step
        for y in range(0, LANE_COUNT, 5):
            a0, a1, a2, a3, a4 = lanes[y:y + 5]
            lanes[y] = a0 ^ (~a1 & a2)
            lanes[y + 1] = a1 ^ (~a2 & a3)
            lanes[y + 2] = a2 ^ (~a3 & a4)
            lanes[y + 3] = a3 ^ (~a4 & a0)
            lanes[y + 4] = a4 ^ (~a0 & a1)

        # Iota
        lanes[0] ^= round_constant


def new_state() -> List[int]:
    """Return a zeroed 25-lane state."""
    return [0] * LANE_COUNT


def lanes_to_bytes(lanes: List[int]) -> bytes:
    """
    Serialize the lane view to the 200-byte little-endian byte view.

    Args:
        lanes: 25 unsigned 64-bit lanes

    Returns:
        200 bytes
    """
    return _STATE_FORMAT.pack(*lanes)


def bytes_to_lanes(data: BytesLike) -> List[int]:
    """
    Parse a 200-byte little-endian byte view into 25 lanes.

    Raises:
        ValueError: If data is not exactly 200 bytes
    """
    if len(data) != STATE_BYTES:
        raise ValueError(f"Keccak state must be {STATE_BYTES} bytes, got {len(data)}")
    return list(_STATE_FORMAT.unpack(data))


def permute_bytes(state: BytesLike) -> bytes:
    """Run Keccak-f[1600] over a 200-byte state and return the new byte view."""
    lanes = bytes_to_lanes(state)
    keccak_f1600(lanes)
    return lanes_to_bytes(lanes)


def xor_into_lanes(lanes: List[int], offset: int, data: BytesLike) -> None:
    """
    XOR a run of bytes into the byte view of the state starting at ``offset``.

    The caller guarantees ``offset + len(data) <= 200``.
    """
    length = len(data)
    pos = offset
    k = 0

    # Leading bytes up to a lane boundary
    while pos & 7 and k < length:
        lanes[pos >> 3] ^= data[k] << ((pos & 7) << 3)
        pos += 1
        k += 1

    # Whole lanes
    while length - k >= 8:
        lanes[pos >> 3] ^= int.from_bytes(data[k:k + 8], "little")
        pos += 8
        k += 8

    # Trailing bytes
    while k < length:
        lanes[pos >> 3] ^= data[k] << ((pos & 7) << 3)
        pos += 1
        k += 1


def xor_byte(lanes: List[int], offset: int, value: int) -> None:
    """XOR a single byte into the byte view at ``offset``."""
    lanes[offset >> 3] ^= (value & 0xFF) << ((offset & 7) << 3)


def extract_bytes(lanes: List[int], offset: int, length: int) -> bytes:
    """Read ``length`` bytes of the byte view starting at ``offset``."""
    return lanes_to_bytes(lanes)[offset:offset + length]
