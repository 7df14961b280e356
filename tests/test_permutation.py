"""
Tests for the Keccak-f[1600] permutation and the lane/byte state views.
"""

import random

import pytest

from keccak_sponge.crypto import constants
from keccak_sponge.crypto.keccak import (
    bytes_to_lanes,
    extract_bytes,
    keccak_f1600,
    lanes_to_bytes,
    new_state,
    permute_bytes,
    rotl64,
    xor_byte,
    xor_into_lanes,
)

# Textbook rotation offsets r[x][y]
_TEXTBOOK_ROTATIONS = [
    [0, 36, 3, 41, 18],
    [1, 44, 10, 45, 2],
    [62, 6, 43, 15, 61],
    [28, 55, 25, 21, 56],
    [27, 20, 39, 8, 14],
]


def textbook_keccak_f(lanes):
    """Unfused five-step permutation on a 5x5 grid, used as an oracle."""
    mask = constants.MASK64
    a = [[lanes[x + 5 * y] for y in range(5)] for x in range(5)]
    for rc in constants.ROUND_CONSTANTS:
        c = [a[x][0] ^ a[x][1] ^ a[x][2] ^ a[x][3] ^ a[x][4] for x in range(5)]
        d = [c[(x - 1) % 5] ^ rotl64(c[(x + 1) % 5], 1) for x in range(5)]
        a = [[a[x][y] ^ d[x] for y in range(5)] for x in range(5)]

        b = [[0] * 5 for _ in range(5)]
        for x in range(5):
            for y in range(5):
                shift = _TEXTBOOK_ROTATIONS[x][y]
                value = a[x][y]
                rotated = ((value << shift) | (value >> (64 - shift))) & mask if shift else value
                b[y][(2 * x + 3 * y) % 5] = rotated

        a = [[b[x][y] ^ (~b[(x + 1) % 5][y] & b[(x + 2) % 5][y]) for y in range(5)]
             for x in range(5)]
        a[0][0] ^= rc
    return [a[i % 5][i // 5] for i in range(25)]


class TestConstants:
    """Test the fixed algorithm tables."""

    def test_tables_are_immutable(self):
        """Tables are tuples, not mutable lists."""
        assert isinstance(constants.ROUND_CONSTANTS, tuple)
        assert isinstance(constants.ROTATION_OFFSETS, tuple)
        assert isinstance(constants.PI_LANES, tuple)

    def test_table_sizes(self):
        """Each table has one entry per round / per non-zero lane."""
        assert len(constants.ROUND_CONSTANTS) == constants.ROUNDS == 24
        assert len(constants.ROTATION_OFFSETS) == 24
        assert len(constants.PI_LANES) == 24

    def test_pi_lanes_cover_every_non_zero_lane(self):
        """The Pi cycle visits lanes 1..24 exactly once."""
        assert sorted(constants.PI_LANES) == list(range(1, 25))

    def test_rotation_offsets_in_range(self):
        """Rotation offsets are valid non-zero 64-bit shifts."""
        assert all(0 < offset < 64 for offset in constants.ROTATION_OFFSETS)

    def test_rates(self):
        """Output lengths map to the standard rates."""
        assert constants.rate_for_output_length(16) == 168
        assert constants.rate_for_output_length(28) == 144
        assert constants.rate_for_output_length(32) == 136
        assert constants.rate_for_output_length(48) == 104
        assert constants.rate_for_output_length(64) == 72


class TestRotate:
    """Test 64-bit rotation."""

    def test_rotate_high_bit_wraps(self):
        assert rotl64(0x8000000000000000, 1) == 1

    def test_rotate_stays_64_bit(self):
        assert rotl64(constants.MASK64, 17) == constants.MASK64

    def test_rotate_by_32(self):
        assert rotl64(0x00000000FFFFFFFF, 32) == 0xFFFFFFFF00000000


class TestStateViews:
    """Test conversion between lane and byte views."""

    def test_byte_view_is_little_endian(self):
        """Lane 0 low byte comes first regardless of host order."""
        lanes = new_state()
        lanes[0] = 0x0102030405060708
        lanes[24] = 0xAABBCCDDEEFF0011
        data = lanes_to_bytes(lanes)

        assert len(data) == constants.STATE_BYTES
        assert data[:8] == bytes([8, 7, 6, 5, 4, 3, 2, 1])
        assert data[192:] == bytes([0x11, 0x00, 0xFF, 0xEE, 0xDD, 0xCC, 0xBB, 0xAA])

    def test_views_round_trip(self):
        """Byte and lane views describe the same bits."""
        rng = random.Random(1600)
        lanes = [rng.getrandbits(64) for _ in range(25)]
        assert bytes_to_lanes(lanes_to_bytes(lanes)) == lanes

    def test_bytes_to_lanes_rejects_wrong_size(self):
        with pytest.raises(ValueError):
            bytes_to_lanes(b"\x00" * 199)

    def test_conversions_do_not_mutate(self):
        """Conversion functions are side-effect free."""
        lanes = list(range(25))
        snapshot = list(lanes)
        lanes_to_bytes(lanes)
        assert lanes == snapshot

    @pytest.mark.parametrize("offset,length", [
        (0, 0), (0, 1), (3, 5), (5, 3), (0, 8), (7, 18), (8, 16), (13, 100), (150, 50),
    ])
    def test_xor_into_lanes_matches_byte_view(self, offset, length):
        """XOR into lanes equals XOR into the byte view."""
        rng = random.Random(offset * 1000 + length)
        lanes = [rng.getrandbits(64) for _ in range(25)]
        data = bytes(rng.getrandbits(8) for _ in range(length))

        expected = bytearray(lanes_to_bytes(lanes))
        for i, b in enumerate(data):
            expected[offset + i] ^= b

        xor_into_lanes(lanes, offset, data)
        assert lanes_to_bytes(lanes) == bytes(expected)

    def test_xor_byte(self):
        lanes = new_state()
        xor_byte(lanes, 9, 0x80)
        assert lanes[1] == 0x8000
        assert extract_bytes(lanes, 9, 1) == b"\x80"

    def test_extract_bytes(self):
        lanes = new_state()
        lanes[1] = 0x0807060504030201
        assert extract_bytes(lanes, 8, 8) == bytes(range(1, 9))
        assert extract_bytes(lanes, 10, 3) == b"\x03\x04\x05"


class TestPermutation:
    """Test Keccak-f[1600]."""

    def test_zero_state(self):
        """Permuting the zero state gives the published first lanes."""
        lanes = new_state()
        keccak_f1600(lanes)
        assert lanes[0] == 0xF1258F7940E1DDE7
        assert lanes[1] == 0x84D5CCF933C0478A

    def test_matches_unfused_textbook_rounds(self):
        """Fused Rho+Pi gives the same result as separate steps."""
        rng = random.Random(24)
        for _ in range(5):
            lanes = [rng.getrandbits(64) for _ in range(25)]
            expected = textbook_keccak_f(list(lanes))
            keccak_f1600(lanes)
            assert lanes == expected

    def test_lanes_stay_64_bit(self):
        """No lane ever exceeds 64 bits or goes negative."""
        lanes = [constants.MASK64] * 25
        keccak_f1600(lanes)
        assert all(0 <= lane <= constants.MASK64 for lane in lanes)

    def test_deterministic(self):
        a = list(range(25))
        b = list(range(25))
        keccak_f1600(a)
        keccak_f1600(b)
        assert a == b

    def test_permute_bytes(self):
        """Byte-level wrapper agrees with the lane-level permutation."""
        state = bytes(range(200))
        lanes = bytes_to_lanes(state)
        keccak_f1600(lanes)
        assert permute_bytes(state) == lanes_to_bytes(lanes)
        assert permute_bytes(state) != state
