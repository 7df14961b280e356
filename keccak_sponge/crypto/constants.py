"""
Fixed Keccak-f[1600] algorithm tables and sponge parameters.

All tables are tuples: they are algorithm constants, not process state.
"""

# State geometry
STATE_BYTES = 200
LANE_COUNT = 25
LANE_BYTES = 8
ROUNDS = 24
MASK64 = 0xFFFFFFFFFFFFFFFF

# Iota round constants, one per round
ROUND_CONSTANTS = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A,
    0x8000000080008000, 0x000000000000808B, 0x0000000080000001,
    0x8000000080008081, 0x8000000000008009, 0x000000000000008A,
    0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089,
    0x8000000000008003, 0x8000000000008002, 0x8000000000000080,
    0x000000000000800A, 0x800000008000000A, 0x8000000080008081,
    0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Rho offsets, in the order the Pi cycle visits lanes (starting from lane 1)
ROTATION_OFFSETS = (
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14,
    27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44,
)

# Pi target lane indices, in cycle order
PI_LANES = (
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4,
    15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1,
)

# Padding bytes
SHA3_SUFFIX = 0x06
SHAKE_SUFFIX = 0x1F
PAD_LAST_BYTE = 0x80

# Output lengths (bytes) for the named functions
SHA3_224_LENGTH = 28
SHA3_256_LENGTH = 32
SHA3_384_LENGTH = 48
SHA3_512_LENGTH = 64
SHAKE128_LENGTH = 16
SHAKE256_LENGTH = 32

# Largest output length that still leaves a positive rate
MAX_OUTPUT_LENGTH = (STATE_BYTES - 1) // 2


def rate_for_output_length(output_len: int) -> int:
    """Return the sponge rate in bytes for an output length in bytes."""
    return STATE_BYTES - 2 * output_len
