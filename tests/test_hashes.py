"""
Tests for the hashlib-style hash objects and Digest values.
"""

import hashlib

import pytest

from keccak_sponge import sha3_256, shake_128
from keccak_sponge.crypto.hashes import (
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    SHAKE128,
    SHAKE256,
    Digest,
    algorithms_available,
    canonical_name,
    new,
)
from keccak_sponge.crypto.sponge import SpongeStateError

YODA = "Yoda said, Do or do not. There is not try.".encode("utf-8")


class TestDigest:
    """Test the Digest value type."""

    def test_equality_with_bytes(self):
        d = Digest(b"\x01\x02\x03", "SHA3-256")
        assert d == b"\x01\x02\x03"
        assert d == bytearray(b"\x01\x02\x03")
        assert d != b"\x01\x02\x04"
        assert d != b"\x01\x02"

    def test_equality_with_digest(self):
        assert Digest(b"abc", "SHAKE128") == Digest(b"abc", "SHAKE128")
        assert Digest(b"abc", "SHAKE128") != Digest(b"abd", "SHAKE128")

    def test_unrelated_types_not_equal(self):
        assert Digest(b"abc", "SHA3-256") != "abc"
        assert Digest(b"abc", "SHA3-256") != 123

    def test_hash_matches_bytes(self):
        """Equal digests and bytes hash alike, so Digest works as a dict key."""
        d = Digest(b"key", "SHA3-256")
        assert hash(d) == hash(b"key")
        assert {d: 1}[Digest(b"key", "SHA3-256")] == 1

    def test_sequence_behaviour(self):
        d = Digest(b"\x0a\x0b", "SHAKE128")
        assert len(d) == 2
        assert list(d) == [10, 11]
        assert d[0] == 10
        assert bytes(d) == b"\x0a\x0b"

    def test_description(self):
        """String form names the algorithm followed by the hex digest."""
        d = SHAKE128(YODA).digest()
        assert str(d).upper() == "SHAKE128 DIGEST: 0C39568823BBFD6930A596644121AB98"
        assert "SHAKE128" in repr(d)


class TestSHA3Objects:
    """Test fixed-output hash objects."""

    @pytest.mark.parametrize("cls,stdlib", [
        (SHA3_224, hashlib.sha3_224),
        (SHA3_256, hashlib.sha3_256),
        (SHA3_384, hashlib.sha3_384),
        (SHA3_512, hashlib.sha3_512),
    ])
    def test_matches_hashlib(self, cls, stdlib):
        data = b"The quick brown fox jumps over the lazy dog" * 10
        h = cls()
        h.update(data)
        assert h.hexdigest() == stdlib(data).hexdigest()
        assert h.digest_size == stdlib().digest_size
        assert h.block_size == stdlib().block_size

    def test_digest_is_non_destructive(self):
        """digest() can be called repeatedly and update can continue."""
        h = SHA3_256(b"part one")
        first = h.digest()
        assert h.digest() == first

        h.update(b" and part two")
        assert h.digest() == SHA3_256(b"part one and part two").digest()
        assert h.digest() != first

    def test_copy(self):
        h = SHA3_512(b"\x01\x02\x03\x04")
        fork = h.copy()
        h.update(b"\x05\x06\x07\x08")
        fork.update(b"\x05\x06\x07\x08")
        assert h.digest() == fork.digest()

    def test_copy_does_not_share_state(self):
        h = SHA3_256(b"base")
        fork = h.copy()
        fork.update(b"diverge")
        assert h.digest() == SHA3_256(b"base").digest()

    def test_module_constructor(self):
        assert sha3_256(b"abc").hexdigest() == (
            "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"
        )


class TestSHAKEObjects:
    """Test extensible-output hash objects."""

    def test_finalize(self):
        h = SHAKE128()
        h.update(YODA)
        assert h.hexdigest() == "0c39568823bbfd6930a596644121ab98"

    def test_read_streams(self):
        """Successive reads walk one output stream."""
        h = SHAKE128()
        h.update(YODA)

        result = None
        for _ in range(1000):
            result = h.read(2)
        assert str(result).upper() == "SHAKE128 DIGEST: 9244"

    def test_read_matches_digest_prefix(self):
        h = SHAKE256(b"stream")
        streamed = bytes(h.read(10)) + bytes(h.read(300))
        assert streamed == bytes(SHAKE256(b"stream").digest(310))

    def test_digest_after_read_starts_from_beginning(self):
        h = SHAKE128(b"data")
        h.read(50)
        assert h.digest(16) == SHAKE128(b"data").digest(16)

    def test_update_after_read_rejected(self):
        h = SHAKE128(b"data")
        h.read(1)
        with pytest.raises(SpongeStateError):
            h.update(b"more")

    @pytest.mark.parametrize("cls,stdlib", [
        (SHAKE128, hashlib.shake_128),
        (SHAKE256, hashlib.shake_256),
    ])
    def test_matches_hashlib(self, cls, stdlib):
        data = bytes(range(256)) * 3
        assert cls(data).hexdigest(500) == stdlib(data).hexdigest(500)

    def test_default_sizes(self):
        assert SHAKE128().digest_size == 16
        assert SHAKE256().digest_size == 32
        assert SHAKE128().block_size == 168
        assert SHAKE256().block_size == 136

    def test_copy_keeps_read_position(self):
        h = shake_128(b"fork")
        h.read(7)
        fork = h.copy()
        assert h.read(40) == fork.read(40)


class TestFactory:
    """Test name-based construction."""

    def test_algorithms_available(self):
        assert algorithms_available == {
            "sha3_224", "sha3_256", "sha3_384", "sha3_512", "shake_128", "shake_256"
        }

    @pytest.mark.parametrize("name,expected", [
        ("sha3_256", "sha3_256"),
        ("SHA3-256", "sha3_256"),
        ("shake128", "shake_128"),
        ("SHAKE-256", "shake_256"),
        (" sha3_512 ", "sha3_512"),
    ])
    def test_canonical_name(self, name, expected):
        assert canonical_name(name) == expected

    def test_new_with_data(self):
        assert new("sha3-384", b"abc").digest() == SHA3_384(b"abc").digest()

    def test_new_rejects_unknown(self):
        with pytest.raises(ValueError):
            new("md5")
