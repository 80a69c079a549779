"""
Tests for hash.py - digests, Schnorr challenge and RFC 6979 nonces
"""

import hashlib

import pytest

from ecverify import AffinePoint, SECP256K1, SECP256R1, hash as ec_hash


class TestDigests:
    """Tests for the message digests."""

    def test_keccak256_empty(self):
        """Keccak-256, not FIPS SHA3-256."""
        assert ec_hash.keccak256(b"").hex() == (
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
        )
        assert ec_hash.keccak256(b"") != hashlib.sha3_256(b"").digest()

    def test_keccak256_chunks(self):
        assert ec_hash.keccak256(b"ab", b"cd") == ec_hash.keccak256(b"abcd")

    def test_hash_message_sha256(self):
        assert ec_hash.hash_message(b"hello") == hashlib.sha256(b"hello").digest()

    def test_hash_message_keccak(self):
        assert ec_hash.hash_message(b"", "keccak256") == ec_hash.keccak256(b"")

    def test_hash_message_unknown(self):
        with pytest.raises(ValueError, match="unsupported hasher"):
            ec_hash.hash_message(b"", "md5")


class TestSchnorrChallenge:
    """Tests for c = H(P.x, P.y, R.x, R.y, m) mod n."""

    def test_layout(self, digest):
        c = SECP256K1
        pub, nonce = c.generator, c.generator
        packed = (
            c.gx.to_bytes(32, "big") + c.gy.to_bytes(32, "big")
        ) * 2 + digest
        expected = int.from_bytes(ec_hash.keccak256(packed), "big") % c.n
        assert ec_hash.schnorr_challenge(c, pub, nonce, digest) == expected

    def test_binds_public_key(self, digest):
        c = SECP256K1
        other = AffinePoint(c.gx, c.p - c.gy)
        assert ec_hash.schnorr_challenge(c, c.generator, c.generator, digest) != (
            ec_hash.schnorr_challenge(c, other, c.generator, digest)
        )


class TestRFC6979:
    """Deterministic nonces."""

    # RFC 6979 §A.2.5, P-256 with SHA-256, message "sample"
    PRIVATE_KEY = 0xC9AFA9D845BA75166B5C215767B1D6934E50C3DB36E89B127B8A622B120F6721
    EXPECTED_K = 0xA6E3C57DD01ABE90086538398355DD4C3B17AA873382B0F24D6129493D8AAD60

    def test_published_vector(self):
        digest = hashlib.sha256(b"sample").digest()
        k = ec_hash.rfc6979_nonce(SECP256R1, self.PRIVATE_KEY, digest)
        assert k == self.EXPECTED_K

    def test_deterministic(self, digest):
        a = ec_hash.rfc6979_nonce(SECP256K1, 7, digest)
        assert a == ec_hash.rfc6979_nonce(SECP256K1, 7, digest)
        assert 0 < a < SECP256K1.n

    def test_extra_data_changes_nonce(self, digest):
        a = ec_hash.rfc6979_nonce(SECP256K1, 7, digest)
        b = ec_hash.rfc6979_nonce(SECP256K1, 7, digest, extra=b"schnorr")
        assert a != b
