"""
Hash functions used by the signature layer.

- **Keccak-256** (the pre-standard SHA-3 padding, as used by Ethereum)
  binds Schnorr challenges.  Provided by pycryptodome, since
  ``hashlib.sha3_256`` implements the final FIPS 202 padding and gives
  different digests.
- **SHA-256** is the default message digest for ECDSA.
- **RFC 6979** derives deterministic signing nonces with HMAC-SHA256.

Schnorr challenge
-----------------
::

    c = Keccak256( P.x ‖ P.y ‖ R.x ‖ R.y ‖ m )  mod n

with every coordinate encoded as a 32-byte big-endian word.  Including
the public key  P  ties the challenge to one signer and rules out
key-substitution.

References
----------
- RFC 6979: Deterministic Usage of DSA and ECDSA (2013), §3.2.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING, Callable, Dict

from Crypto.Hash import keccak

from .point import AffinePoint, FIELD_BYTES

if TYPE_CHECKING:
    from .curve import CurveParams

DIGEST_BYTES = 32


# ── digests ─────────────────────────────────────────────────────────────
def keccak256(*chunks: bytes) -> bytes:
    """Keccak-256 over the concatenation of *chunks*."""
    h = keccak.new(digest_bits=256)
    for chunk in chunks:
        h.update(chunk)
    return h.digest()


def sha256(*chunks: bytes) -> bytes:
    h = hashlib.sha256()
    for chunk in chunks:
        h.update(chunk)
    return h.digest()


HASHERS: Dict[str, Callable[..., bytes]] = {
    "sha256": sha256,
    "keccak256": keccak256,
}


def hash_message(message: bytes, hasher: str = "sha256") -> bytes:
    """32-byte digest of an arbitrary-length message."""
    try:
        fn = HASHERS[hasher]
    except KeyError:
        raise ValueError(f"unsupported hasher {hasher!r}") from None
    return fn(message)


# ── Schnorr challenge ───────────────────────────────────────────────────
def _word(v: int) -> bytes:
    return v.to_bytes(FIELD_BYTES, "big")


def schnorr_challenge(
    curve: CurveParams,
    pub_key: AffinePoint,
    nonce_point: AffinePoint,
    hashed_message: bytes,
) -> int:
    """c = H(P.x, P.y, R.x, R.y, m) mod n."""
    digest = keccak256(
        _word(pub_key.x),
        _word(pub_key.y),
        _word(nonce_point.x),
        _word(nonce_point.y),
        hashed_message,
    )
    return int.from_bytes(digest, "big") % curve.n


# ── RFC 6979 nonces ─────────────────────────────────────────────────────
def _bits2int(data: bytes, qlen: int) -> int:
    v = int.from_bytes(data, "big")
    excess = len(data) * 8 - qlen
    if excess > 0:
        v >>= excess
    return v


def rfc6979_nonce(
    curve: CurveParams,
    secret: int,
    hashed_message: bytes,
    extra: bytes = b"",
) -> int:
    """
    Deterministic nonce  k ∈ [1, n)  per RFC 6979 §3.2 (HMAC-SHA256).

    *extra* is the optional additional data of §3.6; the signers use it
    to separate Schnorr and adaptor nonces from ECDSA ones.
    """
    n = curve.n
    qlen = n.bit_length()
    rlen = (qlen + 7) // 8

    x = secret.to_bytes(rlen, "big")
    h1 = (_bits2int(hashed_message, qlen) % n).to_bytes(rlen, "big")

    v = b"\x01" * DIGEST_BYTES
    k = b"\x00" * DIGEST_BYTES

    k = hmac.new(k, v + b"\x00" + x + h1 + extra, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    k = hmac.new(k, v + b"\x01" + x + h1 + extra, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()

    while True:
        t = b""
        while len(t) < rlen:
            v = hmac.new(k, v, hashlib.sha256).digest()
            t += v
        candidate = _bits2int(t[:rlen], qlen)
        if 0 < candidate < n:
            return candidate
        k = hmac.new(k, v + b"\x00", hashlib.sha256).digest()
        v = hmac.new(k, v, hashlib.sha256).digest()
