"""
ECDSA over an arbitrary 256-bit short-Weierstrass curve.

Verification of  (r, s)  on digest  h  under public key  Q:

    w  = s⁻¹ mod n
    u1 = h·w mod n,    u2 = r·w mod n
    R' = u1·G + u2·Q                    (one Shamir double-scalar pass)
    accept  iff  R'.x mod n == r

Only **low-S** signatures are accepted:  0 < s ≤ ⌊n/2⌋.  For every
valid  (r, s)  the twin  (r, n − s)  also satisfies the equation above;
rejecting the upper half makes signatures non-malleable.

Buffers are fixed-length:  r ‖ s  (64 bytes),  Q.x ‖ Q.y  (64 bytes),
digest (32 bytes).  A buffer of the wrong length raises
:class:`~ecverify.errors.InvalidLengthError`; every other failure is a
plain ``False``.

References
----------
- SEC 1 v2 §4.1.4  Verifying Operation
- BIP-62 / EIP-2   low-S rule
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .curve import CurveParams
from .errors import LengthIsNot32Error, LengthIsNot64Error
from .field import is_on_curve, mod_inverse
from .hash import hash_message, rfc6979_nonce
from .keys import check_private_key
from .multiply import base_mult, double_scalar_mult
from .point import AffinePoint, FIELD_BYTES, to_affine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ECDSASignature:
    """ECDSA signature  (r, s)."""

    r: int
    s: int

    def to_bytes(self) -> bytes:
        """Serialise to 64 bytes:  r ‖ s."""
        return (
            self.r.to_bytes(FIELD_BYTES, "big")
            + self.s.to_bytes(FIELD_BYTES, "big")
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> ECDSASignature:
        LengthIsNot64Error.check(data, "signature")
        return cls(
            r=int.from_bytes(data[:FIELD_BYTES], "big"),
            s=int.from_bytes(data[FIELD_BYTES:], "big"),
        )

    def is_low_s(self, curve: CurveParams) -> bool:
        return self.s <= curve.half_order


# ── verification ────────────────────────────────────────────────────────
def verify(
    curve: CurveParams,
    hashed_message: bytes,
    signature: bytes,
    pub_key: bytes,
) -> bool:
    """
    Verify a low-S ECDSA signature on a 32-byte digest.

    Parameters
    ----------
    curve : CurveParams
        Domain parameters.
    hashed_message : bytes
        32-byte message digest.
    signature : bytes
        64 bytes,  r ‖ s.
    pub_key : bytes
        64 bytes,  x ‖ y.
    """
    LengthIsNot32Error.check(hashed_message, "hashed message")
    sig = ECDSASignature.from_bytes(signature)
    key = AffinePoint.from_bytes(pub_key)

    n = curve.n
    if not 0 < sig.r < n:
        logger.debug("ecdsa reject: r out of range on %s", curve.name)
        return False
    if not 0 < sig.s <= curve.half_order:
        logger.debug("ecdsa reject: s not in low half on %s", curve.name)
        return False
    if not is_on_curve(key.x, key.y, curve):
        logger.debug("ecdsa reject: public key not on %s", curve.name)
        return False

    h = int.from_bytes(hashed_message, "big")
    w = mod_inverse(sig.s, n)
    u1 = h * w % n
    u2 = sig.r * w % n

    point = double_scalar_mult(curve.generator, u1, key, u2, curve)
    if point.is_infinity():
        logger.debug("ecdsa reject: u1·G + u2·Q is the point at infinity")
        return False

    return to_affine(point, curve.p).x % n == sig.r


def verify_message(
    curve: CurveParams,
    message: bytes,
    signature: bytes,
    pub_key: bytes,
    hasher: str = "sha256",
) -> bool:
    """Hash an arbitrary message with *hasher*, then :func:`verify`."""
    return verify(curve, hash_message(message, hasher), signature, pub_key)


# ── signing ─────────────────────────────────────────────────────────────
def sign(
    curve: CurveParams,
    private_key: int,
    hashed_message: bytes,
    nonce: Optional[int] = None,
) -> bytes:
    """
    Produce a low-S ECDSA signature  r ‖ s  on a 32-byte digest.

    The nonce defaults to RFC 6979.  Passing *nonce* explicitly is for
    test vectors only; reusing a nonce across two messages reveals the
    private key.
    """
    LengthIsNot32Error.check(hashed_message, "hashed message")
    check_private_key(curve, private_key)

    n = curve.n
    k = nonce if nonce is not None else rfc6979_nonce(
        curve, private_key, hashed_message,
    )
    if not 0 < k < n:
        raise ValueError("nonce out of range [1, n)")

    r = to_affine(base_mult(k, curve), curve.p).x % n
    h = int.from_bytes(hashed_message, "big")
    s = mod_inverse(k, n) * (h + r * private_key) % n
    if r == 0 or s == 0:
        raise ValueError("degenerate nonce, pick another")

    if s > curve.half_order:
        s = n - s
    return ECDSASignature(r=r, s=s).to_bytes()
