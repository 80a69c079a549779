"""
Schnorr and adaptor-Schnorr signatures over a 256-bit Weierstrass curve.

A signature on digest  m  under  P = x·G  is  (R, e)  with

    R = k·G,    c = H(P, R, m),    e = k + c·x  mod n,

and verifies iff  e·G == R + c·P.  The check is evaluated as one
Shamir pass,  e·G + (n − c)·P,  compared with  R.

Adaptor signatures
------------------
For an adaptor point  T = t·G  with secret  t, the adaptor signature is
(R, e')  with the challenge taken over the *offset* nonce  R + T:

    c  = H(P, R + T, m),    e' = k + c·x

It verifies iff  e'·G == R + c·P.  Completing it with  t  gives the
standard signature  (R + T, e' + t)  and, conversely, anyone holding
both can read off  t = e − e'.  :func:`extract_secret` refuses to do so
unless both signatures verify and are linked through  T.

Buffers:  R.x ‖ R.y ‖ e  (96 bytes),  P.x ‖ P.y  (64 bytes),  digest
(32 bytes).  Wrong lengths raise
:class:`~ecverify.errors.InvalidLengthError`.

References
----------
- Schnorr (1989). "Efficient Identification and Signatures for Smart
  Cards."  CRYPTO 1989.
- Poelstra (2017). "Scriptless Scripts."
- Aumayr et al. (2021). "Generalized Channels from Limited
  Blockchain Scripts and Adaptor Signatures."  ASIACRYPT 2021.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .curve import CurveParams
from .errors import AdaptorSecretError, LengthIsNot32Error, LengthIsNot96Error
from .field import is_on_curve, is_valid_scalar
from .hash import rfc6979_nonce, schnorr_challenge
from .jacobian import j_add
from .keys import check_private_key, public_point
from .multiply import base_mult, double_scalar_mult
from .point import (
    AffinePoint,
    FIELD_BYTES,
    j_equal,
    to_affine,
    to_jacobian,
)

logger = logging.getLogger(__name__)

_TAG_SCHNORR = b"ecverify/schnorr"
_TAG_ADAPTOR = b"ecverify/adaptor"


@dataclass(frozen=True)
class SchnorrSignature:
    """Schnorr signature  (R, e)."""

    R: AffinePoint
    e: int

    def to_bytes(self) -> bytes:
        """Serialise to 96 bytes:  R.x ‖ R.y ‖ e."""
        return self.R.to_bytes() + self.e.to_bytes(FIELD_BYTES, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> SchnorrSignature:
        LengthIsNot96Error.check(data, "signature")
        return cls(
            R=AffinePoint.from_bytes(data[:2 * FIELD_BYTES]),
            e=int.from_bytes(data[2 * FIELD_BYTES:], "big"),
        )


# ── helpers ─────────────────────────────────────────────────────────────
def _offset_nonce(
    curve: CurveParams,
    R: AffinePoint,
    T: AffinePoint,
) -> AffinePoint:
    """R + T  in affine form; the identity if they cancel."""
    return to_affine(j_add(to_jacobian(R), to_jacobian(T), curve), curve.p)


def _check_equation(
    curve: CurveParams,
    sig: SchnorrSignature,
    key: AffinePoint,
    c: int,
) -> bool:
    """e·G − c·P == R."""
    lhs = double_scalar_mult(
        curve.generator, sig.e, key, (curve.n - c) % curve.n, curve,
    )
    return j_equal(lhs, to_jacobian(sig.R), curve.p)


def _parse(
    curve: CurveParams,
    hashed_message: bytes,
    signature: bytes,
    pub_key: bytes,
) -> Tuple[SchnorrSignature, AffinePoint, bool]:
    """Decode the buffers; the flag says whether the values are usable."""
    LengthIsNot32Error.check(hashed_message, "hashed message")
    sig = SchnorrSignature.from_bytes(signature)
    key = AffinePoint.from_bytes(pub_key)

    if not is_on_curve(sig.R.x, sig.R.y, curve):
        logger.debug("schnorr reject: R not on %s", curve.name)
        return sig, key, False
    if not is_valid_scalar(sig.e, curve.n):
        logger.debug("schnorr reject: e out of range")
        return sig, key, False
    if not is_on_curve(key.x, key.y, curve):
        logger.debug("schnorr reject: public key not on %s", curve.name)
        return sig, key, False
    return sig, key, True


# ── verification ────────────────────────────────────────────────────────
def verify(
    curve: CurveParams,
    hashed_message: bytes,
    signature: bytes,
    pub_key: bytes,
) -> bool:
    """
    Standard Schnorr verification:  e·G == R + c·P,  c = H(P, R, m).
    """
    sig, key, ok = _parse(curve, hashed_message, signature, pub_key)
    if not ok:
        return False

    c = schnorr_challenge(curve, key, sig.R, hashed_message)
    return _check_equation(curve, sig, key, c)


def adaptor_verify(
    curve: CurveParams,
    hashed_message: bytes,
    adaptor_signature: bytes,
    pub_key: bytes,
    adaptor_point: AffinePoint,
) -> bool:
    """
    Adaptor verification:  e'·G == R + c·P,  c = H(P, R + T, m).
    """
    sig, key, ok = _parse(curve, hashed_message, adaptor_signature, pub_key)
    if not ok:
        return False
    if not is_on_curve(adaptor_point.x, adaptor_point.y, curve):
        logger.debug("adaptor reject: T not on %s", curve.name)
        return False

    offset = _offset_nonce(curve, sig.R, adaptor_point)
    if offset.is_identity():
        logger.debug("adaptor reject: R + T is the point at infinity")
        return False

    c = schnorr_challenge(curve, key, offset, hashed_message)
    return _check_equation(curve, sig, key, c)


def extract_secret(
    curve: CurveParams,
    hashed_message: bytes,
    signature: bytes,
    adaptor_signature: bytes,
    pub_key: bytes,
    adaptor_point: AffinePoint,
) -> int:
    """
    Recover the adaptor secret  t = e − e'  mod n.

    Both signatures are verified first, the standard nonce must equal
    R_adaptor + T, and the result must satisfy  t·G == T.

    Raises
    ------
    AdaptorSecretError
        If any of these checks fails.
    InvalidLengthError
        If a buffer has the wrong length.
    """
    full = SchnorrSignature.from_bytes(signature)
    partial = SchnorrSignature.from_bytes(adaptor_signature)

    if not verify(curve, hashed_message, signature, pub_key):
        raise AdaptorSecretError("signature does not verify")
    if not adaptor_verify(
        curve, hashed_message, adaptor_signature, pub_key, adaptor_point,
    ):
        raise AdaptorSecretError("adaptor signature does not verify")
    if _offset_nonce(curve, partial.R, adaptor_point) != full.R:
        raise AdaptorSecretError(
            "signature nonce is not the adaptor nonce offset by T"
        )

    t = (full.e - partial.e) % curve.n
    if to_affine(base_mult(t, curve), curve.p) != adaptor_point:
        raise AdaptorSecretError("extracted secret does not match T")
    return t


# ── signing ─────────────────────────────────────────────────────────────
def _nonce(
    curve: CurveParams,
    private_key: int,
    hashed_message: bytes,
    nonce: Optional[int],
    extra: bytes,
) -> int:
    if nonce is None:
        return rfc6979_nonce(curve, private_key, hashed_message, extra)
    if not 0 < nonce < curve.n:
        raise ValueError("nonce out of range [1, n)")
    return nonce


def sign(
    curve: CurveParams,
    private_key: int,
    hashed_message: bytes,
    nonce: Optional[int] = None,
) -> bytes:
    """
    Produce a Schnorr signature  R ‖ e  on a 32-byte digest.

    The nonce defaults to RFC 6979 with a Schnorr-specific tag.
    """
    LengthIsNot32Error.check(hashed_message, "hashed message")
    check_private_key(curve, private_key)

    k = _nonce(curve, private_key, hashed_message, nonce, _TAG_SCHNORR)
    R = to_affine(base_mult(k, curve), curve.p)
    P = public_point(curve, private_key)

    c = schnorr_challenge(curve, P, R, hashed_message)
    e = (k + c * private_key) % curve.n
    return SchnorrSignature(R=R, e=e).to_bytes()


def adaptor_sign(
    curve: CurveParams,
    private_key: int,
    hashed_message: bytes,
    adaptor_point: AffinePoint,
    nonce: Optional[int] = None,
) -> bytes:
    """
    Produce an adaptor signature  R ‖ e'  for adaptor point *T*.

    The challenge commits to  R + T, so the result only becomes a
    standard signature once completed with  t = log_G(T).
    """
    LengthIsNot32Error.check(hashed_message, "hashed message")
    check_private_key(curve, private_key)
    if not is_on_curve(adaptor_point.x, adaptor_point.y, curve):
        raise ValueError("adaptor point is not on the curve")

    k = _nonce(
        curve, private_key, hashed_message, nonce,
        _TAG_ADAPTOR + adaptor_point.to_bytes(),
    )
    R = to_affine(base_mult(k, curve), curve.p)
    offset = _offset_nonce(curve, R, adaptor_point)
    if offset.is_identity():
        raise ValueError("degenerate nonce, R + T is the point at infinity")
    P = public_point(curve, private_key)

    c = schnorr_challenge(curve, P, offset, hashed_message)
    e = (k + c * private_key) % curve.n
    return SchnorrSignature(R=R, e=e).to_bytes()


def complete_adaptor(
    curve: CurveParams,
    adaptor_signature: bytes,
    adaptor_point: AffinePoint,
    secret: int,
) -> bytes:
    """
    Turn an adaptor signature into the standard one:
    (R, e')  →  (R + T, e' + t).
    """
    partial = SchnorrSignature.from_bytes(adaptor_signature)
    if not 0 < secret < curve.n:
        raise ValueError("adaptor secret out of range [1, n)")
    if to_affine(base_mult(secret, curve), curve.p) != adaptor_point:
        raise ValueError("secret does not match adaptor point")

    return SchnorrSignature(
        R=_offset_nonce(curve, partial.R, adaptor_point),
        e=(partial.e + secret) % curve.n,
    ).to_bytes()
