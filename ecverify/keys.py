"""Private-scalar checks and public-key derivation shared by both signers."""

from __future__ import annotations

import secrets

from .curve import CurveParams
from .multiply import base_mult
from .point import AffinePoint, to_affine


def check_private_key(curve: CurveParams, private_key: int) -> None:
    if not 0 < private_key < curve.n:
        raise ValueError("private key out of range [1, n)")


def random_private_key(curve: CurveParams) -> int:
    """Uniform in [1, n-1] via rejection sampling."""
    nbytes = (curve.n.bit_length() + 7) // 8
    while True:
        d = int.from_bytes(secrets.token_bytes(nbytes), "big")
        if 0 < d < curve.n:
            return d


def public_point(curve: CurveParams, private_key: int) -> AffinePoint:
    """d·G  in affine form."""
    check_private_key(curve, private_key)
    return to_affine(base_mult(private_key, curve), curve.p)


def public_key(curve: CurveParams, private_key: int) -> bytes:
    """64-byte public key  x ‖ y  for  d·G."""
    return public_point(curve, private_key).to_bytes()
