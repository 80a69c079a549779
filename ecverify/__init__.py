"""
ecverify: elliptic-curve arithmetic and signature verification.

A pure-Python engine for short-Weierstrass curves over 256-bit prime
fields:

- **Jacobian group law** with explicit handling of the point at
  infinity and of additions that are really doublings
- **Windowed scalar multiplication** (4-bit single-scalar, 2+2-bit
  Shamir double-scalar)
- **ECDSA** verification (low-S only)
- **Schnorr** verification, **adaptor** verification and adaptor-secret
  extraction

Curves are immutable parameter values passed to every call.

Quick start
-----------
::

    from ecverify import SECP256R1, ecdsa, hash_message
    from ecverify import public_key, random_private_key

    d = random_private_key(SECP256R1)
    digest = hash_message(b"hello world")
    sig = ecdsa.sign(SECP256R1, d, digest)
    assert ecdsa.verify(SECP256R1, digest, sig, public_key(SECP256R1, d))
"""

__version__ = "0.1.0"

# ── configuration ───────────────────────────────────────────────────────
from .curve import (
    CurveParams,
    SECP256K1,
    SECP256R1,
    BRAINPOOLP256R1,
    CURVES,
    get_curve,
)

# ── errors ──────────────────────────────────────────────────────────────
from .errors import (
    EcVerifyError,
    InvalidLengthError,
    LengthIsNot32Error,
    LengthIsNot64Error,
    LengthIsNot96Error,
    AdaptorSecretError,
)

# ── arithmetic ──────────────────────────────────────────────────────────
from .field import (
    mod_exp,
    mod_inverse,
    batch_inverse,
    is_on_curve,
    is_valid_scalar,
)
from .point import (
    AffinePoint,
    JacobianPoint,
    INFINITY_AFFINE,
    to_affine,
    to_jacobian,
    batch_to_affine,
    is_infinity,
    j_equal,
)
from .jacobian import j_add, j_double, j_neg, j_sub
from .multiply import (
    precompute_table,
    precompute_shamir_table,
    j_mult_shamir,
    j_mult_shamir2,
    scalar_mult,
    base_mult,
    double_scalar_mult,
)

# ── signatures ──────────────────────────────────────────────────────────
from . import ecdsa, schnorr
from .ecdsa import ECDSASignature
from .schnorr import SchnorrSignature
from .hash import hash_message, keccak256, schnorr_challenge
from .keys import public_key, public_point, random_private_key

__all__ = [
    # version
    "__version__",
    # curves
    "CurveParams", "SECP256K1", "SECP256R1", "BRAINPOOLP256R1",
    "CURVES", "get_curve",
    # errors
    "EcVerifyError", "InvalidLengthError", "LengthIsNot32Error",
    "LengthIsNot64Error", "LengthIsNot96Error", "AdaptorSecretError",
    # field
    "mod_exp", "mod_inverse", "batch_inverse", "is_on_curve",
    "is_valid_scalar",
    # points
    "AffinePoint", "JacobianPoint", "INFINITY_AFFINE", "to_affine",
    "to_jacobian", "batch_to_affine", "is_infinity", "j_equal",
    # group law
    "j_add", "j_double", "j_neg", "j_sub",
    # multiplication
    "precompute_table", "precompute_shamir_table", "j_mult_shamir",
    "j_mult_shamir2", "scalar_mult", "base_mult", "double_scalar_mult",
    # signatures
    "ecdsa", "schnorr", "ECDSASignature", "SchnorrSignature",
    "hash_message", "keccak256", "schnorr_challenge",
    "public_key", "public_point", "random_private_key",
]
