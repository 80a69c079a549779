"""
Affine and Jacobian point representations.

Jacobian coordinates  (X, Y, Z)  stand for the affine point
(X / Z², Y / Z³).  Any triple with  Z = 0  is the point at infinity,
whatever X and Y hold.  Group-law code stays in Jacobian form so that
the one modular inversion of a computation happens in
:func:`to_affine`, at the very end.

The affine identity is encoded as  (0, 0), the usual convention for
short-Weierstrass groups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .errors import LengthIsNot64Error
from .field import batch_inverse, mod_inverse

FIELD_BYTES = 32


# ── affine ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class AffinePoint:
    """Affine point  (x, y).  Not checked against any curve."""

    x: int
    y: int

    def is_identity(self) -> bool:
        return self.x == 0 and self.y == 0

    def to_bytes(self) -> bytes:
        """Serialise to 64 bytes:  x ‖ y, big-endian."""
        return (
            self.x.to_bytes(FIELD_BYTES, "big")
            + self.y.to_bytes(FIELD_BYTES, "big")
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> AffinePoint:
        LengthIsNot64Error.check(data, "point")
        return cls(
            x=int.from_bytes(data[:FIELD_BYTES], "big"),
            y=int.from_bytes(data[FIELD_BYTES:], "big"),
        )

    def __repr__(self) -> str:
        return f"AffinePoint(0x{self.x:064x}, 0x{self.y:064x})"


INFINITY_AFFINE = AffinePoint(0, 0)


# ── jacobian ────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class JacobianPoint:
    """Jacobian point  (X, Y, Z);  Z = 0  is the point at infinity."""

    x: int
    y: int
    z: int

    @classmethod
    def infinity(cls) -> JacobianPoint:
        return _INFINITY

    def is_infinity(self) -> bool:
        return self.z == 0

    def __repr__(self) -> str:
        if self.z == 0:
            return "JacobianPoint(∞)"
        return f"JacobianPoint(0x{self.x:x}, 0x{self.y:x}, 0x{self.z:x})"


_INFINITY = JacobianPoint(0, 0, 0)


# ── conversions ─────────────────────────────────────────────────────────
def to_jacobian(point: AffinePoint) -> JacobianPoint:
    """(x, y) → (x, y, 1).  The affine identity maps to infinity."""
    if point.is_identity():
        return _INFINITY
    return JacobianPoint(point.x, point.y, 1)


def to_affine(point: JacobianPoint, p: int) -> AffinePoint:
    """(X, Y, Z) → (X·Z⁻², Y·Z⁻³);  infinity → (0, 0)."""
    if point.z == 0:
        return INFINITY_AFFINE
    z_inv = mod_inverse(point.z, p)
    z_inv2 = z_inv * z_inv % p
    z_inv3 = z_inv2 * z_inv % p
    return AffinePoint(point.x * z_inv2 % p, point.y * z_inv3 % p)


def batch_to_affine(
    points: Sequence[JacobianPoint],
    p: int,
) -> List[AffinePoint]:
    """
    Normalise many Jacobian points with a single field inversion.

    Points at infinity map to the affine identity and do not take part
    in the batch inversion.
    """
    finite = [i for i, pt in enumerate(points) if pt.z != 0]
    inverses = batch_inverse([points[i].z for i in finite], p)

    result = [INFINITY_AFFINE] * len(points)
    for i, z_inv in zip(finite, inverses):
        pt = points[i]
        z_inv2 = z_inv * z_inv % p
        result[i] = AffinePoint(
            pt.x * z_inv2 % p,
            pt.y * z_inv2 * z_inv % p,
        )
    return result


def is_infinity(point: JacobianPoint) -> bool:
    return point.z == 0


def j_equal(p1: JacobianPoint, p2: JacobianPoint, p: int) -> bool:
    """
    Equality of the affine points behind two Jacobian triples.

    Component-wise comparison is wrong here: (X, Y, Z) and
    (λ²X, λ³Y, λZ) are the same point.
    """
    if p1.z == 0 or p2.z == 0:
        return p1.z == 0 and p2.z == 0
    return to_affine(p1, p) == to_affine(p2, p)
