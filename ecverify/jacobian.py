"""
Group law on short-Weierstrass curves in Jacobian coordinates.

Formulas follow the Explicit-Formulas Database:

- doubling  ``dbl-1998-cmo-2``   (generic *a*)
- addition  ``add-1998-cmo-2``

No inversion is performed anywhere in this module.  Both operations
are total: the point at infinity (Z = 0) is handled explicitly, and
addition of two representatives of the same affine point is routed to
doubling, where the addition formulas degenerate.

References
----------
- Cohen, Miyaji, Ono (1998). "Efficient Elliptic Curve Exponentiation
  Using Mixed Coordinates."  ASIACRYPT 1998.
- https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .point import JacobianPoint

if TYPE_CHECKING:
    from .curve import CurveParams


def j_double(pt: JacobianPoint, curve: CurveParams) -> JacobianPoint:
    r"""
    2·P  via dbl-1998-cmo-2:

        YY = Y²,  ZZ = Z²
        M  = 3·X² + a·ZZ²
        S  = 4·X·YY
        X' = M² − 2·S
        Y' = M·(S − X') − 8·YY²
        Z' = 2·Y·Z
    """
    if pt.z == 0:
        return pt

    p = curve.p
    x, y, z = pt.x, pt.y, pt.z

    yy = y * y % p
    zz = z * z % p
    m = (3 * x * x + curve.a * zz * zz) % p
    s = 4 * x * yy % p

    x3 = (m * m - 2 * s) % p
    y3 = (m * (s - x3) - 8 * yy * yy) % p
    z3 = 2 * y * z % p
    return JacobianPoint(x3, y3, z3)


def j_add(
    p1: JacobianPoint,
    p2: JacobianPoint,
    curve: CurveParams,
) -> JacobianPoint:
    r"""
    P1 + P2  via add-1998-cmo-2:

        ZZ1 = Z1²,  S1 = Y1·Z2³,  U1 = X1·Z2²
        R   = Y2·Z1³ − S1
        H   = X2·ZZ1 − U1
        X3  = R² − H³ − 2·U1·H²
        Y3  = R·(U1·H² − X3) − S1·H³
        Z3  = H·Z1·Z2

    ``H = R = 0`` means both inputs are the same affine point and the
    result is computed by :func:`j_double`.  ``H = 0, R ≠ 0`` means
    P2 = −P1; the formulas then give Z3 = 0, i.e. infinity.
    """
    if p1.z == 0:
        return p2
    if p2.z == 0:
        return p1

    p = curve.p
    x1, y1, z1 = p1.x, p1.y, p1.z
    x2, y2, z2 = p2.x, p2.y, p2.z

    zz1 = z1 * z1 % p
    zz2 = z2 * z2 % p
    s1 = y1 * zz2 * z2 % p
    r = (y2 * z1 * zz1 - s1) % p
    u1 = x1 * zz2 % p
    h = (x2 * zz1 - u1) % p

    if h == 0 and r == 0:
        return j_double(p1, curve)

    hh = h * h % p
    hhh = h * hh % p
    u1hh = u1 * hh % p

    x3 = (r * r - hhh - 2 * u1hh) % p
    y3 = (r * (u1hh - x3) - s1 * hhh) % p
    z3 = h * z1 * z2 % p
    return JacobianPoint(x3, y3, z3)


def j_neg(pt: JacobianPoint, curve: CurveParams) -> JacobianPoint:
    """−P = (X, −Y, Z)."""
    if pt.z == 0:
        return pt
    return JacobianPoint(pt.x, (-pt.y) % curve.p, pt.z)


def j_sub(
    p1: JacobianPoint,
    p2: JacobianPoint,
    curve: CurveParams,
) -> JacobianPoint:
    return j_add(p1, j_neg(p2, curve), curve)
