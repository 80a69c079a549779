"""
Fixed-window scalar multiplication and Shamir's trick.

Two workloads dominate signature verification:

- **single-scalar**   u·P         4-bit windows, 64 steps of 4 doublings
- **double-scalar**   u1·P1 + u2·P2   2+2-bit windows, 128 steps of 2
  doublings (Shamir's trick: the doublings are shared, so the double
  product costs the same 256 doublings as a single one)

Both scan their scalars from the most significant window down and run
a fixed number of iterations regardless of the scalar values.  The
16-entry lookup tables are built per call from the given points and
never cached.

References
----------
- Hankerson, Menezes, Vanstone (2004). "Guide to Elliptic Curve
  Cryptography", Alg. 3.41 (fixed-window) and Alg. 3.48
  (simultaneous multiple point multiplication).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from .jacobian import j_add, j_double
from .point import AffinePoint, JacobianPoint, to_jacobian

if TYPE_CHECKING:
    from .curve import CurveParams

SCALAR_BITS = 256
WINDOW_BITS = 4
TABLE_SIZE = 1 << WINDOW_BITS
SHAMIR_WINDOW_BITS = 2

Table = Tuple[JacobianPoint, ...]

_INF = JacobianPoint.infinity()


def _check_scalar(u: int) -> None:
    if not 0 <= u < 1 << SCALAR_BITS:
        raise ValueError("scalar must lie in [0, 2^256)")


# ── precomputation ──────────────────────────────────────────────────────
def precompute_table(point: JacobianPoint, curve: CurveParams) -> Table:
    """
    T[k] = k·P  for  k = 0 … 15.

    Even entries are doublings of T[k/2], odd entries add P to the
    preceding even entry: 7 doublings and 7 additions in total.
    """
    table = [_INF] * TABLE_SIZE
    table[1] = point
    for k in range(2, TABLE_SIZE):
        if k % 2 == 0:
            table[k] = j_double(table[k // 2], curve)
        else:
            table[k] = j_add(table[k - 1], point, curve)
    return tuple(table)


def precompute_shamir_table(
    p1: JacobianPoint,
    p2: JacobianPoint,
    curve: CurveParams,
) -> Table:
    """
    T[4·i + j] = i·P1 + j·P2  for  i, j ∈ {0, 1, 2, 3}.

    The high two index bits select the multiple of P1, the low two the
    multiple of P2.  Row 0 and column 0 hold the plain multiples; every
    other entry is the sum of one entry from each.
    """
    table = [_INF] * TABLE_SIZE

    table[1] = p2
    table[2] = j_double(p2, curve)
    table[3] = j_add(table[2], p2, curve)

    table[4] = p1
    table[8] = j_double(p1, curve)
    table[12] = j_add(table[8], p1, curve)

    for i in range(1, 4):
        for j in range(1, 4):
            table[4 * i + j] = j_add(table[4 * i], table[j], curve)
    return tuple(table)


# ── multiplication ──────────────────────────────────────────────────────
def j_mult_shamir(table: Table, u: int, curve: CurveParams) -> JacobianPoint:
    """u·P  from a :func:`precompute_table` table."""
    _check_scalar(u)
    acc = _INF
    for shift in range(SCALAR_BITS - WINDOW_BITS, -1, -WINDOW_BITS):
        if acc.z != 0:
            for _ in range(WINDOW_BITS):
                acc = j_double(acc, curve)
        window = (u >> shift) & (TABLE_SIZE - 1)
        acc = j_add(acc, table[window], curve)
    return acc


def j_mult_shamir2(
    table: Table,
    u1: int,
    u2: int,
    curve: CurveParams,
) -> JacobianPoint:
    """u1·P1 + u2·P2  from a :func:`precompute_shamir_table` table."""
    _check_scalar(u1)
    _check_scalar(u2)
    mask = (1 << SHAMIR_WINDOW_BITS) - 1
    acc = _INF
    for shift in range(SCALAR_BITS - SHAMIR_WINDOW_BITS, -1, -SHAMIR_WINDOW_BITS):
        acc = j_double(j_double(acc, curve), curve)
        index = (((u1 >> shift) & mask) << SHAMIR_WINDOW_BITS) | ((u2 >> shift) & mask)
        acc = j_add(acc, table[index], curve)
    return acc


# ── convenience wrappers ────────────────────────────────────────────────
def scalar_mult(point: AffinePoint, u: int, curve: CurveParams) -> JacobianPoint:
    """u·P  for an affine P (fresh table per call)."""
    table = precompute_table(to_jacobian(point), curve)
    return j_mult_shamir(table, u, curve)


def base_mult(u: int, curve: CurveParams) -> JacobianPoint:
    """u·G."""
    return scalar_mult(curve.generator, u, curve)


def double_scalar_mult(
    p1: AffinePoint,
    u1: int,
    p2: AffinePoint,
    u2: int,
    curve: CurveParams,
) -> JacobianPoint:
    """u1·P1 + u2·P2  in one simultaneous pass."""
    table = precompute_shamir_table(to_jacobian(p1), to_jacobian(p2), curve)
    return j_mult_shamir2(table, u1, u2, curve)
