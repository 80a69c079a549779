"""
Modular arithmetic over the base field  F_p  and the scalar field  Z_n.

Everything here works on plain Python integers.  Inversion goes through
Fermat's little theorem,

    x⁻¹ ≡ x^(p-2)  (mod p),

computed by :func:`mod_exp`, the single modular-exponentiation
primitive of the engine.  Field moduli are fixed curve parameters, so
the failure paths below are unreachable for well-formed curves; they
are still checked.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .curve import CurveParams


# ── exponentiation / inversion ──────────────────────────────────────────
def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """``base^exponent mod modulus`` for non-negative exponents."""
    if modulus == 0:
        raise ZeroDivisionError("modular exponentiation with modulus 0")
    if exponent < 0:
        raise ValueError("negative exponent")
    return pow(base, exponent, modulus)


def mod_inverse(x: int, p: int) -> int:
    """Multiplicative inverse via Fermat's little theorem (p prime)."""
    if p <= 2:
        raise ZeroDivisionError(f"inverse undefined for modulus {p}")
    x %= p
    if x == 0:
        raise ZeroDivisionError("cannot invert zero")
    return mod_exp(x, p - 2, p)


def batch_inverse(values: List[int], p: int) -> List[int]:
    """
    Invert a list of non-zero field elements using a single modular
    exponentiation (Montgomery's trick).

    Cost: 3(k-1) multiplications + 1 inversion  vs  k inversions naïvely.

    Raises ``ZeroDivisionError`` if any element is zero.
    """
    k = len(values)
    if k == 0:
        return []

    # prefix products  acc[i] = v[0] * v[1] * … * v[i]
    acc = [0] * k
    running = 1
    for i, v in enumerate(values):
        if v % p == 0:
            raise ZeroDivisionError(f"cannot invert zero (index {i})")
        running = running * v % p
        acc[i] = running

    inv_all = mod_inverse(running, p)

    # back-substitution
    result = [0] * k
    for i in range(k - 1, 0, -1):
        result[i] = acc[i - 1] * inv_all % p
        inv_all = inv_all * values[i] % p
    result[0] = inv_all
    return result


# ── ring operations ─────────────────────────────────────────────────────
def mod_add(x: int, y: int, m: int) -> int:
    return (x + y) % m


def mod_sub(x: int, y: int, m: int) -> int:
    return (x - y) % m


def mod_mul(x: int, y: int, m: int) -> int:
    return (x * y) % m


# ── validity predicates ─────────────────────────────────────────────────
def is_on_curve_raw(x: int, y: int, a: int, b: int, p: int) -> bool:
    """True iff  (x, y)  is a reduced solution of  y² = x³ + a·x + b."""
    if not (0 <= x < p and 0 <= y < p):
        return False
    lhs = y * y % p
    rhs = (x * x * x + a * x + b) % p
    return lhs == rhs


def is_on_curve(x: int, y: int, curve: CurveParams) -> bool:
    """Curve-membership check against a configured curve."""
    return is_on_curve_raw(x, y, curve.a, curve.b, curve.p)


def is_valid_scalar(k: int, n: int) -> bool:
    """True iff *k* lies in  [0, n)."""
    return 0 <= k < n
