"""
Short-Weierstrass curve parameters over 256-bit prime fields.

A curve is the immutable value

    E : y² = x³ + a·x + b   over  F_p,   generator G = (gx, gy) of order n,

passed explicitly to every operation of the engine; nothing in this
package keeps a "current curve".

Presets
-------
The three curves the verification suite ships with:

- ``SECP256K1``        SEC 2 v2 §2.4.1  (Bitcoin, Ethereum)
- ``SECP256R1``        SEC 2 v2 §2.4.2  (NIST P-256, WebAuthn)
- ``BRAINPOOLP256R1``  RFC 5639 §3.4

References
----------
- SEC 2: Recommended Elliptic Curve Domain Parameters, v2.0 (2010).
- RFC 5639: ECC Brainpool Standard Curves and Curve Generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .errors import InvalidLengthError
from .field import is_on_curve_raw
from .point import AffinePoint, FIELD_BYTES

FIELD_BITS = 256
CURVE_PARAMS_BYTES = 6 * FIELD_BYTES


class LengthIsNot192Error(InvalidLengthError):
    expected = CURVE_PARAMS_BYTES


@dataclass(frozen=True)
class CurveParams:
    """Domain parameters  (a, b, p, n, gx, gy)  of a Weierstrass curve."""

    a: int
    b: int
    p: int
    n: int
    gx: int
    gy: int
    name: str = "custom"

    def __post_init__(self) -> None:
        for label, value in (("p", self.p), ("n", self.n)):
            if not 2 < value < 1 << FIELD_BITS:
                raise ValueError(f"{label} out of range (2, 2^256)")
        if not (0 <= self.a < self.p and 0 <= self.b < self.p):
            raise ValueError("curve coefficients must be reduced mod p")
        if not is_on_curve_raw(self.gx, self.gy, self.a, self.b, self.p):
            raise ValueError(f"generator is not on curve {self.name}")

    @property
    def generator(self) -> AffinePoint:
        return AffinePoint(self.gx, self.gy)

    @property
    def half_order(self) -> int:
        """Largest ``s`` accepted by low-S ECDSA verification."""
        return self.n // 2

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Serialise to 192 bytes:  a ‖ b ‖ p ‖ n ‖ gx ‖ gy."""
        return b"".join(
            v.to_bytes(FIELD_BYTES, "big")
            for v in (self.a, self.b, self.p, self.n, self.gx, self.gy)
        )

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "custom") -> CurveParams:
        LengthIsNot192Error.check(data, "curve parameters")
        words = [
            int.from_bytes(data[i:i + FIELD_BYTES], "big")
            for i in range(0, CURVE_PARAMS_BYTES, FIELD_BYTES)
        ]
        a, b, p, n, gx, gy = words
        return cls(a=a, b=b, p=p, n=n, gx=gx, gy=gy, name=name)

    def __repr__(self) -> str:
        return f"CurveParams({self.name})"


# ── presets ─────────────────────────────────────────────────────────────
SECP256K1 = CurveParams(
    name="secp256k1",
    a=0,
    b=7,
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

SECP256R1 = CurveParams(
    name="secp256r1",
    a=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
)

BRAINPOOLP256R1 = CurveParams(
    name="brainpoolP256r1",
    a=0x7D5A0975FC2C3057EEF67530417AFFE7FB8055C126DC5C6CE94A4B44F330B5D9,
    b=0x26DC5C6CE94A4B44F330B5D9BBD77CBF958416295CF7E1CE6BCCDC18FF8C07B6,
    p=0xA9FB57DBA1EEA9BC3E660A909D838D726E3BF623D52620282013481D1F6E5377,
    n=0xA9FB57DBA1EEA9BC3E660A909D838D718C397AA3B561A6F7901E0E82974856A7,
    gx=0x8BD2AEB9CB7E57CB2C4B482FFC81B7AFB9DE27E1E3BD23C23A4453BD9ACE3262,
    gy=0x547EF835C3DAC4FD97F8461A14611DC9C27745132DED8E545C1D54C72F046997,
)

CURVES: Dict[str, CurveParams] = {
    c.name.lower(): c for c in (SECP256K1, SECP256R1, BRAINPOOLP256R1)
}
# common aliases
CURVES["p-256"] = SECP256R1
CURVES["prime256v1"] = SECP256R1


def get_curve(name: str) -> CurveParams:
    """Look up a preset by (case-insensitive) name."""
    try:
        return CURVES[name.lower()]
    except KeyError:
        raise KeyError(f"unknown curve {name!r}") from None
