"""
Tests for field.py - modular arithmetic and validity predicates
"""

import pytest

from ecverify import SECP256K1, SECP256R1, field


class TestModInverse:
    """Tests for Fermat inversion."""

    @pytest.mark.parametrize("x", [1, 2, 3, 12345, SECP256K1.p - 1])
    def test_inverse_times_value_is_one(self, x):
        """x · x⁻¹ ≡ 1 (mod p)."""
        p = SECP256K1.p
        assert x * field.mod_inverse(x, p) % p == 1

    def test_inverse_reduces_input(self):
        """Unreduced input gives the same inverse as the reduced one."""
        p = SECP256R1.p
        assert field.mod_inverse(p + 5, p) == field.mod_inverse(5, p)

    def test_inverse_of_zero(self):
        """Zero has no inverse."""
        with pytest.raises(ZeroDivisionError):
            field.mod_inverse(0, SECP256K1.p)

    @pytest.mark.parametrize("modulus", [0, 1, 2])
    def test_inverse_rejects_degenerate_modulus(self, modulus):
        """Fermat inversion needs p > 2."""
        with pytest.raises(ZeroDivisionError):
            field.mod_inverse(1, modulus)

    def test_mod_exp_zero_modulus(self):
        """The exponentiation primitive reports modulus zero."""
        with pytest.raises(ZeroDivisionError):
            field.mod_exp(3, 5, 0)

    def test_mod_exp_matches_pow(self):
        assert field.mod_exp(7, 560, 561) == pow(7, 560, 561)


class TestBatchInverse:
    """Tests for Montgomery's batch inversion."""

    def test_matches_individual_inverses(self):
        p = SECP256K1.p
        values = [2, 3, 5, 7, p - 1, 0xDEADBEEF]
        expected = [field.mod_inverse(v, p) for v in values]
        assert field.batch_inverse(values, p) == expected

    def test_empty(self):
        assert field.batch_inverse([], SECP256K1.p) == []

    def test_zero_element(self):
        with pytest.raises(ZeroDivisionError, match="index 1"):
            field.batch_inverse([3, 0, 5], SECP256K1.p)


class TestRingOps:
    """Tests for add/sub/mul reductions."""

    def test_results_are_reduced(self):
        n = SECP256K1.n
        assert field.mod_add(n - 1, 2, n) == 1
        assert field.mod_sub(1, 2, n) == n - 1
        assert field.mod_mul(n - 1, n - 1, n) == 1


class TestPredicates:
    """Tests for curve membership and scalar validity."""

    def test_generator_on_curve(self, curve):
        assert field.is_on_curve(curve.gx, curve.gy, curve)

    def test_perturbed_point_off_curve(self, curve):
        assert not field.is_on_curve(curve.gx, (curve.gy + 1) % curve.p, curve)

    def test_unreduced_coordinates_rejected(self):
        """x + p satisfies the equation mod p but is not a field element."""
        c = SECP256K1
        assert not field.is_on_curve(c.gx + c.p, c.gy, c)
        assert not field.is_on_curve(c.gx, c.gy + c.p, c)

    def test_raw_predicate(self):
        c = SECP256R1
        assert field.is_on_curve_raw(c.gx, c.gy, c.a, c.b, c.p)
        assert not field.is_on_curve_raw(0, 0, c.a, c.b, c.p)

    @pytest.mark.parametrize(
        "k,expected",
        [(0, True), (1, True), (SECP256K1.n - 1, True), (SECP256K1.n, False), (-1, False)],
    )
    def test_is_valid_scalar(self, k, expected):
        assert field.is_valid_scalar(k, SECP256K1.n) is expected
