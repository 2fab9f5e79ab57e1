"""Tests for metallic-constant roots and continued-fraction convergents."""

import pytest

from chromaseq.constants import PHI, PHI2
from chromaseq.exceptions import NonConvergentRootError
from chromaseq.models import ContinuedFractionKind
from chromaseq.sequences import (
    continued_fraction_coefficients,
    continued_fraction_convergent,
    golden_ratio_cf,
    r_sequence_root,
)


@pytest.mark.unit
class TestRSequenceRoot:
    """Test the Newton root finder for x^(d+1) = x + 1."""

    def test_dimension_one_is_golden_ratio(self):
        assert r_sequence_root(1) == pytest.approx(PHI, abs=1e-9)

    def test_dimension_two_is_plastic_constant(self):
        assert r_sequence_root(2) == pytest.approx(PHI2, abs=1e-9)

    def test_dimension_three(self):
        assert r_sequence_root(3) == pytest.approx(1.2207440846, abs=1e-8)

    @pytest.mark.parametrize("d", [1, 2, 3, 5, 8, 16])
    def test_root_satisfies_equation(self, d):
        x = r_sequence_root(d)
        assert 1.0 < x < 2.0
        assert x ** (d + 1) == pytest.approx(x + 1, abs=1e-8)

    def test_roots_decrease_with_dimension(self):
        roots = [r_sequence_root(d) for d in range(1, 10)]
        assert roots == sorted(roots, reverse=True)

    @pytest.mark.parametrize("d", [0, -1])
    def test_invalid_dimension_is_fatal(self, d):
        with pytest.raises(NonConvergentRootError) as exc_info:
            r_sequence_root(d)
        assert not exc_info.value.recoverable


@pytest.mark.unit
class TestConvergents:
    """Test continued-fraction convergents."""

    def test_golden_convergents_are_fibonacci_ratios(self):
        assert continued_fraction_convergent([1, 1, 1, 1, 1], 4) == (8, 5)
        assert golden_ratio_cf(0) == (1, 1)
        assert golden_ratio_cf(10) == (144, 89)

    def test_sqrt2_convergents(self):
        coeffs = continued_fraction_coefficients(ContinuedFractionKind.SQRT2, 3)
        assert coeffs == [1, 2, 2, 2]
        assert continued_fraction_convergent(coeffs, 3) == (17, 12)

    def test_e_coefficients(self):
        coeffs = continued_fraction_coefficients(ContinuedFractionKind.E, 9)
        assert coeffs == [2, 1, 2, 1, 1, 4, 1, 1, 6, 1]
        assert continued_fraction_convergent(coeffs, 3) == (11, 4)

    def test_convergents_approach_limit(self):
        p, q = golden_ratio_cf(40)
        assert p / q == pytest.approx(PHI, abs=1e-15)

    def test_exact_integers_for_large_index(self):
        """Numerators grow past float precision without losing exactness."""
        p, q = golden_ratio_cf(200)
        assert isinstance(p, int)
        assert p * p - p * q - q * q in (1, -1)

    def test_index_beyond_coefficients_returns_last(self):
        assert continued_fraction_convergent([1, 1], 5) == (2, 1)

    def test_empty_coefficients_rejected(self):
        with pytest.raises(ValueError):
            continued_fraction_convergent([], 0)

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            continued_fraction_convergent([1, 1], -1)
