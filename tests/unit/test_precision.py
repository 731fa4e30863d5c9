"""
Tests for the precision policy

Checks:
1. Pinned process-wide constants (LARGE = 1e4)
2. SMALL and ACCURACY derived from LARGE
3. Immutability and validation of PrecisionPolicy
"""

import math

import pytest
from pydantic import ValidationError

from termcalc.core.math.precision import (
    ACCURACY,
    DEFAULT_PRECISION,
    FAST_PRECISION,
    FINE_PRECISION,
    LARGE,
    SMALL,
    PrecisionPolicy,
)

# =============================================================================
# CONSTANTS
# =============================================================================


class TestPinnedConstants:
    """The default parameterization is the fast one"""

    def test_large(self) -> None:
        assert LARGE == 10_000.0

    def test_small(self) -> None:
        assert SMALL == 1e-4

    def test_accuracy(self) -> None:
        assert ACCURACY == 3

    def test_small_is_reciprocal_of_large(self) -> None:
        assert SMALL * LARGE == pytest.approx(1.0)

    def test_default_matches_fast_preset(self) -> None:
        assert DEFAULT_PRECISION == FAST_PRECISION
        assert DEFAULT_PRECISION.large == LARGE


# =============================================================================
# DERIVED VALUES
# =============================================================================


class TestPrecisionPolicy:
    """Tests for PrecisionPolicy"""

    def test_fine_preset(self) -> None:
        """The fine parameterization trusts five digits"""
        assert FINE_PRECISION.large == 1_000_000.0
        assert FINE_PRECISION.small == 1e-6
        assert FINE_PRECISION.accuracy == 5

    @pytest.mark.parametrize(
        ("large", "accuracy"),
        [(10.0, 0), (100.0, 1), (123_456.0, 4), (1e8, 7)],
    )
    def test_accuracy_is_floor_log10_minus_one(self, large: float, accuracy: int) -> None:
        assert PrecisionPolicy(large=large).accuracy == accuracy

    def test_small_follows_large(self) -> None:
        policy = PrecisionPolicy(large=2_500.0)
        assert policy.small == pytest.approx(1 / 2_500.0)
        assert policy.accuracy == math.floor(math.log10(2_500.0)) - 1

    def test_frozen(self) -> None:
        """A policy cannot be mutated after construction"""
        with pytest.raises(ValidationError):
            DEFAULT_PRECISION.large = 1_000_000.0

    def test_derived_values_cannot_be_set(self) -> None:
        """Only LARGE is a field; SMALL and ACCURACY are read-only"""
        with pytest.raises((AttributeError, ValidationError)):
            FAST_PRECISION.small = 0.5

    def test_large_below_ten_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PrecisionPolicy(large=5.0)

    def test_non_finite_large_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PrecisionPolicy(large=float("inf"))
        with pytest.raises(ValidationError):
            PrecisionPolicy(large=float("nan"))
