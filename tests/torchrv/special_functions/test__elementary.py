import math

import pytest
import scipy.special
import torch
from hypothesis import given
from hypothesis import strategies as st

from torchrv.special_functions import log1pmx, stirling_correction


class TestLog1pmx:
    """Tests for log(1 + x) - x."""

    @pytest.mark.parametrize(
        "x", [-0.9, -0.3, -0.2499, -1e-3, 1e-8, 0.1, 0.2499, 0.3, 5.0, 1e6]
    )
    def test_scipy_comparison(self, x):
        result = log1pmx(torch.tensor(x, dtype=torch.float64))
        expected = torch.tensor(scipy.special.log1pmx(x), dtype=torch.float64)
        torch.testing.assert_close(result, expected, rtol=1e-13, atol=0.0)

    def test_zero(self):
        assert log1pmx(torch.tensor(0.0, dtype=torch.float64)).item() == 0.0

    def test_small_argument_is_quadratic(self):
        """Near zero the leading term -x^2/2 dominates without cancellation."""
        x = torch.tensor([1e-10, -1e-10], dtype=torch.float64)
        torch.testing.assert_close(
            log1pmx(x), -(x**2) / 2, rtol=1e-9, atol=0.0
        )

    def test_limits(self):
        x = torch.tensor([-1.0, math.inf], dtype=torch.float64)
        result = log1pmx(x)
        assert result[0].item() == -math.inf
        assert result[1].item() == -math.inf

    def test_float32(self):
        x = torch.tensor([0.1, 2.0], dtype=torch.float32)
        result = log1pmx(x)
        assert result.dtype == torch.float32
        expected = torch.tensor(
            scipy.special.log1pmx(x.double().numpy()), dtype=torch.float32
        )
        torch.testing.assert_close(result, expected)

    @given(st.floats(min_value=-0.99, max_value=1e3))
    def test_never_positive(self, x):
        assert log1pmx(torch.tensor(x, dtype=torch.float64)).item() <= 0.0


class TestStirlingCorrection:
    """Tests for the remainder of Stirling's series."""

    @pytest.mark.parametrize("z", [10.0, 12.5, 50.0, 100.0])
    def test_matches_lgamma(self, z):
        expected = (
            math.lgamma(z)
            - (z - 0.5) * math.log(z)
            + z
            - 0.5 * math.log(2 * math.pi)
        )
        result = stirling_correction(torch.tensor(z, dtype=torch.float64))
        torch.testing.assert_close(
            result,
            torch.tensor(expected, dtype=torch.float64),
            rtol=1e-8,
            atol=1e-14,
        )

    def test_leading_term(self):
        z = torch.tensor(1e10, dtype=torch.float64)
        torch.testing.assert_close(
            stirling_correction(z), 1 / (12 * z), rtol=1e-12, atol=0.0
        )
