import math

import pytest
import scipy.special
import torch
from hypothesis import given
from hypothesis import strategies as st

from torchrv.special_functions import log_beta, log_binomial_coefficient


class TestLogBeta:
    """Tests for log B(a, b)."""

    @pytest.mark.parametrize(
        "a,b",
        [
            (0.5, 0.5),
            (1.0, 1.0),
            (2.0, 3.0),
            (0.1, 25.0),
            (3.0, 1e4),
            (15.0, 40.0),
            (1e3, 1e3),
            (1e6, 2.5),
            (1e8, 1e8),
        ],
    )
    def test_scipy_comparison(self, a, b):
        result = log_beta(
            torch.tensor(a, dtype=torch.float64),
            torch.tensor(b, dtype=torch.float64),
        )
        expected = torch.tensor(
            scipy.special.betaln(a, b), dtype=torch.float64
        )
        torch.testing.assert_close(result, expected, rtol=1e-12, atol=1e-12)

    def test_python_scalars(self):
        result = log_beta(3.0, 3.0)
        assert result.dtype == torch.float64
        assert result.dim() == 0
        torch.testing.assert_close(
            result.exp(), torch.tensor(1 / 30, dtype=torch.float64)
        )

    def test_broadcasting(self):
        a = torch.tensor([[1.0], [2.0]], dtype=torch.float64)
        b = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        result = log_beta(a, b)
        assert result.shape == (2, 3)
        expected = torch.tensor(
            scipy.special.betaln(a.numpy(), b.numpy()), dtype=torch.float64
        )
        torch.testing.assert_close(result, expected)

    @given(
        st.floats(min_value=0.01, max_value=1e6),
        st.floats(min_value=0.01, max_value=1e6),
    )
    def test_symmetric(self, a, b):
        a_t = torch.tensor(a, dtype=torch.float64)
        b_t = torch.tensor(b, dtype=torch.float64)
        assert log_beta(a_t, b_t).item() == log_beta(b_t, a_t).item()


class TestLogBinomialCoefficient:
    """Tests for log C(n, k)."""

    @pytest.mark.parametrize(
        "n,k", [(0, 0), (4, 2), (10, 0), (10, 10), (20, 7), (60, 30)]
    )
    def test_exact_small(self, n, k):
        result = log_binomial_coefficient(float(n), float(k))
        torch.testing.assert_close(
            result,
            torch.tensor(math.log(math.comb(n, k)), dtype=torch.float64),
            rtol=1e-12,
            atol=1e-12,
        )

    def test_large_counts(self):
        n = torch.tensor([1e9, 1e12], dtype=torch.float64)
        k = torch.tensor([3.0, 5e11], dtype=torch.float64)
        result = log_binomial_coefficient(n, k)
        expected = torch.tensor(
            -scipy.special.betaln(n.numpy() - k.numpy() + 1, k.numpy() + 1)
            - torch.log1p(n).numpy(),
            dtype=torch.float64,
        )
        assert torch.isfinite(result).all()
        torch.testing.assert_close(result, expected, rtol=1e-10, atol=0.0)
