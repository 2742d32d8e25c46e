import math
import warnings

import pytest
import scipy.special
import torch
from hypothesis import given
from hypothesis import strategies as st

from torchrv.special_functions import (
    ConvergenceWarning,
    regularized_gamma_p,
    regularized_gamma_pair,
    regularized_gamma_q,
)


class TestRegularizedGammaForward:
    """Compare P(a, x) and Q(a, x) against scipy."""

    @pytest.mark.parametrize("a", [0.01, 0.5, 1.0, 2.5, 10.0, 50.0, 99.0])
    def test_series_and_continued_fraction(self, a):
        x = torch.tensor(
            [1e-6, 0.01, 0.5, 1.0, a / 2, a, a + 1, 2 * a + 5, 5 * a + 30],
            dtype=torch.float64,
        )
        p, q = regularized_gamma_pair(a, x)
        torch.testing.assert_close(
            p,
            torch.tensor(scipy.special.gammainc(a, x.numpy())),
            rtol=1e-11,
            atol=1e-15,
        )
        torch.testing.assert_close(
            q,
            torch.tensor(scipy.special.gammaincc(a, x.numpy())),
            rtol=1e-11,
            atol=1e-15,
        )

    @pytest.mark.parametrize("a", [100.0, 250.0, 1e4, 1e6])
    def test_large_shape(self, a):
        sd = math.sqrt(a)
        x = torch.tensor(
            [a - 8 * sd, a - 2 * sd, a - 0.5, a, a + sd, a + 6 * sd],
            dtype=torch.float64,
        )
        p, q = regularized_gamma_pair(a, x)
        torch.testing.assert_close(
            p,
            torch.tensor(scipy.special.gammainc(a, x.numpy())),
            rtol=1e-9,
            atol=1e-15,
        )
        torch.testing.assert_close(
            q,
            torch.tensor(scipy.special.gammaincc(a, x.numpy())),
            rtol=1e-9,
            atol=1e-15,
        )

    def test_deep_upper_tail_keeps_relative_precision(self):
        """Q stays accurate where 1 - P would round to zero."""
        q = regularized_gamma_q(3.0, 60.0)
        expected = scipy.special.gammaincc(3.0, 60.0)
        assert expected < 1e-20
        torch.testing.assert_close(
            q, torch.tensor(expected, dtype=torch.float64), rtol=1e-11, atol=0.0
        )

    @pytest.mark.parametrize("a", [1e-10, 1e-6, 1e-3, 0.05, 0.3])
    def test_small_shape_upper_tail(self, a):
        """Q is the small side for tiny shapes and stays accurate."""
        x = torch.tensor([1e-8, 0.01, 0.2, 0.5, 0.9, 1.05], dtype=torch.float64)
        p, q = regularized_gamma_pair(a, x)
        torch.testing.assert_close(
            q,
            torch.tensor(scipy.special.gammaincc(a, x.numpy())),
            rtol=1e-12,
            atol=0.0,
        )
        torch.testing.assert_close(
            p,
            torch.tensor(scipy.special.gammainc(a, x.numpy())),
            rtol=1e-12,
            atol=0.0,
        )

    def test_tiny_shape_at_one_half(self):
        q = regularized_gamma_q(1e-10, 0.5)
        torch.testing.assert_close(
            q,
            torch.tensor(scipy.special.gammaincc(1e-10, 0.5), dtype=torch.float64),
            rtol=1e-12,
            atol=0.0,
        )

    def test_exponential_special_case(self):
        x = torch.linspace(0.0, 10.0, 21, dtype=torch.float64)
        torch.testing.assert_close(
            regularized_gamma_p(1.0, x), -torch.expm1(-x), rtol=1e-13, atol=0.0
        )


class TestRegularizedGammaLimits:
    """Exact values at the edges of the domain."""

    def test_x_zero(self):
        p, q = regularized_gamma_pair(torch.tensor([0.5, 3.0, 500.0]), 0.0)
        assert (p == 0).all()
        assert (q == 1).all()

    def test_x_infinite(self):
        p, q = regularized_gamma_pair(
            torch.tensor([0.5, 3.0, 500.0]), math.inf
        )
        assert (p == 1).all()
        assert (q == 0).all()

    def test_shape_zero(self):
        p, q = regularized_gamma_pair(0.0, torch.tensor([0.1, 5.0]))
        assert (p == 1).all()
        assert (q == 0).all()

    def test_both_zero(self):
        p, q = regularized_gamma_pair(0.0, 0.0)
        assert p.item() == 0.0
        assert q.item() == 1.0

    @pytest.mark.parametrize(
        "a,x", [(math.nan, 1.0), (1.0, math.nan), (-1.0, 1.0), (1.0, -0.5)]
    )
    def test_invalid_gives_nan(self, a, x):
        p, q = regularized_gamma_pair(a, x)
        assert torch.isnan(p)
        assert torch.isnan(q)


class TestRegularizedGammaDtypes:
    def test_python_scalars_give_float64(self):
        p = regularized_gamma_p(2.0, 1.0)
        assert p.dtype == torch.float64
        assert p.dim() == 0

    def test_float32(self):
        a = torch.tensor([0.5, 2.0, 150.0], dtype=torch.float32)
        x = torch.tensor([0.3, 2.0, 140.0], dtype=torch.float32)
        p = regularized_gamma_p(a, x)
        assert p.dtype == torch.float32
        expected = torch.tensor(
            scipy.special.gammainc(a.double().numpy(), x.double().numpy()),
            dtype=torch.float32,
        )
        torch.testing.assert_close(p, expected, rtol=1e-4, atol=1e-6)

    def test_no_warning_on_ordinary_inputs(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            regularized_gamma_pair(
                torch.tensor([0.1, 5.0, 80.0, 300.0]),
                torch.tensor([0.2, 7.0, 60.0, 320.0]),
            )


class TestRegularizedGammaProperties:
    @given(
        st.floats(min_value=0.05, max_value=500.0),
        st.floats(min_value=0.0, max_value=1e3),
    )
    def test_complementary(self, a, x):
        p, q = regularized_gamma_pair(a, x)
        assert 0.0 <= p.item() <= 1.0
        assert 0.0 <= q.item() <= 1.0
        assert abs(p.item() + q.item() - 1.0) < 1e-12

    @given(st.floats(min_value=0.05, max_value=500.0))
    def test_monotone_in_x(self, a):
        x = torch.linspace(0.0, 3 * a + 20, 200, dtype=torch.float64)
        p = regularized_gamma_p(a, x)
        assert (p[1:] >= p[:-1] - 1e-12).all()
