import math
import warnings

import pytest
import scipy.special
import torch
from hypothesis import given
from hypothesis import strategies as st

from torchrv.special_functions import (
    ConvergenceWarning,
    regularized_beta,
    regularized_beta_pair,
)


class TestRegularizedBetaForward:
    """Compare I_x(a, b) against scipy.special.betainc."""

    @pytest.mark.parametrize(
        "a,b",
        [
            (0.5, 0.5),
            (1.0, 1.0),
            (2.0, 5.0),
            (0.1, 3.0),
            (10.0, 0.7),
            (30.0, 30.0),
            (150.0, 20.0),
            (1.5, 400.0),
        ],
    )
    def test_continued_fraction(self, a, b):
        x = torch.tensor(
            [1e-8, 1e-3, 0.1, 0.25, 0.5, 0.75, 0.9, 0.999],
            dtype=torch.float64,
        )
        value, complement = regularized_beta_pair(x, 1 - x, a, b)
        torch.testing.assert_close(
            value,
            torch.tensor(scipy.special.betainc(a, b, x.numpy())),
            rtol=1e-10,
            atol=1e-15,
        )
        torch.testing.assert_close(
            complement,
            torch.tensor(scipy.special.betaincc(a, b, x.numpy())),
            rtol=1e-10,
            atol=1e-15,
        )

    @pytest.mark.parametrize(
        "a,b", [(100.0, 100.0), (200.0, 1e3), (5e4, 2e4), (1e6, 1e6)]
    )
    def test_large_shapes(self, a, b):
        mean = a / (a + b)
        sd = math.sqrt(a * b / ((a + b) ** 2 * (a + b + 1)))
        x = torch.tensor(
            [mean - 6 * sd, mean - sd, mean, mean + 0.5 * sd, mean + 4 * sd],
            dtype=torch.float64,
        )
        value, complement = regularized_beta_pair(x, 1 - x, a, b)
        torch.testing.assert_close(
            value,
            torch.tensor(scipy.special.betainc(a, b, x.numpy())),
            rtol=1e-9,
            atol=1e-15,
        )
        torch.testing.assert_close(
            complement,
            torch.tensor(scipy.special.betaincc(a, b, x.numpy())),
            rtol=1e-9,
            atol=1e-15,
        )

    def test_exact_complement_argument(self):
        """Supplying y = 1 - x exactly preserves tiny upper tails."""
        y = torch.tensor(1e-20, dtype=torch.float64)
        x = 1 - y
        value, complement = regularized_beta_pair(x, y, 2.0, 3.0)
        assert value.item() == 1.0
        # 1 - I_{1-y}(2, 3) = I_y(3, 2) ~ 4 y^3
        torch.testing.assert_close(
            complement,
            torch.tensor(4e-60, dtype=torch.float64),
            rtol=1e-6,
            atol=0.0,
        )

    def test_uniform_case(self):
        x = torch.linspace(0.0, 1.0, 11, dtype=torch.float64)
        torch.testing.assert_close(
            regularized_beta(x, 1.0, 1.0), x, rtol=1e-13, atol=1e-15
        )

    def test_doc_example(self):
        torch.testing.assert_close(
            regularized_beta(0.5, 2.0, 2.0),
            torch.tensor(0.5, dtype=torch.float64),
        )


class TestRegularizedBetaLimits:
    def test_endpoints(self):
        value, complement = regularized_beta_pair(
            torch.tensor([0.0, 1.0], dtype=torch.float64),
            torch.tensor([1.0, 0.0], dtype=torch.float64),
            3.0,
            4.0,
        )
        torch.testing.assert_close(
            value, torch.tensor([0.0, 1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            complement, torch.tensor([1.0, 0.0], dtype=torch.float64)
        )

    @pytest.mark.parametrize(
        "x,a,b",
        [
            (math.nan, 1.0, 1.0),
            (0.5, math.nan, 1.0),
            (0.5, 0.0, 1.0),
            (0.5, 1.0, -2.0),
            (0.5, math.inf, 1.0),
        ],
    )
    def test_invalid_gives_nan(self, x, a, b):
        value, complement = regularized_beta_pair(x, 1 - x, a, b)
        assert torch.isnan(value)
        assert torch.isnan(complement)


class TestRegularizedBetaProperties:
    @given(
        st.floats(min_value=0.0, max_value=1.0),
        st.floats(min_value=0.05, max_value=300.0),
        st.floats(min_value=0.05, max_value=300.0),
    )
    def test_reflection(self, x, a, b):
        """I_x(a, b) = 1 - I_{1-x}(b, a)."""
        value, complement = regularized_beta_pair(x, 1 - x, a, b)
        mirror, _ = regularized_beta_pair(1 - x, x, b, a)
        assert 0.0 <= value.item() <= 1.0
        assert abs(value.item() + complement.item() - 1.0) < 1e-12
        assert abs(complement.item() - mirror.item()) < 1e-9

    def test_no_warning_on_ordinary_inputs(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            regularized_beta(
                torch.tensor([0.01, 0.3, 0.5, 0.97], dtype=torch.float64),
                torch.tensor([0.5, 4.0, 90.0, 120.0], dtype=torch.float64),
                torch.tensor([0.5, 2.0, 95.0, 3.0], dtype=torch.float64),
            )
