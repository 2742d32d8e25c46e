import math
import warnings

import numpy as np
import pytest
import scipy.stats
import torch

import torchrv.probability as probability
from torchrv.probability import DomainError


class TestWorkedValues:
    def test_bernoulli_density(self):
        assert probability.bernoulli_density(1, 0.3).item() == 0.3
        assert probability.bernoulli_density(0, 0.3).item() == pytest.approx(
            0.7, rel=1e-15
        )

    def test_exponential_probability(self):
        torch.testing.assert_close(
            probability.exponential_probability(1.0, 2.0),
            torch.tensor(1 - math.exp(-0.5), dtype=torch.float64),
            rtol=1e-14,
            atol=0.0,
        )

    def test_uniform_quantile(self):
        assert probability.uniform_quantile(0.25, 0.0, 4.0).item() == 1.0

    def test_binomial_density(self):
        torch.testing.assert_close(
            probability.binomial_density(2, 4, 0.5),
            torch.tensor(0.375, dtype=torch.float64),
            rtol=1e-14,
            atol=0.0,
        )

    def test_normal_center(self):
        assert probability.normal_quantile(0.5, 5.0, 2.0).item() == 5.0
        assert probability.normal_probability(5.0, 5.0, 2.0).item() == 0.5

    def test_geometric_quantile(self):
        assert probability.geometric_quantile(0.75, 0.5).item() == 2.0


class TestContinuousBernoulli:
    @pytest.mark.parametrize("shape", [0.2, 0.8, 0.95])
    def test_matches_torch_distributions(self, shape):
        reference = torch.distributions.ContinuousBernoulli(
            probs=torch.tensor(shape, dtype=torch.float64)
        )
        x = torch.linspace(0.05, 0.95, 19, dtype=torch.float64)
        torch.testing.assert_close(
            probability.continuous_bernoulli_density(x, shape),
            reference.log_prob(x).exp(),
            rtol=1e-9,
            atol=0.0,
        )
        torch.testing.assert_close(
            probability.continuous_bernoulli_probability(x, shape),
            reference.cdf(x),
            rtol=1e-9,
            atol=1e-15,
        )
        torch.testing.assert_close(
            probability.continuous_bernoulli_quantile(x, shape),
            reference.icdf(x),
            rtol=1e-9,
            atol=1e-15,
        )

    def test_half_is_uniform(self):
        x = torch.tensor([0.0, 0.3, 1.0], dtype=torch.float64)
        assert probability.continuous_bernoulli_density(x, 0.5).tolist() == [
            1.0,
            1.0,
            1.0,
        ]
        assert probability.continuous_bernoulli_quantile(x, 0.5).tolist() == (
            x.tolist()
        )

    @pytest.mark.parametrize("shape", [1e-6, 0.3, 1 - 1e-6])
    def test_integrates_to_one(self, shape):
        x = torch.linspace(0.0, 1.0, 200001, dtype=torch.float64)
        density = probability.continuous_bernoulli_density(x, shape)
        assert torch.isfinite(density).all()
        total = torch.trapezoid(density, x)
        assert total.item() == pytest.approx(1.0, abs=1e-6)

    def test_survival_complements_probability(self):
        t = torch.linspace(-0.5, 1.5, 41, dtype=torch.float64)
        total = probability.continuous_bernoulli_probability(
            t, 0.9
        ) + probability.continuous_bernoulli_survival(t, 0.9)
        torch.testing.assert_close(total, torch.ones_like(t))

    def test_shape_domain(self):
        with pytest.raises(DomainError, match="shape"):
            probability.continuous_bernoulli_density(0.5, 1.0)


class TestBenford:
    def test_mass(self):
        digits = torch.arange(1, 10, dtype=torch.float64)
        torch.testing.assert_close(
            probability.benford_density(digits, 10),
            torch.log10(1 + 1 / digits),
        )
        assert probability.benford_density(digits, 10).sum().item() == (
            pytest.approx(1.0, rel=1e-14)
        )

    def test_off_support(self):
        x = torch.tensor([0.0, 2.5, 10.0, -1.0], dtype=torch.float64)
        assert (probability.benford_density(x, 10) == 0).all()

    def test_probability(self):
        q = torch.tensor([0.5, 1.0, 3.7, 9.0, 20.0], dtype=torch.float64)
        torch.testing.assert_close(
            probability.benford_probability(q, 10),
            torch.tensor(
                [0.0, math.log10(2), math.log10(4), 1.0, 1.0],
                dtype=torch.float64,
            ),
        )
        torch.testing.assert_close(
            probability.benford_survival(q, 10),
            torch.tensor(
                [1.0, 1 - math.log10(2), 1 - math.log10(4), 0.0, 0.0],
                dtype=torch.float64,
            ),
        )

    def test_quantile_at_cdf_values(self):
        """The CDF at each digit maps back to that digit."""
        digits = torch.arange(1, 10, dtype=torch.float64)
        levels = probability.benford_probability(digits, 10)
        assert probability.benford_quantile(levels, 10).tolist() == (
            digits.tolist()
        )
        bumped = torch.nextafter(levels[:-1], torch.ones_like(levels[:-1]))
        assert probability.benford_quantile(bumped, 10).tolist() == (
            (digits[:-1] + 1).tolist()
        )

    def test_binary_base(self):
        assert probability.benford_density(1, 2).item() == pytest.approx(1.0)
        assert probability.benford_quantile(0.5, 2).item() == 1.0


class TestLogarithmicTail:
    """Survival far beyond the mean keeps its relative precision."""

    @staticmethod
    def _tail(prob, k):
        support = np.arange(k + 1, k + 2000)
        return scipy.stats.logser(prob).pmf(support).sum()

    @pytest.mark.parametrize("prob,k", [(0.6, 3), (0.6, 40), (0.6, 100)])
    def test_survival(self, prob, k):
        torch.testing.assert_close(
            probability.logarithmic_survival(float(k), prob),
            torch.tensor(self._tail(prob, k), dtype=torch.float64),
            rtol=1e-9,
            atol=0.0,
        )

    def test_probability_near_one(self):
        value = probability.logarithmic_probability(100.0, 0.6)
        assert value.item() == 1.0

    def test_quantile_far_tail(self):
        p = torch.tensor(1 - 1e-12, dtype=torch.float64)
        k = probability.logarithmic_quantile(p, 0.9)
        assert probability.logarithmic_probability(k, 0.9) >= p
        assert probability.logarithmic_survival(k - 1, 0.9) > 1e-12


class TestLogarithmicNearOne:
    """Parameters close to one, where the tail spans millions of terms."""

    PROB = 0.9999999

    def test_survival(self):
        torch.testing.assert_close(
            probability.logarithmic_survival(1e6, self.PROB),
            torch.tensor(0.113098, dtype=torch.float64),
            rtol=1e-5,
            atol=0.0,
        )

    def test_survival_differences_match_masses(self):
        """S(k) - S(k + m) is the mass of k + 1, ..., k + m."""
        k, m = 1e6, 200_000
        masses = scipy.stats.logser(self.PROB).pmf(np.arange(k + 1, k + m + 1))
        survival = probability.logarithmic_survival(
            torch.tensor([k, k + m], dtype=torch.float64), self.PROB
        )
        torch.testing.assert_close(
            survival[0] - survival[1],
            torch.tensor(math.fsum(masses), dtype=torch.float64),
            rtol=1e-9,
            atol=0.0,
        )

    def test_quantile(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            k = probability.logarithmic_quantile(0.999999, self.PROB)
        assert k.item() == 87656687.0

    def test_probability_is_cumulative_density(self):
        """Agrees with the running sum across the switch to the integral."""
        prob = 0.9999
        k = torch.arange(1.0, 3001.0, dtype=torch.float64)
        expected = np.cumsum(scipy.stats.logser(prob).pmf(k.numpy()))
        torch.testing.assert_close(
            probability.logarithmic_probability(k, prob),
            torch.tensor(expected, dtype=torch.float64),
            rtol=1e-10,
            atol=0.0,
        )


class TestSupportBoundaries:
    @pytest.mark.parametrize(
        "name,params,lower,upper",
        [
            ("beta", (2.0, 3.0), 0.0, 1.0),
            ("gamma", (2.0, 1.0), 0.0, math.inf),
            ("normal", (0.0, 1.0), -math.inf, math.inf),
            ("uniform", (-1.0, 2.0), -1.0, 2.0),
            ("pareto", (3.0, 2.0), 2.0, math.inf),
            ("binomial", (10, 0.3), 0.0, 10.0),
            ("poisson", (2.0,), 0.0, math.inf),
            ("hypergeometric", (20, 15, 10), 5.0, 10.0),
            ("logarithmic", (0.4,), 1.0, math.inf),
            ("discrete_uniform", (-3, 4), -3.0, 4.0),
        ],
    )
    def test_quantile_endpoints(self, name, params, lower, upper):
        quantile = getattr(probability, f"{name}_quantile")
        p = torch.tensor([0.0, 1.0], dtype=torch.float64)
        assert quantile(p, *params).tolist() == [lower, upper]

    @pytest.mark.parametrize(
        "name,params,below,above",
        [
            ("beta", (2.0, 3.0), -0.1, 1.0),
            ("gamma", (2.0, 1.0), 0.0, math.inf),
            ("weibull", (1.5, 1.0), 0.0, math.inf),
            ("uniform", (-1.0, 2.0), -1.0, 2.0),
            ("binomial", (10, 0.3), -1.0, 10.0),
            ("poisson", (2.0,), -0.5, math.inf),
            ("hypergeometric", (20, 15, 10), 4.0, 10.0),
            ("beta_binomial", (8, 2.0, 3.0), -1.0, 8.0),
        ],
    )
    def test_probability_is_exact(self, name, params, below, above):
        cdf = getattr(probability, f"{name}_probability")
        sf = getattr(probability, f"{name}_survival")
        assert cdf(below, *params).item() == 0.0
        assert sf(below, *params).item() == 1.0
        assert cdf(above, *params).item() == 1.0
        assert sf(above, *params).item() == 0.0


class TestUnchecked:
    def test_nan_probability_passes_through(self):
        p = torch.tensor([0.25, math.nan], dtype=torch.float64)
        for result in (
            probability.normal_quantile(p, 0.0, 1.0, validate_args=False),
            probability.gamma_quantile(p, 2.0, 1.0, validate_args=False),
            probability.poisson_quantile(p, 3.0, validate_args=False),
            probability.bernoulli_quantile(p, 0.4, validate_args=False),
        ):
            assert not torch.isnan(result[0])
            assert torch.isnan(result[1])

    def test_checked_call_rejects_nan(self):
        with pytest.raises(DomainError, match="p must be a number"):
            probability.gamma_quantile(math.nan, 2.0, 1.0, validate_args=True)


class TestDtypesAndShapes:
    def test_float32_in_float32_out(self):
        x = torch.tensor([0.5, 1.0, 4.0], dtype=torch.float32)
        result = probability.gamma_probability(x, 2.0, 1.5)
        assert result.dtype == torch.float32
        expected = scipy.stats.gamma(2.0, scale=1.5).cdf(x.double().numpy())
        torch.testing.assert_close(
            result,
            torch.tensor(expected, dtype=torch.float32),
            rtol=1e-5,
            atol=1e-6,
        )

    def test_half_precision_promotes(self):
        x = torch.tensor([0.5, 1.0], dtype=torch.float16)
        assert probability.normal_density(x).dtype == torch.float32

    def test_integer_tensor_computes_in_float64(self):
        k = torch.tensor([0, 1, 2])
        assert probability.poisson_density(k, 1.0).dtype == torch.float64

    def test_broadcasting(self):
        x = torch.linspace(0.1, 3.0, 5, dtype=torch.float64)
        shape = torch.tensor([[0.5], [1.0], [4.0]], dtype=torch.float64)
        result = probability.gamma_survival(x, shape, 1.0)
        assert result.shape == (3, 5)
        for i in range(3):
            torch.testing.assert_close(
                result[i],
                probability.gamma_survival(x, shape[i, 0].item(), 1.0),
            )

    def test_discrete_quantile_broadcasts_parameters(self):
        p = torch.tensor([0.1, 0.5, 0.9], dtype=torch.float64)
        size = torch.tensor([[5.0], [50.0]], dtype=torch.float64)
        result = probability.binomial_quantile(p, size, 0.4)
        assert result.shape == (2, 3)
        expected = scipy.stats.binom(size.numpy(), 0.4).ppf(p.numpy())
        assert result.tolist() == expected.tolist()
