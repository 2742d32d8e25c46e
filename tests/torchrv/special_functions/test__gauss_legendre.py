import pytest
import torch
from numpy.polynomial.legendre import leggauss

from torchrv.special_functions import (
    gauss_legendre_nodes_weights,
    unit_interval_rule,
)


class TestGaussLegendreNodesWeights:
    @pytest.mark.parametrize("n", [2, 5, 10, 32, 48])
    def test_matches_numpy(self, n):
        """Compare with numpy's Gauss-Legendre implementation"""
        nodes, weights = gauss_legendre_nodes_weights(n, dtype=torch.float64)
        np_nodes, np_weights = leggauss(n)

        assert torch.allclose(nodes, torch.tensor(np_nodes), rtol=1e-12)
        assert torch.allclose(weights, torch.tensor(np_weights), rtol=1e-12)

    def test_exact_for_polynomial(self):
        """Integrates x^8 exactly with five points"""
        nodes, weights = gauss_legendre_nodes_weights(5, dtype=torch.float64)
        result = (nodes**8 * weights).sum()
        assert torch.allclose(
            result, torch.tensor(2 / 9, dtype=torch.float64), rtol=1e-10
        )

    def test_n_equals_1(self):
        nodes, weights = gauss_legendre_nodes_weights(1)
        assert nodes.tolist() == [0.0]
        assert weights.tolist() == [2.0]

    def test_invalid_n(self):
        with pytest.raises(ValueError):
            gauss_legendre_nodes_weights(0)


class TestUnitIntervalRule:
    def test_maps_onto_unit_interval(self):
        nodes, weights = unit_interval_rule(torch.float64, torch.device("cpu"))
        assert nodes.shape == (48,)
        assert (nodes > 0).all() and (nodes < 1).all()
        torch.testing.assert_close(
            weights.sum(), torch.tensor(1.0, dtype=torch.float64)
        )

    def test_dtype_conversion(self):
        nodes, weights = unit_interval_rule(torch.float32, torch.device("cpu"))
        assert nodes.dtype == torch.float32
        assert weights.dtype == torch.float32

    def test_integrates_gaussian_window(self):
        nodes, weights = unit_interval_rule(torch.float64, torch.device("cpu"))
        t = 8 * nodes
        result = 8 * (torch.exp(-t * t / 2) * weights).sum()
        expected = torch.tensor((torch.pi / 2) ** 0.5, dtype=torch.float64)
        torch.testing.assert_close(result, expected, rtol=1e-12, atol=0.0)
