# tests/torchrv/root_finding/test__integer_search.py
import math

import torch

from torchrv.root_finding import integer_search


def _tensor(*values):
    return torch.tensor(values, dtype=torch.float64)


class TestIntegerSearch:
    """Tests for the smallest integer reaching a target."""

    def test_walk_down(self):
        k, converged = integer_search(
            lambda k: k**2, _tensor(10.0), _tensor(0.0), _tensor(100.0), _tensor(50.0)
        )
        assert k.tolist() == [4.0]
        assert converged.all()

    def test_walk_up(self):
        k, converged = integer_search(
            lambda k: k**2, _tensor(10.0), _tensor(0.0), _tensor(100.0), _tensor(0.0)
        )
        assert k.tolist() == [4.0]
        assert converged.all()

    def test_exact_hit_is_smallest(self):
        """floor(k / 3) first reaches 2 at k = 6."""
        k, _ = integer_search(
            lambda k: torch.floor(k / 3),
            _tensor(2.0, 2.0, 2.0),
            _tensor(0.0, 0.0, 0.0),
            _tensor(30.0, 30.0, 30.0),
            _tensor(0.0, 6.0, 29.0),
        )
        assert k.tolist() == [6.0, 6.0, 6.0]

    def test_unbounded_upper(self):
        k, converged = integer_search(
            lambda k: k, _tensor(1e6), _tensor(0.0), _tensor(math.inf), _tensor(0.0)
        )
        assert k.tolist() == [1e6]
        assert converged.all()

    def test_target_below_lower(self):
        k, _ = integer_search(
            lambda k: k, _tensor(-5.0), _tensor(0.0), _tensor(10.0), _tensor(7.0)
        )
        assert k.tolist() == [0.0]

    def test_unreached_target_returns_upper(self):
        k, converged = integer_search(
            lambda k: torch.clamp(k, max=10.0),
            _tensor(20.0),
            _tensor(0.0),
            _tensor(50.0),
            _tensor(5.0),
        )
        assert k.tolist() == [50.0]
        assert converged.all()

    def test_non_finite_guess(self):
        k, _ = integer_search(
            lambda k: k, _tensor(3.0), _tensor(0.0), _tensor(10.0), _tensor(math.nan)
        )
        assert k.tolist() == [3.0]

    def test_maxiter_reports_non_convergence(self):
        _, converged = integer_search(
            lambda k: k,
            _tensor(1e9),
            _tensor(0.0),
            _tensor(math.inf),
            _tensor(0.0),
            maxiter=3,
        )
        assert not converged.any()
