# tests/torchrv/root_finding/test__bisection.py
import math

import pytest
import torch

from torchrv.root_finding import BracketError, newton_bisection


class TestNewtonBisection:
    """Tests for the safeguarded Newton iteration."""

    def test_cube_root_with_derivative(self):
        """Solve x^3 = 8 with Newton steps."""
        root, converged = newton_bisection(
            lambda x: x**3,
            torch.tensor([8.0], dtype=torch.float64),
            torch.tensor([0.0], dtype=torch.float64),
            torch.tensor([5.0], dtype=torch.float64),
            derivative=lambda x: 3 * x**2,
        )
        torch.testing.assert_close(
            root, torch.tensor([2.0], dtype=torch.float64), rtol=1e-12, atol=0.0
        )
        assert converged.all()

    def test_pure_bisection(self):
        """Without a derivative the bracket is halved until it is tiny."""
        root, converged = newton_bisection(
            torch.tanh,
            torch.tensor([0.3], dtype=torch.float64),
            torch.tensor([-2.0], dtype=torch.float64),
            torch.tensor([2.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            root,
            torch.tensor([math.atanh(0.3)], dtype=torch.float64),
            rtol=1e-12,
            atol=1e-13,
        )
        assert converged.all()

    def test_batched(self):
        """Solve several targets in parallel."""
        target = torch.tensor([0.1, 1.0, 10.0, 100.0], dtype=torch.float64)
        root, converged = newton_bisection(
            torch.exp,
            target,
            torch.full((4,), -10.0, dtype=torch.float64),
            torch.full((4,), 10.0, dtype=torch.float64),
            derivative=torch.exp,
        )
        torch.testing.assert_close(root, torch.log(target), rtol=1e-12, atol=1e-13)
        assert converged.all()

    def test_preserves_shape(self):
        """2D input preserves shape in output."""
        root, converged = newton_bisection(
            lambda x: x,
            torch.full((2, 3), 0.25),
            torch.zeros(2, 3),
            torch.ones(2, 3),
        )
        assert root.shape == (2, 3)
        assert converged.shape == (2, 3)
        torch.testing.assert_close(root, torch.full((2, 3), 0.25))

    def test_overshooting_newton_is_rejected(self):
        """atan's Newton steps leave the bracket far from the root."""
        target = torch.tensor([math.atan(10.0)], dtype=torch.float64)
        root, converged = newton_bisection(
            torch.atan,
            target,
            torch.tensor([-50.0], dtype=torch.float64),
            torch.tensor([50.0], dtype=torch.float64),
            derivative=lambda x: 1 / (1 + x**2),
            guess=torch.tensor([-40.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            root, torch.tensor([10.0], dtype=torch.float64), rtol=1e-12, atol=0.0
        )
        assert converged.all()

    def test_zero_slope_falls_back_to_bisection(self):
        root, converged = newton_bisection(
            lambda x: x,
            torch.tensor([0.7], dtype=torch.float64),
            torch.tensor([0.0], dtype=torch.float64),
            torch.tensor([1.0], dtype=torch.float64),
            derivative=torch.zeros_like,
        )
        torch.testing.assert_close(
            root, torch.tensor([0.7], dtype=torch.float64), rtol=0.0, atol=1e-13
        )
        assert converged.all()

    def test_exact_residual_converges(self):
        """A flat stretch equal to the target stops the iteration at once."""
        root, converged = newton_bisection(
            lambda x: torch.clamp(x, 0.0, 1.0),
            torch.tensor([1.0], dtype=torch.float64),
            torch.tensor([0.0], dtype=torch.float64),
            torch.tensor([4.0], dtype=torch.float64),
        )
        assert root.item() >= 1.0
        assert converged.all()

    def test_maxiter_reports_non_convergence(self):
        root, converged = newton_bisection(
            lambda x: x,
            torch.tensor([0.3], dtype=torch.float64),
            torch.tensor([0.0], dtype=torch.float64),
            torch.tensor([1.0], dtype=torch.float64),
            maxiter=1,
        )
        assert root.shape == (1,)
        assert not converged.any()

    def test_float32_default_tolerances(self):
        root, converged = newton_bisection(
            lambda x: x**2,
            torch.tensor([2.0]),
            torch.tensor([0.0]),
            torch.tensor([2.0]),
            derivative=lambda x: 2 * x,
        )
        assert root.dtype == torch.float32
        torch.testing.assert_close(
            root, torch.tensor([math.sqrt(2)]), rtol=1e-4, atol=1e-5
        )
        assert converged.all()


class TestNewtonBisectionErrors:
    def test_reversed_bracket(self):
        with pytest.raises(BracketError, match="lower must not exceed"):
            newton_bisection(
                lambda x: x,
                torch.tensor([0.5]),
                torch.tensor([1.0]),
                torch.tensor([0.0]),
            )

    def test_target_outside_bracket(self):
        with pytest.raises(BracketError, match="1 of 2"):
            newton_bisection(
                lambda x: x,
                torch.tensor([0.5, 3.0]),
                torch.tensor([0.0, 0.0]),
                torch.tensor([1.0, 1.0]),
            )
