# tests/torchrv/root_finding/test__convergence.py
import torch

from torchrv.root_finding._convergence import (
    check_convergence,
    default_tolerances,
)


class TestDefaultTolerances:
    """Tests for dtype-aware default tolerances."""

    def test_float64_tolerances(self):
        """float64 has tightest tolerances."""
        tols = default_tolerances(torch.float64)
        assert tols["xtol"] == 1e-14
        assert tols["rtol"] == 1e-13

    def test_float32_tolerances(self):
        """float32 has medium tolerances."""
        tols = default_tolerances(torch.float32)
        assert tols["xtol"] == 1e-6
        assert tols["rtol"] == 1e-5

    def test_float16_tolerances(self):
        """float16 has loose tolerances."""
        tols = default_tolerances(torch.float16)
        assert tols["xtol"] == 1e-3
        assert tols["rtol"] == 1e-2

    def test_bfloat16_tolerances(self):
        """bfloat16 has loose tolerances."""
        tols = default_tolerances(torch.bfloat16)
        assert tols["xtol"] == 1e-3
        assert tols["rtol"] == 1e-2


class TestCheckConvergence:
    """Tests for convergence checking."""

    def test_converged_by_xtol(self):
        """Converged when x change is small."""
        x_old = torch.tensor([1.0, 2.0, 3.0])
        x_new = torch.tensor([1.0 + 1e-8, 2.0, 3.0 + 1e-8])

        converged = check_convergence(x_old, x_new, xtol=1e-6, rtol=0.0)

        assert converged.tolist() == [True, True, True]

    def test_converged_by_rtol(self):
        """Converged when relative x change is small."""
        x_old = torch.tensor([1e6, 1.0], dtype=torch.float64)
        x_new = torch.tensor([1e6 + 1.0, 2.0], dtype=torch.float64)

        converged = check_convergence(x_old, x_new, xtol=0.0, rtol=1e-5)

        assert converged.tolist() == [True, False]
