# tests/torchrv/root_finding/test__bracket.py
import math

import torch

from torchrv.root_finding import expand_bracket


class TestExpandBracket:
    """Tests for outward bracket expansion."""

    def test_already_bracketed(self):
        lower = torch.tensor([0.0])
        upper = torch.tensor([1.0])
        lo, hi, ok = expand_bracket(lambda x: x, torch.tensor([0.5]), lower, upper)
        assert lo.tolist() == [0.0]
        assert hi.tolist() == [1.0]
        assert ok.all()

    def test_width_doubles_upward(self):
        """One step moves [0, 1] to [1, 3]."""
        lo, hi, ok = expand_bracket(
            lambda x: x, torch.tensor([2.0]), torch.tensor([0.0]), torch.tensor([1.0])
        )
        assert lo.tolist() == [1.0]
        assert hi.tolist() == [3.0]
        assert ok.all()

    def test_expands_downward(self):
        lo, hi, ok = expand_bracket(
            lambda x: x,
            torch.tensor([-50.0]),
            torch.tensor([0.0]),
            torch.tensor([1.0]),
        )
        assert ok.all()
        assert lo.item() <= -50.0 <= hi.item()

    def test_exponential(self):
        lo, hi, ok = expand_bracket(
            torch.exp,
            torch.tensor([100.0], dtype=torch.float64),
            torch.tensor([0.0], dtype=torch.float64),
            torch.tensor([1.0], dtype=torch.float64),
        )
        assert ok.all()
        assert lo.item() <= math.log(100.0) <= hi.item()

    def test_batched_directions(self):
        target = torch.tensor([-1e3, 0.5, 1e3], dtype=torch.float64)
        lo, hi, ok = expand_bracket(
            lambda x: x,
            target,
            torch.zeros(3, dtype=torch.float64),
            torch.ones(3, dtype=torch.float64),
        )
        assert ok.all()
        assert (lo <= target).all()
        assert (hi >= target).all()

    def test_unreachable_target(self):
        """A bounded function never reaches the target."""
        lo, hi, ok = expand_bracket(
            torch.sigmoid,
            torch.tensor([2.0], dtype=torch.float64),
            torch.tensor([0.0], dtype=torch.float64),
            torch.tensor([1.0], dtype=torch.float64),
            maxiter=20,
        )
        assert not ok.any()
