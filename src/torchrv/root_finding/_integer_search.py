"""Smallest integer at which a monotone function reaches a target."""

from typing import Callable

import torch
from torch import Tensor


def integer_search(
    f: Callable[[Tensor], Tensor],
    target: Tensor,
    lower: Tensor,
    upper: Tensor,
    guess: Tensor,
    *,
    maxiter: int = 2048,
) -> tuple[Tensor, Tensor]:
    """
    Find the smallest integer ``k`` in ``[lower, upper]`` with
    ``f(k) >= target``.

    Starting from ``guess``, a step that doubles on every move walks
    down (while the target is still reached) or up (until it is) to
    enclose the answer between two integers, and binary search closes
    the gap. The integer ``lower - 1`` is treated as below the target
    and ``upper`` as reaching it, so the answer always lies in
    ``[lower, upper]`` even when rounding keeps ``f`` short of the
    target.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Vectorized nondecreasing function of integer-valued floats.
    target : Tensor
        Values to reach.
    lower, upper : Tensor
        Integer bounds of the search; ``upper`` may be ``inf``.
    guess : Tensor
        Starting point, rounded and clamped into ``[lower, upper]``.
    maxiter : int, default=2048
        Maximum iterations of each of the two phases.

    Returns
    -------
    tuple[Tensor, Tensor]
        - **k** -- The smallest integer with ``f(k) >= target``.
        - **converged** -- Boolean tensor, True where both phases
          completed.

    Examples
    --------
    >>> k, _ = integer_search(
    ...     lambda k: k**2, torch.tensor([10.0]), torch.tensor([0.0]),
    ...     torch.tensor([100.0]), torch.tensor([50.0])
    ... )
    >>> k
    tensor([4.])
    """
    start = torch.round(guess)
    start = torch.where(torch.isfinite(start), start, lower)
    start = torch.minimum(torch.maximum(start, lower), upper)

    # f(lo) < target or lo == lower - 1; f(hi) >= target or hi == upper
    reached = f(start) >= target
    lo = torch.where(reached, lower - 1, start)
    hi = torch.where(reached, start, upper)
    walking = torch.ones_like(reached)
    step = torch.ones_like(start)

    for _ in range(maxiter):
        if not bool(walking.any()):
            break
        candidate = torch.where(
            reached,
            torch.maximum(hi - step, lower - 1),
            torch.minimum(lo + step, upper),
        )
        f_candidate = f(torch.clamp(candidate, min=lower))
        hit = (f_candidate >= target) | (candidate >= upper)
        hit = hit & (candidate >= lower)

        keep_walking = torch.where(reached, hit, ~hit)
        hi = torch.where(walking & hit, candidate, hi)
        lo = torch.where(walking & ~hit, candidate, lo)
        walking = walking & keep_walking
        step = step * 2

    for _ in range(maxiter):
        mid = torch.floor((lo + hi) / 2)
        splittable = (mid > lo) & (mid < hi)
        if not bool(splittable.any()):
            break
        f_mid = f(torch.where(splittable, mid, hi))
        upper_half = splittable & (f_mid >= target)
        hi = torch.where(upper_half, mid, hi)
        lo = torch.where(splittable & ~upper_half, mid, lo)

    mid = torch.floor((lo + hi) / 2)
    converged = ~walking & ~((mid > lo) & (mid < hi))
    return hi, converged
