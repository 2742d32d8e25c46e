"""Outward bracket expansion for monotone functions."""

from typing import Callable

import torch
from torch import Tensor


def expand_bracket(
    f: Callable[[Tensor], Tensor],
    target: Tensor,
    lower: Tensor,
    upper: Tensor,
    *,
    maxiter: int = 2048,
) -> tuple[Tensor, Tensor, Tensor]:
    """
    Grow ``[lower, upper]`` until a nondecreasing ``f`` crosses ``target``.

    Each element whose interval lies entirely above the target moves to
    ``[lower - 2 w, lower]``, and each one entirely below moves to
    ``[upper, upper + 2 w]``, where ``w`` is the current width, so the
    width doubles at every step.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Vectorized nondecreasing function.
    target : Tensor
        Values to bracket.
    lower, upper : Tensor
        Initial interval, ``lower < upper``.
    maxiter : int, default=2048
        Maximum expansion steps.

    Returns
    -------
    tuple[Tensor, Tensor, Tensor]
        - **lower**, **upper** -- Expanded interval.
        - **bracketed** -- Boolean tensor, True where
          ``f(lower) <= target <= f(upper)``.

    Examples
    --------
    >>> lo, hi, ok = expand_bracket(
    ...     torch.exp, torch.tensor([100.0]), torch.tensor([0.0]),
    ...     torch.tensor([1.0])
    ... )
    >>> bool(ok.all()), bool(lo <= 4.61 <= hi)
    (True, True)
    """
    f_lower = f(lower)
    f_upper = f(upper)
    for _ in range(maxiter):
        too_high = f_lower > target
        too_low = f_upper < target
        moving = (too_high | too_low) & torch.isfinite(upper - lower)
        if not bool(moving.any()):
            break
        width = upper - lower
        new_lower = torch.where(
            too_high, lower - 2 * width, torch.where(too_low, upper, lower)
        )
        new_upper = torch.where(
            too_high, lower, torch.where(too_low, upper + 2 * width, upper)
        )
        lower = torch.where(moving, new_lower, lower)
        upper = torch.where(moving, new_upper, upper)
        f_lower = f(lower)
        f_upper = f(upper)

    bracketed = (f_lower <= target) & (f_upper >= target)
    return lower, upper, bracketed
