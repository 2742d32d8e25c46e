"""Chunked summation of a probability mass over a run of integers."""

import warnings
from typing import Callable

import torch
from torch import Tensor

from ..special_functions import ConvergenceWarning

_CHUNK = 1024
_MAX_TERMS = 2**24


def lattice_sum(
    log_mass: Callable[[Tensor], Tensor],
    first: Tensor,
    last: Tensor,
    *,
    early_stop: bool = False,
) -> Tensor:
    r"""Sum ``exp(log_mass(k))`` for integers ``k`` from ``first`` to ``last``.

    Terms are taken in order starting at ``first``, so ``last < first``
    sums downward and ``last = inf`` sums an infinite tail. ``log_mass``
    receives ``k`` with one extra trailing dimension (the chunk of
    consecutive integers being summed) and must broadcast its parameters
    against it.

    Parameters
    ----------
    log_mass : Callable[[Tensor], Tensor]
        Log probability mass.
    first, last : Tensor
        Inclusive integer endpoints. Elements with ``first`` beyond
        ``last`` in the summing direction do not exist; use ``nan`` for
        an empty sum.
    early_stop : bool, default=False
        Stop an element once a whole chunk adds at most machine epsilon
        relative to its running total. Only valid when the terms
        decrease away from ``first``.

    Returns
    -------
    Tensor
        The sum, zero for empty ranges.

    Warns
    -----
    ConvergenceWarning
        If an element still had terms left after :data:`_MAX_TERMS`.
    """
    direction = torch.where(
        last >= first, torch.ones_like(first), -torch.ones_like(first)
    )
    count = (last - first).abs() + 1
    count = torch.where(torch.isnan(count), 0.0, count)
    eps = torch.finfo(first.dtype).eps

    offsets = torch.arange(_CHUNK, dtype=first.dtype, device=first.device)
    total = torch.zeros_like(first)
    active = count > 0
    summed = 0
    while summed < _MAX_TERMS and bool(active.any()):
        index = summed + offsets
        inside = (index < count.unsqueeze(-1)) & active.unsqueeze(-1)
        k = first.unsqueeze(-1) + direction.unsqueeze(-1) * index
        k = torch.where(inside, k, first.unsqueeze(-1))
        terms = torch.where(inside, torch.exp(log_mass(k)), 0.0)
        chunk = terms.sum(-1)
        total = total + chunk
        summed += _CHUNK
        active = active & (count > summed)
        if early_stop:
            active = active & ~(chunk <= eps * total)

    if bool(active.any()):
        warnings.warn(
            f"lattice sum truncated after {_MAX_TERMS} terms for "
            f"{int(active.sum())} element(s)",
            ConvergenceWarning,
            stacklevel=3,
        )
    return total
