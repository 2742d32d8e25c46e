"""Discrete uniform distribution on a run of integers."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import (
    check_integer,
    check_not_nan,
    check_ordered,
    should_validate,
)


def _check(min: Tensor, max: Tensor) -> None:
    check_integer("min", min)
    check_integer("max", max)
    check_ordered("min", min, "max", max)


def _probability(k: Tensor, min: Tensor, max: Tensor) -> Tensor:
    return (k - min + 1) / (max - min + 1)


def discrete_uniform_density(
    x: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability mass function of the discrete uniform distribution.

    .. math::
        p(x; a, b) = \frac{1}{b - a + 1}, \quad x \in \{a, \dots, b\}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the mass.
    min, max : Tensor or int
        Integer endpoints :math:`a \leq b`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Mass values.
    """
    x, min, max = promote_tensors(x, min, max)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(min, max)
    inside = (x >= min) & (x <= max) & (x == torch.floor(x))
    return torch.where(inside, 1 / (max - min + 1), 0.0)


def discrete_uniform_probability(
    q: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function
    :math:`(\lfloor q \rfloor - a + 1) / (b - a + 1)`."""
    q, min, max = promote_tensors(q, min, max)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(min, max)
    k = torch.floor(q)
    value = torch.where(k < min, 0.0, _probability(k, min, max))
    return torch.where(k >= max, 1.0, value)


def discrete_uniform_survival(
    t: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`(b - \lfloor t \rfloor) / (b - a + 1)`."""
    t, min, max = promote_tensors(t, min, max)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(min, max)
    k = torch.floor(t)
    value = torch.where(k < min, 1.0, (max - k) / (max - min + 1))
    return torch.where(k >= max, 0.0, value)


def discrete_uniform_quantile(
    p: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\lceil p (b - a + 1) \rceil + a - 1`,
    corrected by one lattice step where rounding misplaces it."""
    p, min, max = promote_tensors(p, min, max)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(min, max)
    p = torch.clamp(p, 0, 1)
    k = torch.ceil(p * (max - min + 1)) + min - 1
    k = torch.clamp(k, min, max)
    k = torch.where((k > min) & (_probability(k - 1, min, max) >= p), k - 1, k)
    k = torch.where((k < max) & (_probability(k, min, max) < p), k + 1, k)
    k = torch.where(p <= 0, min, k)
    k = torch.where(p >= 1, max, k)
    return torch.where(torch.isnan(p), torch.nan, k)
