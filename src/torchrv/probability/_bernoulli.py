"""Bernoulli distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_probability, should_validate


def bernoulli_density(
    x: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function of the Bernoulli distribution.

    .. math::
        p(x; \pi) = \begin{cases} 1 - \pi & x = 0 \\ \pi & x = 1 \end{cases}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the mass.
    prob : Tensor or float
        Success probability :math:`\pi \in [0, 1]`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Mass values; zero for ``x`` other than 0 and 1.

    Examples
    --------
    >>> bernoulli_density(torch.tensor([0.0, 1.0, 0.5]), 0.3)
    tensor([0.7000, 0.3000, 0.0000])
    """
    x, prob = promote_tensors(x, prob)
    if should_validate(validate_args):
        check_not_nan("x", x)
        check_probability("prob", prob)
    mass = torch.where(x == 1, prob, 0.0)
    return torch.where(x == 0, 1 - prob, mass)


def bernoulli_probability(
    q: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function: 0 below 0, :math:`1 - \pi` on
    ``[0, 1)``, 1 from 1."""
    q, prob = promote_tensors(q, prob)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_probability("prob", prob)
    value = torch.where(q < 0, 0.0, 1 - prob)
    return torch.where(q >= 1, 1.0, value)


def bernoulli_survival(
    t: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function: 1 below 0, :math:`\pi` on ``[0, 1)``, 0 from 1."""
    t, prob = promote_tensors(t, prob)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_probability("prob", prob)
    value = torch.where(t < 0, 1.0, prob)
    return torch.where(t >= 1, 0.0, value)


def bernoulli_quantile(
    p: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function: 0 for :math:`p \leq 1 - \pi`, otherwise 1."""
    p, prob = promote_tensors(p, prob)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_probability("prob", prob)
    p = torch.clamp(p, 0, 1)
    value = torch.where(p <= 1 - prob, torch.zeros_like(p), torch.ones_like(p))
    value = torch.where(p >= 1, 1.0, value)
    return torch.where(torch.isnan(p), torch.nan, value)
