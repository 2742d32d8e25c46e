"""Negative binomial distribution (failures before the n-th success)."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import log_binomial_coefficient, regularized_beta_pair
from ._quantile import discrete_quantile
from ._validation import (
    check_integer,
    check_not_nan,
    check_probability,
    should_validate,
)


def _check(size: Tensor, prob: Tensor) -> None:
    check_integer("size", size, minimum=1)
    check_probability("prob", prob, open_lower=True)


def _pair(q: Tensor, size: Tensor, prob: Tensor) -> tuple[Tensor, Tensor]:
    # F(k) = I_p(n, k + 1)
    k = torch.floor(q)
    below = k < 0
    above = torch.isposinf(k)
    ks = torch.where(below | above, 0.0, k)
    value, complement = regularized_beta_pair(prob, 1 - prob, size, ks + 1)
    value = torch.where(below, 0.0, torch.where(above, 1.0, value))
    complement = torch.where(below, 1.0, torch.where(above, 0.0, complement))
    return value, complement


def negative_binomial_log_density(
    x: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability mass function of the negative binomial distribution.

    .. math::
        \log p(x; n, \pi) = \log\binom{x + n - 1}{x} + n \log\pi
        + x \log(1 - \pi)

    Parameters
    ----------
    x : Tensor or float
        Number of failures.
    size : Tensor or int
        Number of successes :math:`n \geq 1`.
    prob : Tensor or float
        Success probability :math:`\pi \in (0, 1]`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log mass values.
    """
    x, size, prob = promote_tensors(x, size, prob)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(size, prob)
    on_lattice = (x >= 0) & (x == torch.floor(x)) & torch.isfinite(x)
    xs = torch.where(on_lattice, x, 0.0)
    log_mass = (
        log_binomial_coefficient(xs + size - 1, xs)
        + size * torch.log(prob)
        + torch.special.xlog1py(xs, -prob)
    )
    return torch.where(on_lattice, log_mass, -torch.inf)


def negative_binomial_density(
    x: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function
    :math:`\binom{x + n - 1}{x} \pi^n (1 - \pi)^x`."""
    return torch.exp(
        negative_binomial_log_density(
            x, size, prob, validate_args=validate_args
        )
    )


def negative_binomial_probability(
    q: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function
    :math:`I_\pi(n, \lfloor q \rfloor + 1)`."""
    q, size, prob = promote_tensors(q, size, prob)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(size, prob)
    return _pair(q, size, prob)[0]


def negative_binomial_survival(
    t: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`I_{1 - \pi}(\lfloor t \rfloor + 1, n)`."""
    t, size, prob = promote_tensors(t, size, prob)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(size, prob)
    return _pair(t, size, prob)[1]


def negative_binomial_quantile(
    p: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function: the smallest ``k`` with :math:`F(k) \geq p`."""
    p, size, prob = promote_tensors(p, size, prob)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(size, prob)
    mean = size * (1 - prob) / prob
    sd = torch.sqrt(mean / prob)
    guess = mean + sd * torch.special.ndtri(torch.clamp(p, 0, 1))
    return discrete_quantile(
        p,
        lambda k: _pair(k, size, prob)[0],
        lambda k: _pair(k, size, prob)[1],
        torch.zeros_like(size),
        torch.full_like(size, torch.inf),
        guess,
    )
