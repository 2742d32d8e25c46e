"""Binomial distribution."""

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
    check_integer("size", size, minimum=0)
    check_probability("prob", prob)


def _pair(q: Tensor, size: Tensor, prob: Tensor) -> tuple[Tensor, Tensor]:
    # F(k) = I_{1 - p}(n - k, k + 1)
    k = torch.floor(q)
    inside = (k >= 0) & (k < size)
    ks = torch.where(inside, k, 0.0)
    value, complement = regularized_beta_pair(
        1 - prob, prob, torch.where(inside, size - ks, 1.0), ks + 1
    )
    below = k < 0
    value = torch.where(inside, value, torch.where(below, 0.0, 1.0))
    complement = torch.where(inside, complement, torch.where(below, 1.0, 0.0))
    return value, complement


def binomial_log_density(
    x: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability mass function of the binomial distribution.

    .. math::
        \log p(x; n, \pi) = \log\binom{n}{x} + x \log\pi
        + (n - x) \log(1 - \pi)

    The binomial coefficient comes from :func:`log_binomial_coefficient`,
    so counts in the billions neither overflow nor lose precision to
    cancelling factorials.

    Parameters
    ----------
    x : Tensor or float
        Number of successes.
    size : Tensor or int
        Number of trials :math:`n`.
    prob : Tensor or float
        Success probability :math:`\pi \in [0, 1]`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log mass values; ``-inf`` off ``{0, ..., size}``.
    """
    x, size, prob = promote_tensors(x, size, prob)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(size, prob)
    on_lattice = (x >= 0) & (x <= size) & (x == torch.floor(x))
    xs = torch.where(on_lattice, x, 0.0)
    log_mass = (
        log_binomial_coefficient(size, xs)
        + torch.special.xlogy(xs, prob)
        + torch.special.xlog1py(size - xs, -prob)
    )
    return torch.where(on_lattice, log_mass, -torch.inf)


def binomial_density(
    x: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function of the binomial distribution.

    .. math::
        p(x; n, \pi) = \binom{n}{x} \pi^x (1 - \pi)^{n - x}

    Examples
    --------
    >>> binomial_density(2, 4, 0.5)
    tensor(0.3750, dtype=torch.float64)
    """
    return torch.exp(
        binomial_log_density(x, size, prob, validate_args=validate_args)
    )


def binomial_probability(
    q: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function of the binomial distribution.

    .. math::
        F(q; n, \pi) = I_{1 - \pi}(n - \lfloor q \rfloor, \lfloor q \rfloor + 1)
    """
    q, size, prob = promote_tensors(q, size, prob)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(size, prob)
    return _pair(q, size, prob)[0]


def binomial_survival(
    t: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function
    :math:`I_\pi(\lfloor t \rfloor + 1, n - \lfloor t \rfloor)`."""
    t, size, prob = promote_tensors(t, size, prob)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(size, prob)
    return _pair(t, size, prob)[1]


def binomial_quantile(
    p: Numeric, size: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function: the smallest ``k`` with :math:`F(k) \geq p`.

    Searched from a normal approximation to the distribution.
    """
    p, size, prob = promote_tensors(p, size, prob)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(size, prob)
    mean = size * prob
    sd = torch.sqrt(mean * (1 - prob))
    guess = mean + sd * torch.special.ndtri(torch.clamp(p, 0, 1))
    return discrete_quantile(
        p,
        lambda k: _pair(k, size, prob)[0],
        lambda k: _pair(k, size, prob)[1],
        torch.zeros_like(size),
        size,
        guess,
    )
