"""Beta-binomial distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import log_beta, log_binomial_coefficient
from ._lattice import lattice_sum
from ._quantile import discrete_quantile
from ._validation import (
    check_integer,
    check_not_nan,
    check_positive,
    should_validate,
)


def _check(size: Tensor, shape1: Tensor, shape2: Tensor) -> None:
    check_integer("size", size, minimum=0)
    check_positive("shape1", shape1)
    check_positive("shape2", shape2)


def _log_mass(
    k: Tensor, size: Tensor, shape1: Tensor, shape2: Tensor
) -> Tensor:
    return (
        log_binomial_coefficient(size, k)
        + log_beta(k + shape1, size - k + shape2)
        - log_beta(shape1, shape2)
    )


def _pair(
    q: Tensor, size: Tensor, shape1: Tensor, shape2: Tensor
) -> tuple[Tensor, Tensor]:
    k = torch.floor(q)
    inside = (k >= 0) & (k < size)
    lower_side = inside & (k < size * shape1 / (shape1 + shape2))
    upper_side = inside & ~lower_side

    def log_mass(j: Tensor) -> Tensor:
        return _log_mass(
            j, size.unsqueeze(-1), shape1.unsqueeze(-1), shape2.unsqueeze(-1)
        )

    # The mass can be U-shaped, so every term is summed
    lower_tail = lattice_sum(
        log_mass,
        torch.where(lower_side, k, torch.nan),
        torch.zeros_like(k),
    )
    upper_tail = lattice_sum(
        log_mass, torch.where(upper_side, k + 1, torch.nan), size
    )
    value = torch.where(lower_side, lower_tail, 1 - upper_tail)
    complement = torch.where(lower_side, 1 - lower_tail, upper_tail)

    below = k < 0
    above = k >= size
    value = torch.where(below, 0.0, torch.where(above, 1.0, value))
    complement = torch.where(below, 1.0, torch.where(above, 0.0, complement))
    return value, complement


def beta_binomial_log_density(
    x: Numeric,
    size: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability mass function of the beta-binomial distribution.

    .. math::
        p(x; n, \alpha, \beta) = \binom{n}{x}
        \frac{B(x + \alpha, n - x + \beta)}{B(\alpha, \beta)}

    Parameters
    ----------
    x : Tensor or float
        Number of successes.
    size : Tensor or int
        Number of trials :math:`n`.
    shape1, shape2 : Tensor or float
        Positive shape parameters of the beta-distributed success
        probability.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log mass values; ``-inf`` off ``{0, ..., size}``.
    """
    x, size, shape1, shape2 = promote_tensors(x, size, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(size, shape1, shape2)
    on_lattice = (x >= 0) & (x <= size) & (x == torch.floor(x))
    xs = torch.where(on_lattice, x, 0.0)
    return torch.where(
        on_lattice, _log_mass(xs, size, shape1, shape2), -torch.inf
    )


def beta_binomial_density(
    x: Numeric,
    size: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability mass function of the beta-binomial distribution.

    With :math:`\alpha = \beta = 1` every count in ``{0, ..., n}`` is
    equally likely.

    Examples
    --------
    >>> beta_binomial_density(3, 4, 1.0, 1.0)
    tensor(0.2000, dtype=torch.float64)
    """
    return torch.exp(
        beta_binomial_log_density(
            x, size, shape1, shape2, validate_args=validate_args
        )
    )


def beta_binomial_probability(
    q: Numeric,
    size: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    """Cumulative distribution function of the beta-binomial distribution.

    Sums the masses on whichever side of the mean is shorter to reach.
    """
    q, size, shape1, shape2 = promote_tensors(q, size, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(size, shape1, shape2)
    return _pair(q, size, shape1, shape2)[0]


def beta_binomial_survival(
    t: Numeric,
    size: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    t, size, shape1, shape2 = promote_tensors(t, size, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(size, shape1, shape2)
    return _pair(t, size, shape1, shape2)[1]


def beta_binomial_quantile(
    p: Numeric,
    size: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function: the smallest ``k`` with :math:`F(k) \geq p`."""
    p, size, shape1, shape2 = promote_tensors(p, size, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(size, shape1, shape2)
    return discrete_quantile(
        p,
        lambda k: _pair(k, size, shape1, shape2)[0],
        lambda k: _pair(k, size, shape1, shape2)[1],
        torch.zeros_like(size),
        size,
        size * torch.clamp(p, 0, 1),
    )
