"""Hypergeometric distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import log_binomial_coefficient
from ._lattice import lattice_sum
from ._quantile import discrete_quantile
from ._validation import (
    check_integer,
    check_not_nan,
    check_ordered,
    should_validate,
)


def _check(total: Tensor, good: Tensor, tries: Tensor) -> None:
    check_integer("total", total, minimum=0)
    check_integer("good", good, minimum=0)
    check_integer("tries", tries, minimum=0)
    check_ordered("good", good, "total", total)
    check_ordered("tries", tries, "total", total)


def _support(
    total: Tensor, good: Tensor, tries: Tensor
) -> tuple[Tensor, Tensor]:
    lower = torch.clamp(tries + good - total, min=0)
    upper = torch.minimum(tries, good)
    return lower, upper


def _log_mass(
    k: Tensor, total: Tensor, good: Tensor, tries: Tensor
) -> Tensor:
    return (
        log_binomial_coefficient(good, k)
        + log_binomial_coefficient(total - good, tries - k)
        - log_binomial_coefficient(total, tries)
    )


def _pair(
    q: Tensor, total: Tensor, good: Tensor, tries: Tensor
) -> tuple[Tensor, Tensor]:
    k = torch.floor(q)
    lo, hi = _support(total, good, tries)
    mode = torch.floor((tries + 1) * (good + 1) / (total + 2))
    inside = (k >= lo) & (k < hi)
    # Sum the tail that does not contain the mode; terms fall away from it
    lower_side = inside & (k < mode)
    upper_side = inside & ~lower_side

    def log_mass(j: Tensor) -> Tensor:
        return _log_mass(
            j, total.unsqueeze(-1), good.unsqueeze(-1), tries.unsqueeze(-1)
        )

    lower_tail = lattice_sum(
        log_mass, torch.where(lower_side, k, torch.nan), lo, early_stop=True
    )
    upper_tail = lattice_sum(
        log_mass,
        torch.where(upper_side, k + 1, torch.nan),
        hi,
        early_stop=True,
    )
    value = torch.where(lower_side, lower_tail, 1 - upper_tail)
    complement = torch.where(lower_side, 1 - lower_tail, upper_tail)

    below = k < lo
    above = k >= hi
    value = torch.where(below, 0.0, torch.where(above, 1.0, value))
    complement = torch.where(below, 1.0, torch.where(above, 0.0, complement))
    return value, complement


def hypergeometric_log_density(
    x: Numeric,
    total: Numeric,
    good: Numeric,
    tries: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability mass function of the hypergeometric distribution.

    The number of marked items in ``tries`` draws without replacement
    from ``total`` items of which ``good`` are marked:

    .. math::
        p(x; N, K, n) = \binom{K}{x} \binom{N - K}{n - x}
        \bigg/ \binom{N}{n}

    Parameters
    ----------
    x : Tensor or float
        Number of marked items drawn.
    total : Tensor or int
        Population size :math:`N`.
    good : Tensor or int
        Marked items :math:`K \leq N`.
    tries : Tensor or int
        Draws :math:`n \leq N`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log mass values; ``-inf`` outside
        :math:`\{\max(0, n + K - N), \dots, \min(n, K)\}`.
    """
    x, total, good, tries = promote_tensors(x, total, good, tries)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(total, good, tries)
    lo, hi = _support(total, good, tries)
    on_lattice = (x >= lo) & (x <= hi) & (x == torch.floor(x))
    xs = torch.where(on_lattice, x, lo)
    return torch.where(
        on_lattice, _log_mass(xs, total, good, tries), -torch.inf
    )


def hypergeometric_density(
    x: Numeric,
    total: Numeric,
    good: Numeric,
    tries: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    """Probability mass function of the hypergeometric distribution."""
    return torch.exp(
        hypergeometric_log_density(
            x, total, good, tries, validate_args=validate_args
        )
    )


def hypergeometric_probability(
    q: Numeric,
    total: Numeric,
    good: Numeric,
    tries: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function of the hypergeometric distribution.

    The tail on the far side of the mode is summed directly and the
    other is its complement, so both :math:`F` and :math:`1 - F` keep
    their relative accuracy in the tails.
    """
    q, total, good, tries = promote_tensors(q, total, good, tries)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(total, good, tries)
    return _pair(q, total, good, tries)[0]


def hypergeometric_survival(
    t: Numeric,
    total: Numeric,
    good: Numeric,
    tries: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    """Survival function of the hypergeometric distribution."""
    t, total, good, tries = promote_tensors(t, total, good, tries)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(total, good, tries)
    return _pair(t, total, good, tries)[1]


def hypergeometric_quantile(
    p: Numeric,
    total: Numeric,
    good: Numeric,
    tries: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function: the smallest ``k`` with :math:`F(k) \geq p`."""
    p, total, good, tries = promote_tensors(p, total, good, tries)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(total, good, tries)
    lo, hi = _support(total, good, tries)
    fraction = good / torch.clamp(total, min=1)
    mean = tries * fraction
    spread = torch.clamp(total - tries, min=0) / torch.clamp(total - 1, min=1)
    sd = torch.sqrt(mean * (1 - fraction) * spread)
    guess = mean + sd * torch.special.ndtri(torch.clamp(p, 0, 1))
    return discrete_quantile(
        p,
        lambda k: _pair(k, total, good, tries)[0],
        lambda k: _pair(k, total, good, tries)[1],
        lo,
        hi,
        guess,
    )
