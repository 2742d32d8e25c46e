"""Laplace (double exponential) distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import (
    check_finite,
    check_not_nan,
    check_positive,
    should_validate,
)


def _check(location: Tensor, scale: Tensor) -> None:
    check_finite("location", location)
    check_positive("scale", scale)


def laplace_density(
    x: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Laplace distribution.

    .. math::
        f(x; \mu, \sigma) = \frac{1}{2\sigma} e^{-|x - \mu| / \sigma}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    location : Tensor or float
        Location :math:`\mu`.
    scale : Tensor or float
        Scale :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values.
    """
    x, location, scale = promote_tensors(x, location, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(location, scale)
    return torch.exp(-torch.abs(x - location) / scale) / (2 * scale)


def laplace_probability(
    q: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function of the Laplace distribution.

    .. math::
        F(q) = \begin{cases}
            \frac{1}{2} e^{z} & z < 0 \\
            1 - \frac{1}{2} e^{-z} & z \geq 0
        \end{cases}, \quad z = \frac{q - \mu}{\sigma}
    """
    q, location, scale = promote_tensors(q, location, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(location, scale)
    z = (q - location) / scale
    half_tail = 0.5 * torch.exp(-torch.abs(z))
    return torch.where(z < 0, half_tail, 1 - half_tail)


def laplace_survival(
    t: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function, the mirror image of the CDF about :math:`\mu`."""
    t, location, scale = promote_tensors(t, location, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(location, scale)
    z = (t - location) / scale
    half_tail = 0.5 * torch.exp(-torch.abs(z))
    return torch.where(z > 0, half_tail, 1 - half_tail)


def laplace_quantile(
    p: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function of the Laplace distribution.

    .. math::
        Q(p) = \begin{cases}
            \mu + \sigma \log 2p & p < \frac{1}{2} \\
            \mu - \sigma \log 2(1 - p) & p \geq \frac{1}{2}
        \end{cases}
    """
    p, location, scale = promote_tensors(p, location, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(location, scale)
    p = torch.clamp(p, 0, 1)
    lower = location + scale * torch.log(2 * p)
    upper = location - scale * torch.log(2 * (1 - p))
    return torch.where(p < 0.5, lower, upper)
