"""Gumbel (maximum extreme value) distribution."""

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


def gumbel_density(
    x: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Gumbel distribution.

    .. math::
        f(x; \mu, \sigma) = \frac{1}{\sigma} e^{-(z + e^{-z})},
        \quad z = \frac{x - \mu}{\sigma}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    location : Tensor or float
        Mode :math:`\mu`.
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
    z = (x - location) / scale
    density = torch.exp(-z - torch.exp(-z)) / scale
    return torch.where(torch.isinf(z), 0.0, density)


def gumbel_probability(
    q: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function :math:`\exp(-e^{-z})`."""
    q, location, scale = promote_tensors(q, location, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(location, scale)
    z = (q - location) / scale
    return torch.exp(-torch.exp(-z))


def gumbel_survival(
    t: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`1 - \exp(-e^{-z})`, via ``expm1``."""
    t, location, scale = promote_tensors(t, location, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(location, scale)
    z = (t - location) / scale
    return -torch.expm1(-torch.exp(-z))


def gumbel_quantile(
    p: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\mu - \sigma \log(-\log p)`."""
    p, location, scale = promote_tensors(p, location, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(location, scale)
    p = torch.clamp(p, 0, 1)
    return location - scale * torch.log(-torch.log(p))
