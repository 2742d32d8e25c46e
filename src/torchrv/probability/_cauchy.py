"""Cauchy distribution."""

import math

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


def cauchy_density(
    x: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Cauchy distribution.

    .. math::
        f(x; \mu, \sigma) = \frac{1}{\pi\sigma
        \left(1 + \left(\frac{x - \mu}{\sigma}\right)^2\right)}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    location : Tensor or float
        Location (median) :math:`\mu`.
    scale : Tensor or float
        Half width at half maximum :math:`\sigma`. Must be positive.
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
    return 1 / (math.pi * scale * (1 + z * z))


def cauchy_probability(
    q: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function of the Cauchy distribution.

    .. math::
        F(q) = \frac{1}{2} + \frac{1}{\pi}\arctan\frac{q - \mu}{\sigma}
        = \frac{1}{\pi}\operatorname{atan2}\left(1, -\frac{q - \mu}{\sigma}\right)

    The ``atan2`` form keeps relative precision in the lower tail.
    """
    q, location, scale = promote_tensors(q, location, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(location, scale)
    z = (q - location) / scale
    return torch.atan2(torch.ones_like(z), -z) / math.pi


def cauchy_survival(
    t: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function
    :math:`\frac{1}{\pi}\operatorname{atan2}(1, (t - \mu) / \sigma)`."""
    t, location, scale = promote_tensors(t, location, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(location, scale)
    z = (t - location) / scale
    return torch.atan2(torch.ones_like(z), z) / math.pi


def cauchy_quantile(
    p: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function of the Cauchy distribution.

    .. math::
        Q(p) = \mu + \sigma \tan\left(\pi\left(p - \tfrac{1}{2}\right)\right)

    Evaluated as :math:`-1/\tan(\pi p)` below the median and
    :math:`1/\tan(\pi(1 - p))` above it, so neither tail loses the
    small distance to 0 or 1.
    """
    p, location, scale = promote_tensors(p, location, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(location, scale)
    p = torch.clamp(p, 0, 1)
    lower = -1 / torch.tan(math.pi * p)
    upper = 1 / torch.tan(math.pi * (1 - p))
    z = torch.where(p < 0.5, lower, upper)
    z = torch.where(p == 0.5, 0.0, z)
    z = torch.where(p <= 0, -torch.inf, z)
    z = torch.where(p >= 1, torch.inf, z)
    return location + scale * z
