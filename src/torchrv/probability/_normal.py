"""Normal distribution."""

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

_LOG_SQRT_2PI = 0.5 * math.log(2 * math.pi)
_SQRT_HALF = math.sqrt(0.5)


def _check(location: Tensor, scale: Tensor) -> None:
    check_finite("location", location)
    check_positive("scale", scale)


def standard_normal_probability(z: Tensor) -> Tensor:
    r"""Standard normal CDF :math:`\Phi(z) = \tfrac{1}{2}
    \operatorname{erfc}(-z / \sqrt{2})`.

    ``erfc`` keeps relative accuracy for large positive arguments, so the
    lower tail does not underflow before the double-precision limit.
    """
    return 0.5 * torch.special.erfc(-z * _SQRT_HALF)


def normal_log_density(
    x: Numeric,
    location: Numeric = 0.0,
    scale: Numeric = 1.0,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability density function of the normal distribution.

    .. math::
        \log f(x; \mu, \sigma) = -\frac{(x - \mu)^2}{2\sigma^2}
        - \log \sigma - \frac{1}{2} \log 2\pi

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    location : Tensor or float, default=0
        Mean :math:`\mu`.
    scale : Tensor or float, default=1
        Standard deviation :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values.
    """
    x, location, scale = promote_tensors(x, location, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(location, scale)
    z = (x - location) / scale
    return -0.5 * z * z - torch.log(scale) - _LOG_SQRT_2PI


def normal_density(
    x: Numeric,
    location: Numeric = 0.0,
    scale: Numeric = 1.0,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the normal distribution.

    .. math::
        f(x; \mu, \sigma) = \frac{1}{\sigma\sqrt{2\pi}}
        e^{-(x - \mu)^2 / 2\sigma^2}

    Examples
    --------
    >>> normal_density(torch.tensor([0.0, 1.0]))
    tensor([0.3989, 0.2420])
    """
    return torch.exp(
        normal_log_density(x, location, scale, validate_args=validate_args)
    )


def normal_probability(
    q: Numeric,
    location: Numeric = 0.0,
    scale: Numeric = 1.0,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function of the normal distribution.

    .. math::
        F(q; \mu, \sigma) = \Phi\left(\frac{q - \mu}{\sigma}\right)

    Parameters
    ----------
    q : Tensor or float
        Points at which to evaluate the CDF.
    location : Tensor or float, default=0
        Mean :math:`\mu`.
    scale : Tensor or float, default=1
        Standard deviation :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        CDF values.

    Examples
    --------
    >>> normal_probability(5.0, 5.0, 2.0)
    tensor(0.5000, dtype=torch.float64)
    """
    q, location, scale = promote_tensors(q, location, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(location, scale)
    return standard_normal_probability((q - location) / scale)


def normal_survival(
    t: Numeric,
    location: Numeric = 0.0,
    scale: Numeric = 1.0,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`\Phi((\mu - t) / \sigma)`.

    Uses the reflection rather than ``1 - F`` so the upper tail does not
    underflow to zero prematurely.
    """
    t, location, scale = promote_tensors(t, location, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(location, scale)
    return standard_normal_probability((location - t) / scale)


def normal_quantile(
    p: Numeric,
    location: Numeric = 0.0,
    scale: Numeric = 1.0,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function of the normal distribution.

    .. math::
        Q(p; \mu, \sigma) = \mu + \sigma \Phi^{-1}(p)

    :math:`\Phi^{-1}` is ``torch.special.ndtri``, a piecewise rational
    approximation accurate to double precision, so no root finding is
    needed.

    Examples
    --------
    >>> normal_quantile(0.5, 5.0, 2.0)
    tensor(5., dtype=torch.float64)
    """
    p, location, scale = promote_tensors(p, location, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(location, scale)
    p = torch.clamp(p, 0, 1)
    return location + scale * torch.special.ndtri(p)
