"""Log-normal distribution."""

import math

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._normal import standard_normal_probability
from ._validation import (
    check_finite,
    check_not_nan,
    check_positive,
    should_validate,
)

_LOG_SQRT_2PI = 0.5 * math.log(2 * math.pi)


def _check(log_location: Tensor, log_scale: Tensor) -> None:
    check_finite("log_location", log_location)
    check_positive("log_scale", log_scale)


def log_normal_log_density(
    x: Numeric,
    log_location: Numeric,
    log_scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability density function of the log-normal distribution.

    .. math::
        \log f(x; \mu, \sigma) = -\frac{(\log x - \mu)^2}{2\sigma^2}
        - \log x - \log \sigma - \frac{1}{2} \log 2\pi, \quad x > 0

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    log_location : Tensor or float
        Mean :math:`\mu` of :math:`\log X`.
    log_scale : Tensor or float
        Standard deviation :math:`\sigma` of :math:`\log X`. Must be
        positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values; ``-inf`` for ``x <= 0``.
    """
    x, log_location, log_scale = promote_tensors(x, log_location, log_scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(log_location, log_scale)
    positive = x > 0
    log_x = torch.log(torch.where(positive, x, 1.0))
    z = (log_x - log_location) / log_scale
    log_density = -0.5 * z * z - log_x - torch.log(log_scale) - _LOG_SQRT_2PI
    log_density = torch.where(torch.isinf(x), -torch.inf, log_density)
    return torch.where(positive, log_density, -torch.inf)


def log_normal_density(
    x: Numeric,
    log_location: Numeric,
    log_scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the log-normal distribution.

    .. math::
        f(x; \mu, \sigma) = \frac{1}{x\sigma\sqrt{2\pi}}
        e^{-(\log x - \mu)^2 / 2\sigma^2}
    """
    return torch.exp(
        log_normal_log_density(
            x, log_location, log_scale, validate_args=validate_args
        )
    )


def log_normal_probability(
    q: Numeric,
    log_location: Numeric,
    log_scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function
    :math:`\Phi((\log q - \mu) / \sigma)`."""
    q, log_location, log_scale = promote_tensors(q, log_location, log_scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(log_location, log_scale)
    log_q = torch.log(torch.clamp(q, min=0))
    return standard_normal_probability((log_q - log_location) / log_scale)


def log_normal_survival(
    t: Numeric,
    log_location: Numeric,
    log_scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`\Phi((\mu - \log t) / \sigma)`."""
    t, log_location, log_scale = promote_tensors(t, log_location, log_scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(log_location, log_scale)
    log_t = torch.log(torch.clamp(t, min=0))
    return standard_normal_probability((log_location - log_t) / log_scale)


def log_normal_quantile(
    p: Numeric,
    log_location: Numeric,
    log_scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\exp(\mu + \sigma \Phi^{-1}(p))`."""
    p, log_location, log_scale = promote_tensors(p, log_location, log_scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(log_location, log_scale)
    p = torch.clamp(p, 0, 1)
    return torch.exp(log_location + log_scale * torch.special.ndtri(p))
