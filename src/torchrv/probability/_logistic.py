"""Logistic distribution."""

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


def logistic_density(
    x: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the logistic distribution.

    .. math::
        f(x; \mu, \sigma) = \frac{e^{-z}}{\sigma (1 + e^{-z})^2}
        = \frac{\operatorname{sigmoid}(z)\operatorname{sigmoid}(-z)}{\sigma}

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
    z = (x - location) / scale
    return torch.sigmoid(z) * torch.sigmoid(-z) / scale


def logistic_probability(
    q: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function :math:`1 / (1 + e^{-z})`."""
    q, location, scale = promote_tensors(q, location, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(location, scale)
    return torch.sigmoid((q - location) / scale)


def logistic_survival(
    t: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`1 / (1 + e^{z})`."""
    t, location, scale = promote_tensors(t, location, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(location, scale)
    return torch.sigmoid((location - t) / scale)


def logistic_quantile(
    p: Numeric,
    location: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\mu + \sigma \log(p / (1 - p))`."""
    p, location, scale = promote_tensors(p, location, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(location, scale)
    p = torch.clamp(p, 0, 1)
    return location + scale * torch.logit(p)
