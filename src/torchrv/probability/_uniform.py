"""Continuous uniform distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import (
    check_finite,
    check_not_nan,
    check_ordered,
    should_validate,
)


def _check(min: Tensor, max: Tensor) -> None:
    check_finite("min", min)
    check_finite("max", max)
    check_ordered("min", min, "max", max)


def uniform_density(
    x: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the uniform distribution.

    .. math::
        f(x; a, b) = \frac{1}{b - a}, \quad a \leq x \leq b

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    min, max : Tensor or float
        Support endpoints :math:`a \leq b`. When they are equal the
        distribution is a point mass and the density is infinite there.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values.
    """
    x, min, max = promote_tensors(x, min, max)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(min, max)
    inside = (x >= min) & (x <= max)
    return torch.where(inside, 1 / (max - min), 0.0)


def uniform_probability(
    q: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function :math:`(q - a) / (b - a)`."""
    q, min, max = promote_tensors(q, min, max)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(min, max)
    inside = (q > min) & (q < max)
    value = torch.where(inside, (q - min) / (max - min), 0.0)
    return torch.where(q >= max, 1.0, value)


def uniform_survival(
    t: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`(b - t) / (b - a)`."""
    t, min, max = promote_tensors(t, min, max)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(min, max)
    inside = (t > min) & (t < max)
    value = torch.where(inside, (max - t) / (max - min), 0.0)
    return torch.where(t < max, torch.where(t <= min, 1.0, value), 0.0)


def uniform_quantile(
    p: Numeric,
    min: Numeric,
    max: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`a + (b - a) p`.

    Examples
    --------
    >>> uniform_quantile(0.25, 0.0, 4.0)
    tensor(1., dtype=torch.float64)
    """
    p, min, max = promote_tensors(p, min, max)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(min, max)
    p = torch.clamp(p, 0, 1)
    return torch.where(p >= 1, max, min + (max - min) * p)
