"""Dagum distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_positive, should_validate


def _check(shape1: Tensor, shape2: Tensor, scale: Tensor) -> None:
    check_positive("shape1", shape1)
    check_positive("shape2", shape2)
    check_positive("scale", scale)


def _log_probability(
    q: Tensor, shape1: Tensor, shape2: Tensor, scale: Tensor
) -> Tensor:
    # -p log(1 + (q / sigma)^-alpha)
    z = torch.clamp(q / scale, min=0)
    return -shape1 * torch.log1p(torch.pow(z, -shape2))


def dagum_density(
    x: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Dagum distribution.

    .. math::
        f(x; p, \alpha, \sigma) = \frac{p\alpha}{\sigma}
        \frac{(x / \sigma)^{p\alpha - 1}}{(1 + (x / \sigma)^\alpha)^{p + 1}},
        \quad x \geq 0

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    shape1 : Tensor or float
        Shape :math:`p`. Must be positive.
    shape2 : Tensor or float
        Shape :math:`\alpha`. Must be positive.
    scale : Tensor or float
        Scale :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values.
    """
    x, shape1, shape2, scale = promote_tensors(x, shape1, shape2, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape1, shape2, scale)
    z = torch.clamp(x / scale, min=0)
    log_density = (
        torch.log(shape1 * shape2 / scale)
        + torch.special.xlogy(shape1 * shape2 - 1, z)
        - (shape1 + 1) * torch.log1p(torch.pow(z, shape2))
    )
    density = torch.where(torch.isinf(x), 0.0, torch.exp(log_density))
    return torch.where(x < 0, 0.0, density)


def dagum_probability(
    q: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function
    :math:`(1 + (q / \sigma)^{-\alpha})^{-p}`."""
    q, shape1, shape2, scale = promote_tensors(q, shape1, shape2, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape1, shape2, scale)
    value = torch.exp(_log_probability(q, shape1, shape2, scale))
    return torch.where(q <= 0, 0.0, value)


def dagum_survival(
    t: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`1 - (1 + (t / \sigma)^{-\alpha})^{-p}`."""
    t, shape1, shape2, scale = promote_tensors(t, shape1, shape2, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape1, shape2, scale)
    value = -torch.expm1(_log_probability(t, shape1, shape2, scale))
    return torch.where(t <= 0, 1.0, value)


def dagum_quantile(
    p: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\sigma (u^{-1/p} - 1)^{-1/\alpha}`
    evaluated through ``expm1``."""
    p, shape1, shape2, scale = promote_tensors(p, shape1, shape2, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape1, shape2, scale)
    p = torch.clamp(p, 0, 1)
    base = torch.expm1(-torch.log(p) / shape1)
    return scale * torch.pow(base, -1 / shape2)
