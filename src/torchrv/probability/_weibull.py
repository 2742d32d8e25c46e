"""Weibull distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_positive, should_validate


def _check(shape: Tensor, scale: Tensor) -> None:
    check_positive("shape", shape)
    check_positive("scale", scale)


def weibull_density(
    x: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Weibull distribution.

    .. math::
        f(x; \alpha, \sigma) = \frac{\alpha}{\sigma}
        \left(\frac{x}{\sigma}\right)^{\alpha - 1}
        e^{-(x / \sigma)^\alpha}, \quad x \geq 0

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    shape : Tensor or float
        Shape :math:`\alpha`. Must be positive.
    scale : Tensor or float
        Scale :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values. At ``x = 0`` the density is infinite for
        ``shape < 1`` and ``1 / scale`` for ``shape = 1``.
    """
    x, shape, scale = promote_tensors(x, shape, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape, scale)
    z = torch.clamp(x / scale, min=0)
    log_density = (
        torch.log(shape / scale)
        + torch.special.xlogy(shape - 1, z)
        - torch.pow(z, shape)
    )
    density = torch.where(torch.isinf(x), 0.0, torch.exp(log_density))
    return torch.where(x < 0, 0.0, density)


def weibull_probability(
    q: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function :math:`1 - e^{-(q / \sigma)^\alpha}`."""
    q, shape, scale = promote_tensors(q, shape, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape, scale)
    z = torch.clamp(q / scale, min=0)
    return torch.where(q <= 0, 0.0, -torch.expm1(-torch.pow(z, shape)))


def weibull_survival(
    t: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`e^{-(t / \sigma)^\alpha}`."""
    t, shape, scale = promote_tensors(t, shape, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape, scale)
    z = torch.clamp(t / scale, min=0)
    return torch.where(t <= 0, 1.0, torch.exp(-torch.pow(z, shape)))


def weibull_quantile(
    p: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\sigma (-\log(1 - p))^{1 / \alpha}`."""
    p, shape, scale = promote_tensors(p, shape, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape, scale)
    p = torch.clamp(p, 0, 1)
    return torch.where(
        p <= 0, 0.0, scale * torch.pow(-torch.log1p(-p), 1 / shape)
    )
