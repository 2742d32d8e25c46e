"""Pareto (type I) distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_positive, should_validate


def _check(shape: Tensor, minimum: Tensor) -> None:
    check_positive("shape", shape)
    check_positive("minimum", minimum)


def pareto_density(
    x: Numeric,
    shape: Numeric,
    minimum: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Pareto distribution.

    .. math::
        f(x; \alpha, k) = \frac{\alpha k^\alpha}{x^{\alpha + 1}},
        \quad x \geq k

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    shape : Tensor or float
        Tail index :math:`\alpha`. Must be positive.
    minimum : Tensor or float
        Scale :math:`k`, the left end of the support. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values; zero below ``minimum``.
    """
    x, shape, minimum = promote_tensors(x, shape, minimum)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape, minimum)
    ratio = minimum / torch.where(x < minimum, minimum, x)
    density = shape / minimum * torch.pow(ratio, shape + 1)
    return torch.where(x < minimum, 0.0, density)


def pareto_probability(
    q: Numeric,
    shape: Numeric,
    minimum: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function :math:`1 - (k / q)^\alpha`."""
    q, shape, minimum = promote_tensors(q, shape, minimum)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape, minimum)
    log_ratio = torch.log(minimum / torch.where(q < minimum, minimum, q))
    return torch.where(q <= minimum, 0.0, -torch.expm1(shape * log_ratio))


def pareto_survival(
    t: Numeric,
    shape: Numeric,
    minimum: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`(k / t)^\alpha`."""
    t, shape, minimum = promote_tensors(t, shape, minimum)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape, minimum)
    ratio = minimum / torch.where(t < minimum, minimum, t)
    return torch.where(t <= minimum, 1.0, torch.pow(ratio, shape))


def pareto_quantile(
    p: Numeric,
    shape: Numeric,
    minimum: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`k (1 - p)^{-1 / \alpha}`."""
    p, shape, minimum = promote_tensors(p, shape, minimum)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape, minimum)
    p = torch.clamp(p, 0, 1)
    return minimum * torch.exp(-torch.log1p(-p) / shape)
