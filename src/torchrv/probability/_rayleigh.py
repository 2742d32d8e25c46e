"""Rayleigh distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_positive, should_validate


def _half_square(x: Tensor, scale: Tensor) -> Tensor:
    z = x / scale
    return 0.5 * z * z


def rayleigh_density(
    x: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of the Rayleigh distribution.

    .. math::
        f(x; \sigma) = \frac{x}{\sigma^2} e^{-x^2 / 2\sigma^2},
        \quad x \geq 0

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    scale : Tensor or float
        Scale :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values.
    """
    x, scale = promote_tensors(x, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        check_positive("scale", scale)
    density = x / (scale * scale) * torch.exp(-_half_square(x, scale))
    density = torch.where(torch.isinf(x), 0.0, density)
    return torch.where(x < 0, 0.0, density)


def rayleigh_probability(
    q: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function :math:`1 - e^{-q^2 / 2\sigma^2}`."""
    q, scale = promote_tensors(q, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_positive("scale", scale)
    return torch.where(q <= 0, 0.0, -torch.expm1(-_half_square(q, scale)))


def rayleigh_survival(
    t: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`e^{-t^2 / 2\sigma^2}`."""
    t, scale = promote_tensors(t, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_positive("scale", scale)
    return torch.where(t <= 0, 1.0, torch.exp(-_half_square(t, scale)))


def rayleigh_quantile(
    p: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function :math:`\sigma \sqrt{-2 \log(1 - p)}`."""
    p, scale = promote_tensors(p, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_positive("scale", scale)
    p = torch.clamp(p, 0, 1)
    return torch.where(p <= 0, 0.0, scale * torch.sqrt(-2 * torch.log1p(-p)))
