"""Gompertz distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_positive, should_validate


def _check(shape: Tensor, scale: Tensor) -> None:
    check_positive("shape", shape)
    check_positive("scale", scale)


def _log_survival(x: Tensor, shape: Tensor, scale: Tensor) -> Tensor:
    # alpha * (1 - exp(x / sigma))
    return -shape * torch.expm1(x / scale)


def gompertz_density(
    x: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the Gompertz distribution.

    .. math::
        f(x; \alpha, \sigma) = \frac{\alpha}{\sigma}
        \exp\left(\alpha (1 - e^{x / \sigma}) + \frac{x}{\sigma}\right),
        \quad x \geq 0

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
        Density values.
    """
    x, shape, scale = promote_tensors(x, shape, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape, scale)
    xs = torch.clamp(x, min=0)
    log_density = (
        torch.log(shape / scale) + _log_survival(xs, shape, scale) + xs / scale
    )
    density = torch.where(torch.isinf(x), 0.0, torch.exp(log_density))
    return torch.where(x < 0, 0.0, density)


def gompertz_probability(
    q: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function
    :math:`1 - \exp(\alpha (1 - e^{q / \sigma}))`."""
    q, shape, scale = promote_tensors(q, shape, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape, scale)
    qs = torch.clamp(q, min=0)
    return torch.where(
        q <= 0, 0.0, -torch.expm1(_log_survival(qs, shape, scale))
    )


def gompertz_survival(
    t: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`\exp(\alpha (1 - e^{t / \sigma}))`."""
    t, shape, scale = promote_tensors(t, shape, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape, scale)
    ts = torch.clamp(t, min=0)
    return torch.where(t <= 0, 1.0, torch.exp(_log_survival(ts, shape, scale)))


def gompertz_quantile(
    p: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function :math:`\sigma \log(1 - \log(1 - p) / \alpha)`."""
    p, shape, scale = promote_tensors(p, shape, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape, scale)
    p = torch.clamp(p, 0, 1)
    return scale * torch.log1p(-torch.log1p(-p) / shape)
