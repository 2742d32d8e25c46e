"""Exponential distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_positive, should_validate


def exponential_density(
    x: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of the exponential distribution.

    .. math::
        f(x; \sigma) = \frac{1}{\sigma} e^{-x / \sigma}, \quad x \geq 0

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    scale : Tensor or float
        Scale :math:`\sigma` (the mean). Must be positive.
    validate_args : bool, optional
        Check argument domains. Defaults to
        :func:`get_default_validate_args`.

    Returns
    -------
    Tensor
        Density values; zero for ``x < 0``.

    Raises
    ------
    DomainError
        If validating and ``scale`` is not positive or ``x`` is NaN.

    Examples
    --------
    >>> exponential_density(torch.tensor([0.0, 1.0]), 1.0)
    tensor([1.0000, 0.3679])
    """
    x, scale = promote_tensors(x, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        check_positive("scale", scale)
    return torch.where(x < 0, 0.0, torch.exp(-x / scale) / scale)


def exponential_probability(
    q: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function of the exponential distribution.

    .. math::
        F(q; \sigma) = 1 - e^{-q / \sigma}

    Evaluated as ``-expm1(-q / scale)`` so small ``q`` keep full relative
    precision.

    Examples
    --------
    >>> exponential_probability(1.0, 2.0)
    tensor(0.3935, dtype=torch.float64)
    """
    q, scale = promote_tensors(q, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_positive("scale", scale)
    return torch.where(q <= 0, 0.0, -torch.expm1(-q / scale))


def exponential_survival(
    t: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`S(t) = e^{-t / \sigma}`."""
    t, scale = promote_tensors(t, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_positive("scale", scale)
    return torch.where(t <= 0, 1.0, torch.exp(-t / scale))


def exponential_quantile(
    p: Numeric, scale: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function :math:`Q(p) = -\sigma \log(1 - p)`.

    Probabilities outside ``[0, 1]`` map to the support boundaries ``0``
    and ``inf``.
    """
    p, scale = promote_tensors(p, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_positive("scale", scale)
    p = torch.clamp(p, 0, 1)
    return torch.where(p <= 0, 0.0, -scale * torch.log1p(-p))
