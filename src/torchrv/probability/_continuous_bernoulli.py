"""Continuous Bernoulli distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_probability, should_validate


def _check(shape: Tensor) -> None:
    check_probability("shape", shape, open_lower=True, open_upper=True)


def _rate(shape: Tensor) -> Tensor:
    # r = log(lambda / (1 - lambda)); the density is proportional to exp(r x)
    return torch.log(shape) - torch.log1p(-shape)


def _safe(rate: Tensor) -> Tensor:
    return torch.where(rate == 0, 1.0, rate)


def continuous_bernoulli_density(
    x: Numeric, shape: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of the continuous Bernoulli
    distribution.

    .. math::
        f(x; \lambda) = C(\lambda)\, \lambda^x (1 - \lambda)^{1 - x}
        = \frac{r e^{r x}}{e^r - 1}, \quad
        r = \log\frac{\lambda}{1 - \lambda}

    The second form is evaluated with the exponent shifted by
    :math:`\max(r, 0)` so it cannot overflow, and reduces to the uniform
    density at :math:`\lambda = 1/2`.

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the density.
    shape : Tensor or float
        Shape :math:`\lambda \in (0, 1)`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Density values; zero outside ``[0, 1]``.

    References
    ----------
    Loaiza-Ganem, G., & Cunningham, J. P. (2019). The continuous
    Bernoulli: fixing a pervasive error in variational autoencoders.
    """
    x, shape = promote_tensors(x, shape)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape)
    r = _rate(shape)
    r_safe = _safe(r)
    magnitude = torch.abs(r_safe)
    density = (
        magnitude
        * torch.exp(r_safe * x - torch.clamp(r_safe, min=0))
        / -torch.expm1(-magnitude)
    )
    density = torch.where(r == 0, 1.0, density)
    return torch.where((x < 0) | (x > 1), 0.0, density)


def continuous_bernoulli_probability(
    q: Numeric, shape: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function
    :math:`\operatorname{expm1}(r q) / \operatorname{expm1}(r)`."""
    q, shape = promote_tensors(q, shape)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape)
    r = _rate(shape)
    r_safe = _safe(r)
    qs = torch.clamp(q, 0, 1)
    value = torch.expm1(r_safe * qs) / torch.expm1(r_safe)
    value = torch.where(r == 0, qs, value)
    return torch.where(q <= 0, 0.0, torch.where(q >= 1, 1.0, value))


def continuous_bernoulli_survival(
    t: Numeric, shape: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function
    :math:`e^{r t} \operatorname{expm1}(r (1 - t)) / \operatorname{expm1}(r)`."""
    t, shape = promote_tensors(t, shape)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape)
    r = _rate(shape)
    r_safe = _safe(r)
    ts = torch.clamp(t, 0, 1)
    value = (
        torch.exp(r_safe * ts)
        * torch.expm1(r_safe * (1 - ts))
        / torch.expm1(r_safe)
    )
    value = torch.where(r == 0, 1 - ts, value)
    return torch.where(t <= 0, 1.0, torch.where(t >= 1, 0.0, value))


def continuous_bernoulli_quantile(
    p: Numeric, shape: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function :math:`\log(1 + p \operatorname{expm1}(r)) / r`."""
    p, shape = promote_tensors(p, shape)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape)
    p = torch.clamp(p, 0, 1)
    r = _rate(shape)
    r_safe = _safe(r)
    value = torch.log1p(p * torch.expm1(r_safe)) / r_safe
    value = torch.where(r == 0, p, value)
    value = torch.where(p <= 0, 0.0, value)
    return torch.where(p >= 1, 1.0, value)
