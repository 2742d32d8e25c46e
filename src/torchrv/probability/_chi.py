"""Chi distribution."""

import math

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import regularized_gamma_pair
from ._gamma import _standard_quantile
from ._validation import check_not_nan, check_positive, should_validate


def chi_log_density(
    x: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability density function of the chi distribution.

    .. math::
        \log f(x; \nu) = (\nu - 1) \log x - \frac{x^2}{2}
        - \left(\frac{\nu}{2} - 1\right) \log 2
        - \log\Gamma\left(\frac{\nu}{2}\right), \quad x \geq 0

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    df : Tensor or float
        Degrees of freedom :math:`\nu`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values.
    """
    x, df = promote_tensors(x, df)
    if should_validate(validate_args):
        check_not_nan("x", x)
        check_positive("df", df)
    xs = torch.clamp(x, min=0)
    log_density = (
        torch.special.xlogy(df - 1, xs)
        - 0.5 * xs * xs
        - (df / 2 - 1) * math.log(2)
        - torch.lgamma(df / 2)
    )
    log_density = torch.where(torch.isinf(x), -torch.inf, log_density)
    return torch.where(x < 0, -torch.inf, log_density)


def chi_density(
    x: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of the chi distribution.

    .. math::
        f(x; \nu) = \frac{x^{\nu - 1} e^{-x^2 / 2}}
        {2^{\nu/2 - 1} \Gamma(\nu / 2)}
    """
    return torch.exp(chi_log_density(x, df, validate_args=validate_args))


def chi_probability(
    q: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function :math:`P(\nu / 2, q^2 / 2)`."""
    q, df = promote_tensors(q, df)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_positive("df", df)
    qs = torch.clamp(q, min=0)
    return regularized_gamma_pair(df / 2, 0.5 * qs * qs)[0]


def chi_survival(
    t: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`Q(\nu / 2, t^2 / 2)`."""
    t, df = promote_tensors(t, df)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_positive("df", df)
    ts = torch.clamp(t, min=0)
    return regularized_gamma_pair(df / 2, 0.5 * ts * ts)[1]


def chi_quantile(
    p: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function :math:`\sqrt{2 P^{-1}(\nu / 2, p)}`."""
    p, df = promote_tensors(p, df)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_positive("df", df)
    return torch.sqrt(2 * _standard_quantile(p, df / 2))
