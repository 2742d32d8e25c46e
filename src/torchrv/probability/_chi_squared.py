"""Chi-squared distribution."""

import math

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import regularized_gamma_pair
from ._gamma import _standard_log_density, _standard_quantile
from ._validation import check_not_nan, check_positive, should_validate


def chi_squared_log_density(
    x: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability density function of the chi-squared distribution.

    .. math::
        \log f(x; \nu) = \left(\frac{\nu}{2} - 1\right) \log\frac{x}{2}
        - \frac{x}{2} - \log\Gamma\left(\frac{\nu}{2}\right) - \log 2

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
    return _standard_log_density(x / 2, df / 2) - math.log(2)


def chi_squared_density(
    x: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of the chi-squared distribution.

    .. math::
        f(x; \nu) = \frac{1}{2\Gamma(\nu/2)}
        \left(\frac{x}{2}\right)^{\nu/2 - 1} e^{-x/2}
    """
    return torch.exp(chi_squared_log_density(x, df, validate_args=validate_args))


def chi_squared_probability(
    q: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function :math:`P(\nu / 2, q / 2)`.

    Examples
    --------
    >>> chi_squared_probability(3.841458820694124, 1.0)
    tensor(0.9500, dtype=torch.float64)
    """
    q, df = promote_tensors(q, df)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_positive("df", df)
    return regularized_gamma_pair(df / 2, torch.clamp(q / 2, min=0))[0]


def chi_squared_survival(
    t: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`Q(\nu / 2, t / 2)`."""
    t, df = promote_tensors(t, df)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_positive("df", df)
    return regularized_gamma_pair(df / 2, torch.clamp(t / 2, min=0))[1]


def chi_squared_quantile(
    p: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function, twice the unit-scale gamma quantile at
    shape :math:`\nu / 2`."""
    p, df = promote_tensors(p, df)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_positive("df", df)
    return 2 * _standard_quantile(p, df / 2)
