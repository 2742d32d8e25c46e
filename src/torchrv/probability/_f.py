"""F (Fisher-Snedecor) distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import log_beta, regularized_beta_pair
from ._quantile import continuous_quantile
from ._validation import check_not_nan, check_positive, should_validate


def _check(df1: Tensor, df2: Tensor) -> None:
    check_positive("df1", df1)
    check_positive("df2", df2)


def _log_density(x: Tensor, df1: Tensor, df2: Tensor) -> Tensor:
    xs = torch.clamp(x, min=0)
    half1 = df1 / 2
    half2 = df2 / 2
    log_density = (
        half1 * torch.log(df1)
        + half2 * torch.log(df2)
        + torch.special.xlogy(half1 - 1, xs)
        - (half1 + half2) * torch.log(df2 + df1 * xs)
        - log_beta(half1, half2)
    )
    log_density = torch.where(torch.isinf(x), -torch.inf, log_density)
    return torch.where(x < 0, -torch.inf, log_density)


def _pair(q: Tensor, df1: Tensor, df2: Tensor) -> tuple[Tensor, Tensor]:
    qs = torch.clamp(q, min=0)
    scaled = df1 * qs
    x = scaled / (scaled + df2)
    y = df2 / (scaled + df2)
    x = torch.where(torch.isinf(qs), 1.0, x)
    return regularized_beta_pair(x, y, df1 / 2, df2 / 2)


def f_log_density(
    x: Numeric, df1: Numeric, df2: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability density function of the F distribution.

    .. math::
        f(x; n, m) = \frac{n^{n/2} m^{m/2} x^{n/2 - 1}}
        {(m + n x)^{(n + m)/2} B(n/2, m/2)}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    df1 : Tensor or float
        Numerator degrees of freedom :math:`n`. Must be positive.
    df2 : Tensor or float
        Denominator degrees of freedom :math:`m`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values.
    """
    x, df1, df2 = promote_tensors(x, df1, df2)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(df1, df2)
    return _log_density(x, df1, df2)


def f_density(
    x: Numeric, df1: Numeric, df2: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of the F distribution."""
    return torch.exp(f_log_density(x, df1, df2, validate_args=validate_args))


def f_probability(
    q: Numeric, df1: Numeric, df2: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function of the F distribution.

    .. math::
        F(q; n, m) = I_{nq / (nq + m)}\left(\frac{n}{2}, \frac{m}{2}\right)
    """
    q, df1, df2 = promote_tensors(q, df1, df2)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(df1, df2)
    return _pair(q, df1, df2)[0]


def f_survival(
    t: Numeric, df1: Numeric, df2: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`I_{m / (nt + m)}(m / 2, n / 2)`."""
    t, df1, df2 = promote_tensors(t, df1, df2)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(df1, df2)
    return _pair(t, df1, df2)[1]


def f_quantile(
    p: Numeric, df1: Numeric, df2: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function of the F distribution, solved numerically."""
    p, df1, df2 = promote_tensors(p, df1, df2)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(df1, df2)

    def probability(x: Tensor) -> Tensor:
        return _pair(x, df1, df2)[0]

    def survival(x: Tensor) -> Tensor:
        return _pair(x, df1, df2)[1]

    def density(x: Tensor) -> Tensor:
        return torch.exp(_log_density(x, df1, df2))

    return continuous_quantile(
        p,
        probability,
        survival,
        density,
        support="positive",
        lower=0.0,
        upper=torch.inf,
    )
