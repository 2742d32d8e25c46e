"""Student's t distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import log_beta, regularized_beta_pair
from ._quantile import continuous_quantile
from ._validation import check_not_nan, check_positive, should_validate


def _log_density(x: Tensor, df: Tensor) -> Tensor:
    return (
        -(df + 1) / 2 * torch.log1p(x * x / df)
        - 0.5 * torch.log(df)
        - log_beta(df / 2, torch.full_like(df, 0.5))
    )


def _half_tail(x: Tensor, df: Tensor) -> Tensor:
    r"""Two-sided tail :math:`P(|T| > |x|) = I_{\nu / (\nu + x^2)}(\nu/2, 1/2)`,
    halved."""
    square = x * x
    large = square > df
    # ratio of the smaller to the larger of df and x^2, never overflowing
    ratio = torch.where(large, df / square, square / df)
    x_beta = torch.where(large, ratio / (1 + ratio), 1 / (1 + ratio))
    y_beta = torch.where(large, 1 / (1 + ratio), ratio / (1 + ratio))
    tail = regularized_beta_pair(x_beta, y_beta, df / 2, 0.5)[0]
    return 0.5 * tail


def t_log_density(
    x: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability density function of Student's t distribution.

    .. math::
        \log f(x; \nu) = -\frac{\nu + 1}{2} \log\left(1 + \frac{x^2}{\nu}\right)
        - \frac{1}{2}\log\nu - \log B\left(\frac{\nu}{2}, \frac{1}{2}\right)

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
    return _log_density(x, df)


def t_density(
    x: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability density function of Student's t distribution."""
    return torch.exp(t_log_density(x, df, validate_args=validate_args))


def t_probability(
    q: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function of Student's t distribution.

    .. math::
        F(q; \nu) = \begin{cases}
            \frac{1}{2} I_{\nu / (\nu + q^2)}(\nu/2, 1/2) & q < 0 \\
            1 - \frac{1}{2} I_{\nu / (\nu + q^2)}(\nu/2, 1/2) & q \geq 0
        \end{cases}

    Examples
    --------
    >>> t_probability(0.0, 3.0)
    tensor(0.5000, dtype=torch.float64)
    """
    q, df = promote_tensors(q, df)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_positive("df", df)
    tail = _half_tail(q, df)
    return torch.where(q < 0, tail, 1 - tail)


def t_survival(
    t: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function, :math:`F(-t)` by symmetry."""
    t, df = promote_tensors(t, df)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_positive("df", df)
    tail = _half_tail(t, df)
    return torch.where(t > 0, tail, 1 - tail)


def t_quantile(
    p: Numeric, df: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function of Student's t distribution.

    By symmetry only the positive half is solved: the magnitude is the
    point where the upper tail equals :math:`\min(p, 1 - p)`, found in
    log coordinates, and the sign follows :math:`p - 1/2`.

    Parameters
    ----------
    p : Tensor or float
        Probabilities.
    df : Tensor or float
        Degrees of freedom. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Quantiles; ``0`` at the median and ``-inf``/``inf`` at ``p = 0``
        and ``p = 1``.
    """
    p, df = promote_tensors(p, df)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_positive("df", df)
    p = torch.clamp(p, 0, 1)
    tail = torch.where(p < 0.5, p, 1 - p)
    median = tail == 0.5
    tail = torch.where(median, 0.25, tail)

    def probability(x: Tensor) -> Tensor:
        return 1 - _half_tail(x, df)

    def survival(x: Tensor) -> Tensor:
        return _half_tail(x, df)

    def density(x: Tensor) -> Tensor:
        return torch.exp(_log_density(x, df))

    magnitude = continuous_quantile(
        1 - tail,
        probability,
        survival,
        density,
        support="positive",
        lower=0.0,
        upper=torch.inf,
        guess=torch.abs(torch.special.ndtri(tail)),
        complement=tail,
    )
    value = torch.where(p < 0.5, -magnitude, magnitude)
    value = torch.where(median, 0.0, value)
    return torch.where(torch.isnan(p), torch.nan, value)
