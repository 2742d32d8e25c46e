"""Beta distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import log_beta, regularized_beta_pair
from ._quantile import continuous_quantile
from ._validation import check_not_nan, check_positive, should_validate


def _check(shape1: Tensor, shape2: Tensor) -> None:
    check_positive("shape1", shape1)
    check_positive("shape2", shape2)


def _log_density(x: Tensor, shape1: Tensor, shape2: Tensor) -> Tensor:
    xs = torch.clamp(x, 0, 1)
    log_density = (
        torch.special.xlogy(shape1 - 1, xs)
        + torch.special.xlog1py(shape2 - 1, -xs)
        - log_beta(shape1, shape2)
    )
    return torch.where((x < 0) | (x > 1), -torch.inf, log_density)


def beta_log_density(
    x: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability density function of the beta distribution.

    .. math::
        \log f(x; \alpha, \beta) = (\alpha - 1) \log x
        + (\beta - 1) \log(1 - x) - \log B(\alpha, \beta)

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    shape1 : Tensor or float
        Shape :math:`\alpha`. Must be positive.
    shape2 : Tensor or float
        Shape :math:`\beta`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values; ``-inf`` outside ``[0, 1]``.
    """
    x, shape1, shape2 = promote_tensors(x, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape1, shape2)
    return _log_density(x, shape1, shape2)


def beta_density(
    x: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the beta distribution.

    .. math::
        f(x; \alpha, \beta) = \frac{x^{\alpha - 1} (1 - x)^{\beta - 1}}
        {B(\alpha, \beta)}

    Examples
    --------
    >>> beta_density(torch.tensor([0.25, 0.5]), 2.0, 2.0)
    tensor([1.1250, 1.5000])
    """
    return torch.exp(
        beta_log_density(x, shape1, shape2, validate_args=validate_args)
    )


def beta_probability(
    q: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function :math:`I_q(\alpha, \beta)`."""
    q, shape1, shape2 = promote_tensors(q, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape1, shape2)
    qs = torch.clamp(q, 0, 1)
    return regularized_beta_pair(qs, 1 - qs, shape1, shape2)[0]


def beta_survival(
    t: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`1 - I_t(\alpha, \beta)`, computed
    directly as :math:`I_{1 - t}(\beta, \alpha)`."""
    t, shape1, shape2 = promote_tensors(t, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape1, shape2)
    ts = torch.clamp(t, 0, 1)
    return regularized_beta_pair(ts, 1 - ts, shape1, shape2)[1]


def beta_quantile(
    p: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function of the beta distribution.

    Solved numerically in logit coordinates, starting from the mean.

    Parameters
    ----------
    p : Tensor or float
        Probabilities.
    shape1, shape2 : Tensor or float
        Positive shapes.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Quantiles in ``[0, 1]``.
    """
    p, shape1, shape2 = promote_tensors(p, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape1, shape2)

    def probability(x: Tensor) -> Tensor:
        return regularized_beta_pair(x, 1 - x, shape1, shape2)[0]

    def survival(x: Tensor) -> Tensor:
        return regularized_beta_pair(x, 1 - x, shape1, shape2)[1]

    def density(x: Tensor) -> Tensor:
        return torch.exp(_log_density(x, shape1, shape2))

    return continuous_quantile(
        p,
        probability,
        survival,
        density,
        support="unit",
        lower=0.0,
        upper=1.0,
        guess=shape1 / (shape1 + shape2),
    )
