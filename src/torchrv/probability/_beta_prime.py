"""Beta prime (inverted beta) distribution."""

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
    xs = torch.clamp(x, min=0)
    log_density = (
        torch.special.xlogy(shape1 - 1, xs)
        - (shape1 + shape2) * torch.log1p(xs)
        - log_beta(shape1, shape2)
    )
    log_density = torch.where(torch.isinf(x), -torch.inf, log_density)
    return torch.where(x < 0, -torch.inf, log_density)


def _pair(q: Tensor, shape1: Tensor, shape2: Tensor) -> tuple[Tensor, Tensor]:
    # X / (1 + X) is beta distributed; pass both halves of the unit split
    qs = torch.clamp(q, min=0)
    x = qs / (1 + qs)
    y = 1 / (1 + qs)
    x = torch.where(torch.isinf(qs), 1.0, x)
    return regularized_beta_pair(x, y, shape1, shape2)


def beta_prime_log_density(
    x: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability density function of the beta prime distribution.

    .. math::
        \log f(x; \alpha, \beta) = (\alpha - 1) \log x
        - (\alpha + \beta) \log(1 + x) - \log B(\alpha, \beta)

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    shape1, shape2 : Tensor or float
        Shapes :math:`\alpha, \beta`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values.
    """
    x, shape1, shape2 = promote_tensors(x, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape1, shape2)
    return _log_density(x, shape1, shape2)


def beta_prime_density(
    x: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the beta prime distribution.

    .. math::
        f(x; \alpha, \beta) = \frac{x^{\alpha - 1} (1 + x)^{-\alpha - \beta}}
        {B(\alpha, \beta)}
    """
    return torch.exp(
        beta_prime_log_density(x, shape1, shape2, validate_args=validate_args)
    )


def beta_prime_probability(
    q: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function
    :math:`I_{q / (1 + q)}(\alpha, \beta)`."""
    q, shape1, shape2 = promote_tensors(q, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape1, shape2)
    return _pair(q, shape1, shape2)[0]


def beta_prime_survival(
    t: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`I_{1 / (1 + t)}(\beta, \alpha)`."""
    t, shape1, shape2 = promote_tensors(t, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape1, shape2)
    return _pair(t, shape1, shape2)[1]


def beta_prime_quantile(
    p: Numeric,
    shape1: Numeric,
    shape2: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function of the beta prime distribution, solved
    numerically in log coordinates."""
    p, shape1, shape2 = promote_tensors(p, shape1, shape2)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape1, shape2)

    def probability(x: Tensor) -> Tensor:
        return _pair(x, shape1, shape2)[0]

    def survival(x: Tensor) -> Tensor:
        return _pair(x, shape1, shape2)[1]

    def density(x: Tensor) -> Tensor:
        return torch.exp(_log_density(x, shape1, shape2))

    return continuous_quantile(
        p,
        probability,
        survival,
        density,
        support="positive",
        lower=0.0,
        upper=torch.inf,
        guess=shape1 / shape2,
    )
