"""Gamma distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import regularized_gamma_pair
from ._quantile import continuous_quantile
from ._validation import check_not_nan, check_positive, should_validate


def _check(shape: Tensor, scale: Tensor) -> None:
    check_positive("shape", shape)
    check_positive("scale", scale)


def _standard_log_density(x: Tensor, shape: Tensor) -> Tensor:
    xs = torch.clamp(x, min=0)
    log_density = (
        torch.special.xlogy(shape - 1, xs) - xs - torch.lgamma(shape)
    )
    log_density = torch.where(torch.isinf(x), -torch.inf, log_density)
    return torch.where(x < 0, -torch.inf, log_density)


def _standard_quantile(p: Tensor, shape: Tensor) -> Tensor:
    """Quantile of the unit-scale gamma distribution.

    Starts from the Wilson-Hilferty cube approximation, or from the
    small-``x`` expansion ``P(a, x) ~ x^a / Gamma(a + 1)`` where that is
    negative or ``shape < 1``, and refines with the quantile solver.
    """
    p, shape = torch.broadcast_tensors(p, shape)
    z = torch.special.ndtri(torch.clamp(p, 0, 1))
    c = 1 / (9 * shape)
    wilson_hilferty = shape * torch.pow(1 - c + z * torch.sqrt(c), 3)
    small = torch.exp((torch.log(p) + torch.lgamma(shape + 1)) / shape)
    guess = torch.where(
        (shape < 1) | (wilson_hilferty <= 0), small, wilson_hilferty
    )

    def probability(x: Tensor) -> Tensor:
        return regularized_gamma_pair(shape, x)[0]

    def survival(x: Tensor) -> Tensor:
        return regularized_gamma_pair(shape, x)[1]

    def density(x: Tensor) -> Tensor:
        return torch.exp(_standard_log_density(x, shape))

    return continuous_quantile(
        p,
        probability,
        survival,
        density,
        support="positive",
        lower=0.0,
        upper=torch.inf,
        guess=guess,
    )


def gamma_log_density(
    x: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Log probability density function of the gamma distribution.

    .. math::
        \log f(x; \alpha, \sigma) = (\alpha - 1) \log x - \frac{x}{\sigma}
        - \log\Gamma(\alpha) - \alpha \log\sigma

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the log density.
    shape : Tensor or float
        Shape :math:`\alpha`. Must be positive.
    scale : Tensor or float
        Scale :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log density values; ``-inf`` for ``x < 0``.
    """
    x, shape, scale = promote_tensors(x, shape, scale)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(shape, scale)
    return _standard_log_density(x / scale, shape) - torch.log(scale)


def gamma_density(
    x: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Probability density function of the gamma distribution.

    .. math::
        f(x; \alpha, \sigma) = \frac{1}{\sigma\Gamma(\alpha)}
        \left(\frac{x}{\sigma}\right)^{\alpha - 1} e^{-x / \sigma}

    Examples
    --------
    >>> gamma_density(torch.tensor([1.0, 2.0]), 2.0, 1.0)
    tensor([0.3679, 0.2707])
    """
    return torch.exp(
        gamma_log_density(x, shape, scale, validate_args=validate_args)
    )


def gamma_probability(
    q: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Cumulative distribution function of the gamma distribution.

    .. math::
        F(q; \alpha, \sigma) = P(\alpha, q / \sigma)

    where :math:`P(a, x)` is the regularized lower incomplete gamma
    function.

    Examples
    --------
    >>> gamma_probability(torch.tensor([1.0, 2.0, 3.0]), 2.0, 1.0)
    tensor([0.2642, 0.5940, 0.8009])
    """
    q, shape, scale = promote_tensors(q, shape, scale)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(shape, scale)
    return regularized_gamma_pair(shape, torch.clamp(q / scale, min=0))[0]


def gamma_survival(
    t: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Survival function :math:`Q(\alpha, t / \sigma)`."""
    t, shape, scale = promote_tensors(t, shape, scale)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(shape, scale)
    return regularized_gamma_pair(shape, torch.clamp(t / scale, min=0))[1]


def gamma_quantile(
    p: Numeric,
    shape: Numeric,
    scale: Numeric,
    *,
    validate_args: bool | None = None,
) -> Tensor:
    r"""Quantile function of the gamma distribution.

    Inverts :math:`P(\alpha, x / \sigma) = p` numerically; there is no
    closed form.

    Parameters
    ----------
    p : Tensor or float
        Probabilities. Values outside ``[0, 1]`` map to ``0`` and
        ``inf``.
    shape : Tensor or float
        Shape :math:`\alpha`. Must be positive.
    scale : Tensor or float
        Scale :math:`\sigma`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Quantiles.

    Warns
    -----
    RootFindingWarning
        If the solver fails to converge for some element.
    """
    p, shape, scale = promote_tensors(p, shape, scale)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(shape, scale)
    return scale * _standard_quantile(p, shape)
