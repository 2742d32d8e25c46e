"""Poisson distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import regularized_gamma_pair
from ._quantile import discrete_quantile
from ._validation import check_not_nan, check_positive, should_validate


def _pair(q: Tensor, lam: Tensor) -> tuple[Tensor, Tensor]:
    # F(k) = Q(k + 1, lambda)
    k = torch.floor(q)
    below = k < 0
    above = torch.isposinf(k)
    ks = torch.where(below | above, 0.0, k)
    lower, upper = regularized_gamma_pair(ks + 1, lam)
    value = torch.where(below, 0.0, torch.where(above, 1.0, upper))
    complement = torch.where(below, 1.0, torch.where(above, 0.0, lower))
    return value, complement


def poisson_log_density(
    x: Numeric, lam: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Log probability mass function of the Poisson distribution.

    .. math::
        \log p(x; \lambda) = x \log\lambda - \lambda - \log\Gamma(x + 1)

    Parameters
    ----------
    x : Tensor or float
        Number of events.
    lam : Tensor or float
        Rate :math:`\lambda`. Must be positive.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Log mass values.
    """
    x, lam = promote_tensors(x, lam)
    if should_validate(validate_args):
        check_not_nan("x", x)
        check_positive("lam", lam)
    on_lattice = (x >= 0) & (x == torch.floor(x)) & torch.isfinite(x)
    xs = torch.where(on_lattice, x, 0.0)
    log_mass = torch.special.xlogy(xs, lam) - lam - torch.lgamma(xs + 1)
    return torch.where(on_lattice, log_mass, -torch.inf)


def poisson_density(
    x: Numeric, lam: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function :math:`\lambda^x e^{-\lambda} / x!`.

    Examples
    --------
    >>> poisson_density(torch.tensor([0.0, 1.0, 2.0]), 1.0)
    tensor([0.3679, 0.3679, 0.1839])
    """
    return torch.exp(poisson_log_density(x, lam, validate_args=validate_args))


def poisson_probability(
    q: Numeric, lam: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function
    :math:`Q(\lfloor q \rfloor + 1, \lambda)`."""
    q, lam = promote_tensors(q, lam)
    if should_validate(validate_args):
        check_not_nan("q", q)
        check_positive("lam", lam)
    return _pair(q, lam)[0]


def poisson_survival(
    t: Numeric, lam: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`P(\lfloor t \rfloor + 1, \lambda)`."""
    t, lam = promote_tensors(t, lam)
    if should_validate(validate_args):
        check_not_nan("t", t)
        check_positive("lam", lam)
    return _pair(t, lam)[1]


def poisson_quantile(
    p: Numeric, lam: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function: the smallest ``k`` with :math:`F(k) \geq p`."""
    p, lam = promote_tensors(p, lam)
    if should_validate(validate_args):
        check_not_nan("p", p)
        check_positive("lam", lam)
    guess = lam + torch.sqrt(lam) * torch.special.ndtri(torch.clamp(p, 0, 1))
    return discrete_quantile(
        p,
        lambda k: _pair(k, lam)[0],
        lambda k: _pair(k, lam)[1],
        torch.zeros_like(lam),
        torch.full_like(lam, torch.inf),
        guess,
    )
