"""Geometric distribution (failures before the first success)."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_not_nan, check_probability, should_validate


def _check(prob: Tensor) -> None:
    check_probability("prob", prob, open_lower=True)


def geometric_density(
    x: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function of the geometric distribution.

    .. math::
        p(x; \pi) = \pi (1 - \pi)^x, \quad x \in \{0, 1, 2, \dots\}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the mass.
    prob : Tensor or float
        Success probability :math:`\pi \in (0, 1]`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Mass values; zero off the non-negative integers.
    """
    x, prob = promote_tensors(x, prob)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(prob)
    on_lattice = (x >= 0) & (x == torch.floor(x))
    xs = torch.where(on_lattice, x, 0.0)
    mass = torch.exp(torch.log(prob) + torch.special.xlog1py(xs, -prob))
    return torch.where(on_lattice, mass, 0.0)


def _log_survival(q: Tensor, prob: Tensor) -> Tensor:
    # (floor(q) + 1) log(1 - prob)
    k = torch.floor(torch.clamp(q, min=0))
    return torch.special.xlog1py(k + 1, -prob)


def geometric_probability(
    q: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function
    :math:`1 - (1 - \pi)^{\lfloor q \rfloor + 1}`."""
    q, prob = promote_tensors(q, prob)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(prob)
    value = -torch.expm1(_log_survival(q, prob))
    return torch.where(q < 0, 0.0, value)


def geometric_survival(
    t: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`(1 - \pi)^{\lfloor t \rfloor + 1}`."""
    t, prob = promote_tensors(t, prob)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(prob)
    value = torch.exp(_log_survival(t, prob))
    return torch.where(t < 0, 1.0, value)


def geometric_quantile(
    p: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function of the geometric distribution.

    .. math::
        Q(p; \pi) = \left\lfloor \frac{\log(1 - p)}{\log(1 - \pi)}
        \right\rfloor

    When :math:`\log(1 - p) / \log(1 - \pi)` is exactly an integer ``k``
    the result is ``k``, one above the smallest ``k`` with
    :math:`F(k) \geq p`.

    Examples
    --------
    >>> geometric_quantile(0.75, 0.5)
    tensor(2., dtype=torch.float64)
    """
    p, prob = promote_tensors(p, prob)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(prob)
    p = torch.clamp(p, 0, 1)
    # + 0.0 turns the -0.0 of prob = 1 into 0.0
    value = torch.floor(torch.log1p(-p) / torch.log1p(-prob)) + 0.0
    value = torch.where(p <= 0, 0.0, value)
    return torch.where(p >= 1, torch.inf, value)
