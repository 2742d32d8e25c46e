"""Logarithmic (log-series) distribution."""

import math

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ..special_functions import unit_interval_rule
from ._lattice import lattice_sum
from ._quantile import discrete_quantile
from ._validation import check_not_nan, check_probability, should_validate

_LOG_2 = math.log(2.0)

# Longest head summed term by term
_HEAD_TERMS = 4096

# The tail integrand is cut off once it has fallen to exp(-_TAIL_DECAY)
_TAIL_DECAY = 50.0


def _check(prob: Tensor) -> None:
    check_probability("prob", prob, open_lower=True, open_upper=True)


def _log_mass(k: Tensor, prob: Tensor) -> Tensor:
    return k * torch.log(prob) - torch.log(k) - torch.log(-torch.log1p(-prob))


def _log1mexp(w: Tensor) -> Tensor:
    """``log(1 - exp(w))`` for ``w <= 0``."""
    return torch.where(
        w < -_LOG_2,
        torch.log1p(-torch.exp(w)),
        torch.log(-torch.expm1(w)),
    )


def _tail(k: Tensor, prob: Tensor) -> Tensor:
    r"""Survival :math:`P(X > k)` for integer ``k >= 1`` by quadrature.

    Substituting :math:`w = \log(1 - t)`,

    .. math::
        \sum_{j > k} \frac{\pi^j}{j} = \int_0^\pi \frac{t^k}{1 - t}\,dt
        = \pi^k \int_{\log(1 - \pi)}^0
        \exp\{k [\log(1 - e^w) - \log \pi]\}\,dw.

    The integrand falls from one at the lower limit. Where it is still
    above :math:`e^{-1}` it can span many units of ``w`` (when
    :math:`k (1 - \pi)` is small) and that stretch is halved; the decay
    from :math:`e^{-1}` to :math:`e^{-50}` is the last piece.
    """
    nodes, weights = unit_interval_rule(k.dtype, k.device)
    log_prob = torch.log(prob)
    start = torch.log1p(-prob)
    knee = torch.log(-torch.expm1(log_prob - 1 / k))
    end = torch.log(-torch.expm1(log_prob - _TAIL_DECAY / k))
    middle = (start + knee) / 2

    k_ = k.unsqueeze(-1)
    log_prob_ = log_prob.unsqueeze(-1)
    area = torch.zeros_like(k)
    for a, b in ((start, middle), (middle, knee), (knee, end)):
        w = a.unsqueeze(-1) + (b - a).unsqueeze(-1) * nodes
        integrand = torch.exp(k_ * (_log1mexp(w) - log_prob_))
        area = area + (b - a) * (integrand * weights).sum(-1)
    return torch.exp(
        k * log_prob + torch.log(area) - torch.log(-torch.log1p(-prob))
    )


def _pair(q: Tensor, prob: Tensor) -> tuple[Tensor, Tensor]:
    k = torch.floor(q)
    below = k < 1
    above = torch.isposinf(k)
    # Masses decrease from k = 1: a short head below the mean is summed
    # term by term, everything further out goes through the tail integral
    mean = -prob / (torch.log1p(-prob) * (1 - prob))
    head = ~below & ~above & (k < mean) & (k <= _HEAD_TERMS)
    tail = ~below & ~above & ~head

    def log_mass(j: Tensor) -> Tensor:
        return _log_mass(j, prob.unsqueeze(-1))

    head_sum = lattice_sum(
        log_mass, torch.where(head, torch.ones_like(k), torch.nan), k
    )
    tail_sum = _tail(torch.where(tail, k, 1.0), prob)
    value = torch.where(head, head_sum, 1 - tail_sum)
    complement = torch.where(head, 1 - head_sum, tail_sum)
    value = torch.where(below, 0.0, torch.where(above, 1.0, value))
    complement = torch.where(below, 1.0, torch.where(above, 0.0, complement))
    return value, complement


def logarithmic_density(
    x: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function of the logarithmic distribution.

    .. math::
        p(x; \pi) = \frac{-\pi^x}{x \log(1 - \pi)},
        \quad x \in \{1, 2, \dots\}

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the mass.
    prob : Tensor or float
        Parameter :math:`\pi \in (0, 1)`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Mass values; zero off the positive integers.
    """
    x, prob = promote_tensors(x, prob)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(prob)
    on_lattice = (x >= 1) & (x == torch.floor(x)) & torch.isfinite(x)
    xs = torch.where(on_lattice, x, 1.0)
    return torch.where(on_lattice, torch.exp(_log_mass(xs, prob)), 0.0)


def logarithmic_probability(
    q: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function of the logarithmic distribution.

    Below the mean, heads of up to 4096 terms are summed directly. Further
    out the survival function comes from its integral representation and
    the CDF is its complement, so the cost does not grow with ``q`` or
    with :math:`1 / (1 - \pi)`.
    """
    q, prob = promote_tensors(q, prob)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(prob)
    return _pair(q, prob)[0]


def logarithmic_survival(
    t: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    """Survival function of the logarithmic distribution."""
    t, prob = promote_tensors(t, prob)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(prob)
    return _pair(t, prob)[1]


def logarithmic_quantile(
    p: Numeric, prob: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function: the smallest ``k \geq 1`` with :math:`F(k) \geq p`."""
    p, prob = promote_tensors(p, prob)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(prob)
    return discrete_quantile(
        p,
        lambda k: _pair(k, prob)[0],
        lambda k: _pair(k, prob)[1],
        torch.ones_like(prob),
        torch.full_like(prob, torch.inf),
        torch.ones_like(prob),
    )
