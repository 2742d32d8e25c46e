"""Benford (first significant digit) distribution."""

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._validation import check_integer, check_not_nan, should_validate


def _check(base: Tensor) -> None:
    check_integer("base", base, minimum=2)


def _probability(k: Tensor, base: Tensor) -> Tensor:
    # log_b(1 + k) on the support, clamped to [0, 1] outside it
    inside = torch.clamp(k, k.new_zeros(()), base - 1)
    return torch.log1p(inside) / torch.log(base)


def benford_density(
    x: Numeric, base: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Probability mass function of Benford's law.

    .. math::
        p(x; b) = \log_b\left(1 + \frac{1}{x}\right),
        \quad x \in \{1, \dots, b - 1\}

    Parameters
    ----------
    x : Tensor or float
        Leading digit.
    base : Tensor or int
        Numeral base :math:`b \geq 2`.
    validate_args : bool, optional
        Check argument domains.

    Returns
    -------
    Tensor
        Mass values.

    Examples
    --------
    >>> benford_density(1, 10)
    tensor(0.3010, dtype=torch.float64)
    """
    x, base = promote_tensors(x, base)
    if should_validate(validate_args):
        check_not_nan("x", x)
        _check(base)
    inside = (x >= 1) & (x <= base - 1) & (x == torch.floor(x))
    xs = torch.where(inside, x, 1.0)
    return torch.where(inside, torch.log1p(1 / xs) / torch.log(base), 0.0)


def benford_probability(
    q: Numeric, base: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Cumulative distribution function :math:`\log_b(1 + \lfloor q \rfloor)`."""
    q, base = promote_tensors(q, base)
    if should_validate(validate_args):
        check_not_nan("q", q)
        _check(base)
    k = torch.floor(q)
    value = _probability(k, base)
    value = torch.where(k < 1, 0.0, value)
    return torch.where(k >= base - 1, 1.0, value)


def benford_survival(
    t: Numeric, base: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Survival function :math:`\log_b(b / (1 + \lfloor t \rfloor))`."""
    t, base = promote_tensors(t, base)
    if should_validate(validate_args):
        check_not_nan("t", t)
        _check(base)
    k = torch.clamp(torch.floor(t), t.new_zeros(()), base - 1)
    value = (torch.log(base) - torch.log1p(k)) / torch.log(base)
    value = torch.where(t < 1, 1.0, value)
    return torch.where(torch.floor(t) >= base - 1, 0.0, value)


def benford_quantile(
    p: Numeric, base: Numeric, *, validate_args: bool | None = None
) -> Tensor:
    r"""Quantile function :math:`\lceil b^p \rceil - 1`.

    The closed form is followed by a one-step correction against the CDF,
    so rounding in :math:`b^p` never moves the result off the smallest
    ``k`` with :math:`F(k) \geq p`.
    """
    p, base = promote_tensors(p, base)
    if should_validate(validate_args):
        check_not_nan("p", p)
        _check(base)
    p = torch.clamp(p, 0, 1)
    k = torch.ceil(torch.pow(base, p)) - 1
    k = torch.clamp(k, torch.ones_like(base), base - 1)
    k = torch.where((k > 1) & (_probability(k - 1, base) >= p), k - 1, k)
    k = torch.where((k < base - 1) & (_probability(k, base) < p), k + 1, k)
    k = torch.where(p <= 0, 1.0, k)
    k = torch.where(p >= 1, base - 1, k)
    return torch.where(torch.isnan(p), torch.nan, k)
