"""Logarithms of the beta function and binomial coefficients."""

import math

import torch
from torch import Tensor

from .._promote import Numeric, promote_tensors
from ._elementary import stirling_correction

_LOG_SQRT_2PI = 0.5 * math.log(2 * math.pi)

# Below this argument lgamma differences are exact enough; above it the
# Stirling form avoids cancellation between large lgamma values.
_STIRLING_THRESHOLD = 10.0


def log_beta(a: Numeric, b: Numeric) -> Tensor:
    r"""Natural logarithm of the beta function.

    .. math::
        \log B(a, b) = \log\Gamma(a) + \log\Gamma(b) - \log\Gamma(a + b)

    When either argument is large the lgamma terms nearly cancel, so the
    difference is taken analytically through Stirling's series and only
    the small remainders :math:`\delta` are subtracted.

    Parameters
    ----------
    a, b : Tensor or float
        Positive arguments.

    Returns
    -------
    Tensor
        ``log(B(a, b))``.

    Examples
    --------
    >>> log_beta(torch.tensor(3.0), torch.tensor(3.0)).exp()
    tensor(0.0333)
    """
    a, b = promote_tensors(a, b)
    p = torch.minimum(a, b)
    q = torch.maximum(a, b)
    pq = p + q

    direct = torch.lgamma(p) + torch.lgamma(q) - torch.lgamma(pq)

    q_safe = torch.where(q >= _STIRLING_THRESHOLD, q, _STIRLING_THRESHOLD)
    p_safe = torch.where(p >= _STIRLING_THRESHOLD, p, _STIRLING_THRESHOLD)
    correction_q = stirling_correction(q_safe) - stirling_correction(
        q_safe + p
    )
    ratio = torch.log1p(-p / pq)

    # q large, p small
    mixed = (
        torch.lgamma(p)
        + correction_q
        + p
        - p * torch.log(pq)
        + (q - 0.5) * ratio
    )

    # both large
    correction = stirling_correction(p_safe) + correction_q
    both = (
        -0.5 * torch.log(q)
        + _LOG_SQRT_2PI
        + correction
        + (p - 0.5) * torch.log(p / pq)
        + q * ratio
    )

    return torch.where(
        p >= _STIRLING_THRESHOLD,
        both,
        torch.where(q >= _STIRLING_THRESHOLD, mixed, direct),
    )


def log_binomial_coefficient(n: Numeric, k: Numeric) -> Tensor:
    r"""Natural logarithm of the binomial coefficient :math:`\binom{n}{k}`.

    .. math::
        \log\binom{n}{k} = -\log(n + 1) - \log B(n - k + 1, k + 1)

    Never forms factorials, so it stays finite for counts far beyond the
    range of ``math.comb`` converted to float.

    Parameters
    ----------
    n : Tensor or float
        Non-negative count.
    k : Tensor or float
        Selection size, ``0 <= k <= n``.

    Returns
    -------
    Tensor
        ``log(C(n, k))``.
    """
    n, k = promote_tensors(n, k)
    return -torch.log1p(n) - log_beta(n - k + 1, k + 1)
