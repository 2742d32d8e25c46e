"""Elementary functions evaluated without catastrophic cancellation."""

import torch
from torch import Tensor

# (-1)^(k + 1) / k for k = 2, ..., 31, the Taylor coefficients of log(1 + x) - x
_LOG1PMX_COEFFICIENTS = tuple((-1.0) ** (k + 1) / k for k in range(2, 32))
_LOG1PMX_SERIES_RADIUS = 0.25

# 1/12, -1/360, 1/1260, -1/1680, 1/1188
_STIRLING_COEFFICIENTS = (
    1.0 / 12.0,
    -1.0 / 360.0,
    1.0 / 1260.0,
    -1.0 / 1680.0,
    1.0 / 1188.0,
)


def log1pmx(x: Tensor) -> Tensor:
    r"""Compute :math:`\log(1 + x) - x`.

    For :math:`|x| < 1/4` the Taylor series is summed with a fixed
    number of terms; elsewhere the direct expression has no
    cancellation.

    Parameters
    ----------
    x : Tensor
        Input, ``x >= -1``.

    Returns
    -------
    Tensor
        ``log1p(x) - x``; ``-inf`` at ``x = -1``.
    """
    small = x.abs() < _LOG1PMX_SERIES_RADIUS
    xs = torch.where(small, x, torch.zeros_like(x))
    poly = torch.zeros_like(x)
    for c in reversed(_LOG1PMX_COEFFICIENTS):
        poly = poly * xs + c
    series = xs * xs * poly
    direct = torch.log1p(x) - x
    direct = torch.where(torch.isposinf(x), -torch.inf, direct)
    return torch.where(small, series, direct)


def stirling_correction(z: Tensor) -> Tensor:
    r"""Remainder of Stirling's approximation to :math:`\log\Gamma(z)`.

    .. math::
        \delta(z) = \log\Gamma(z) - (z - \tfrac{1}{2})\log z + z
        - \tfrac{1}{2}\log 2\pi

    Accurate to double precision for ``z >= 10``.
    """
    r = torch.reciprocal(z)
    r2 = r * r
    poly = torch.full_like(z, _STIRLING_COEFFICIENTS[-1])
    for c in reversed(_STIRLING_COEFFICIENTS[:-1]):
        poly = poly * r2 + c
    return poly * r
