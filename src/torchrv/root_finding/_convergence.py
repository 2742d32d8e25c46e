"""Convergence utilities for root finding."""

import torch
from torch import Tensor


def default_tolerances(dtype: torch.dtype) -> dict[str, float]:
    """Return dtype-appropriate default tolerances.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    dict[str, float]
        Dictionary with keys 'xtol' and 'rtol'.
    """
    if dtype in (torch.float16, torch.bfloat16):
        return {"xtol": 1e-3, "rtol": 1e-2}
    elif dtype == torch.float32:
        return {"xtol": 1e-6, "rtol": 1e-5}
    else:  # float64 and others
        return {"xtol": 1e-14, "rtol": 1e-13}


def check_convergence(
    x_old: Tensor,
    x_new: Tensor,
    xtol: float,
    rtol: float,
) -> Tensor:
    """Check convergence for each element.

    Convergence is achieved when ``|x_new - x_old| <= xtol + rtol * |x_new|``.

    Parameters
    ----------
    x_old : Tensor
        Previous x values.
    x_new : Tensor
        Current x values.
    xtol : float
        Absolute tolerance on x.
    rtol : float
        Relative tolerance on x.

    Returns
    -------
    Tensor
        Boolean mask where True indicates convergence.
    """
    return torch.abs(x_new - x_old) <= xtol + rtol * torch.abs(x_new)
