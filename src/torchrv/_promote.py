"""Dtype promotion and broadcasting shared by the public operators."""

import functools
from typing import Union

import torch
from torch import Tensor

Numeric = Union[Tensor, float, int]


def _promote_dtype(dtypes: list[torch.dtype]) -> torch.dtype:
    if not dtypes:
        return torch.float64
    dtype = functools.reduce(torch.promote_types, dtypes)
    # Promote low-precision to float32
    if dtype in (torch.float16, torch.bfloat16):
        return torch.float32
    return dtype


def promote_tensors(*args: Numeric) -> tuple[Tensor, ...]:
    """Convert arguments to floating tensors of a common dtype and shape.

    Floating tensors decide the dtype; Python numbers and integer tensors
    alone compute in float64. The results are broadcast against each
    other.
    """
    floating = [
        a.dtype
        for a in args
        if isinstance(a, Tensor) and a.is_floating_point()
    ]
    dtype = _promote_dtype(floating)
    device = next((a.device for a in args if isinstance(a, Tensor)), None)
    tensors = [torch.as_tensor(a, dtype=dtype, device=device) for a in args]
    return torch.broadcast_tensors(*tensors)
