"""Gauss-Legendre rules for the large-parameter integrals."""

import functools

import torch
from torch import Tensor

_UNIT_INTERVAL_POINTS = 48


def gauss_legendre_nodes_weights(
    n: int,
    dtype: torch.dtype = torch.float64,
    device: torch.device | None = None,
) -> tuple[Tensor, Tensor]:
    """
    Compute Gauss-Legendre nodes and weights on [-1, 1].

    Uses the Golub-Welsch algorithm (eigenvalues of symmetric tridiagonal matrix).

    Parameters
    ----------
    n : int
        Number of quadrature points.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    nodes : Tensor
        Quadrature nodes, shape (n,), sorted ascending.
    weights : Tensor
        Quadrature weights, shape (n,).

    Raises
    ------
    ValueError
        If n < 1.

    References
    ----------
    Golub, G. H., & Welsch, J. H. (1969). Calculation of Gauss quadrature rules.
    Mathematics of Computation, 23(106), 221-230.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    if n == 1:
        return (
            torch.tensor([0.0], dtype=dtype, device=device),
            torch.tensor([2.0], dtype=dtype, device=device),
        )

    # Jacobi matrix for Legendre: diagonal = 0, off-diagonal[k] = k / sqrt(4k^2 - 1)
    k = torch.arange(1, n, dtype=torch.float64)
    off_diag = k / torch.sqrt(4 * k**2 - 1)
    jacobi = torch.diag(off_diag, diagonal=1) + torch.diag(off_diag, diagonal=-1)

    eigenvalues, eigenvectors = torch.linalg.eigh(jacobi)

    sorted_idx = torch.argsort(eigenvalues)
    nodes = eigenvalues[sorted_idx]
    weights = 2 * eigenvectors[0, sorted_idx] ** 2

    return nodes.to(dtype=dtype, device=device), weights.to(
        dtype=dtype, device=device
    )


@functools.lru_cache(maxsize=None)
def _unit_interval_rule_float64() -> tuple[Tensor, Tensor]:
    nodes, weights = gauss_legendre_nodes_weights(_UNIT_INTERVAL_POINTS)
    return (nodes + 1) / 2, weights / 2


def unit_interval_rule(
    dtype: torch.dtype, device: torch.device
) -> tuple[Tensor, Tensor]:
    """Nodes and weights of the fixed rule mapped onto [0, 1].

    The rule is computed once, in float64, on first use.
    """
    nodes, weights = _unit_interval_rule_float64()
    return nodes.to(dtype=dtype, device=device), weights.to(
        dtype=dtype, device=device
    )
