"""Quantiles of distributions without a closed-form inverse.

A distribution supplies its CDF, survival function and (for continuous
laws) density as closures; the solvers here turn them into a quantile.
Targets above one half are matched against the survival function so
that upper-tail quantiles keep their relative accuracy.
"""

import warnings
from typing import Callable, TypeVar

import torch
from torch import Tensor

from ..root_finding import (
    RootFindingWarning,
    expand_bracket,
    integer_search,
    newton_bisection,
)
from ..special_functions import ConvergenceWarning

_TRANSFORMS = ("real", "positive", "unit")

_T = TypeVar("_T")


def _to_x(u: Tensor, support: str) -> Tensor:
    if support == "positive":
        return torch.exp(u)
    if support == "unit":
        return torch.sigmoid(u)
    return u


def _to_u(x: Tensor, support: str) -> Tensor:
    if support == "positive":
        return torch.log(x)
    if support == "unit":
        return torch.logit(x)
    return x


def _jacobian(x: Tensor, support: str) -> Tensor:
    if support == "positive":
        return x
    if support == "unit":
        return x * (1 - x)
    return torch.ones_like(x)


def _tail_target(
    p: Tensor, complement: Tensor | None
) -> tuple[Tensor, Tensor, Tensor]:
    """Clamp ``p`` and split it into lower-tail and upper-tail targets.

    Returns ``(interior, upper_tail, target)`` where upper-tail elements
    carry ``-(1 - p)``, to be matched against ``-survival``.
    """
    p = torch.clamp(p, 0, 1)
    if complement is None:
        complement = 1 - p
    interior = (p > 0) & (complement > 0)
    upper_tail = p > 0.5
    p_safe = torch.where(interior, p, 0.5)
    complement_safe = torch.where(interior, complement, 0.5)
    target = torch.where(upper_tail, -complement_safe, p_safe)
    return interior, upper_tail & interior, target


def _fold_convergence_warnings(solve: Callable[[], _T]) -> _T:
    """Run a search and report its CDF evaluations' convergence failures
    as a single :class:`ConvergenceWarning`.

    Every evaluation of a truncated series warns on its own, so one search
    would otherwise repeat the same warning dozens of times. Other
    warnings pass through unchanged.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = solve()
    failures = 0
    for record in caught:
        if issubclass(record.category, ConvergenceWarning):
            failures += 1
        else:
            warnings.warn_explicit(
                record.message, record.category, record.filename, record.lineno
            )
    if failures:
        warnings.warn(
            f"{failures} CDF evaluation(s) during the quantile search did not "
            f"converge; the result may be inaccurate",
            ConvergenceWarning,
            stacklevel=4,
        )
    return result


def continuous_quantile(
    p: Tensor,
    probability: Callable[[Tensor], Tensor],
    survival: Callable[[Tensor], Tensor],
    density: Callable[[Tensor], Tensor],
    *,
    support: str = "real",
    lower: Tensor | float = -torch.inf,
    upper: Tensor | float = torch.inf,
    guess: Tensor | None = None,
    complement: Tensor | None = None,
) -> Tensor:
    r"""Invert a continuous CDF.

    Parameters
    ----------
    p : Tensor
        Probabilities; values outside ``[0, 1]`` are clamped.
    probability, survival, density : Callable[[Tensor], Tensor]
        CDF, survival function and density, broadcastable against ``p``.
    support : {"real", "positive", "unit"}
        Shape of the support. The solver works in ``u = x``,
        ``u = log x`` or ``u = logit x`` respectively, so tails of every
        support are reached by a bracket of modest width.
    lower, upper : Tensor or float
        Support infimum and supremum returned for ``p = 0`` and ``p = 1``.
    guess : Tensor, optional
        Rough starting point inside the support.
    complement : Tensor, optional
        ``1 - p`` when the caller knows it more accurately than the
        subtraction.

    Returns
    -------
    Tensor
        ``x`` with ``probability(x) = p``.

    Warns
    -----
    RootFindingWarning
        If an element could not be bracketed or did not converge.
    """
    if support not in _TRANSFORMS:
        raise ValueError(f"support must be one of {_TRANSFORMS}, got {support}")

    interior, upper_tail, target = _tail_target(p, complement)

    def f(u: Tensor) -> Tensor:
        x = _to_x(u, support)
        return torch.where(upper_tail, -survival(x), probability(x))

    def df(u: Tensor) -> Tensor:
        x = _to_x(u, support)
        return density(x) * _jacobian(x, support)

    if guess is None:
        u0 = torch.zeros_like(target)
    else:
        u0 = torch.broadcast_to(_to_u(guess, support), target.shape)
        u0 = torch.where(torch.isfinite(u0), u0, 0.0)

    def solve() -> tuple[Tensor, Tensor, Tensor]:
        lo, hi, bracketed = expand_bracket(f, target, u0 - 1, u0 + 1)
        goal = target
        if not bool(bracketed.all()):
            # Unbracketed elements collapse onto the last lower endpoint
            goal = torch.where(bracketed, target, f(lo))
            hi = torch.where(bracketed, hi, lo)
        eps = torch.finfo(target.dtype).eps
        root, converged = newton_bisection(
            f,
            goal,
            lo,
            hi,
            derivative=df,
            guess=u0,
            xtol=4 * eps,
            rtol=4 * eps,
            maxiter=400,
        )
        return root, converged, bracketed

    root, converged, bracketed = _fold_convergence_warnings(solve)
    unbracketed = int((interior & ~bracketed).sum())
    if unbracketed:
        warnings.warn(
            f"could not bracket the quantile for {unbracketed} element(s)",
            RootFindingWarning,
            stacklevel=3,
        )
    if bool((interior & ~converged).any()):
        warnings.warn(
            f"quantile did not converge for "
            f"{int((interior & ~converged).sum())} element(s)",
            RootFindingWarning,
            stacklevel=3,
        )

    x = _to_x(root, support)
    lower = torch.as_tensor(lower, dtype=x.dtype, device=x.device)
    upper = torch.as_tensor(upper, dtype=x.dtype, device=x.device)
    x = torch.where(p <= 0, lower, x)
    if complement is None:
        x = torch.where(p >= 1, upper, x)
    else:
        x = torch.where(complement <= 0, upper, x)
    return torch.where(torch.isnan(p), torch.nan, x)


def discrete_quantile(
    p: Tensor,
    probability: Callable[[Tensor], Tensor],
    survival: Callable[[Tensor], Tensor],
    lower: Tensor,
    upper: Tensor,
    guess: Tensor,
) -> Tensor:
    r"""Smallest integer ``k`` in ``[lower, upper]`` with ``F(k) >= p``.

    Parameters
    ----------
    p : Tensor
        Probabilities; values outside ``[0, 1]`` are clamped.
    probability, survival : Callable[[Tensor], Tensor]
        CDF and survival function on the integer lattice.
    lower, upper : Tensor
        Support bounds; ``upper`` may be ``inf``.
    guess : Tensor
        Starting point, usually a normal approximation.

    Returns
    -------
    Tensor
        The quantile, ``lower`` for ``p = 0`` and ``upper`` for ``p = 1``.

    Warns
    -----
    RootFindingWarning
        If the search hit its iteration cap.
    """
    p, lower, upper, guess = torch.broadcast_tensors(p, lower, upper, guess)
    interior, upper_tail, target = _tail_target(p, None)

    def f(k: Tensor) -> Tensor:
        return torch.where(upper_tail, -survival(k), probability(k))

    k, converged = _fold_convergence_warnings(
        lambda: integer_search(f, target, lower, upper, guess)
    )
    if bool((interior & ~converged).any()):
        warnings.warn(
            f"quantile search did not converge for "
            f"{int((interior & ~converged).sum())} element(s)",
            RootFindingWarning,
            stacklevel=3,
        )

    k = torch.where(p <= 0, lower, k)
    k = torch.where(p >= 1, upper, k)
    return torch.where(torch.isnan(p), torch.nan, k)
