"""Safeguarded Newton iteration inside a bracket."""

from typing import Callable

import torch
from torch import Tensor

from ._convergence import check_convergence, default_tolerances
from ._exceptions import BracketError


def newton_bisection(
    f: Callable[[Tensor], Tensor],
    target: Tensor,
    lower: Tensor,
    upper: Tensor,
    *,
    derivative: Callable[[Tensor], Tensor] | None = None,
    guess: Tensor | None = None,
    xtol: float | None = None,
    rtol: float | None = None,
    maxiter: int = 200,
) -> tuple[Tensor, Tensor]:
    r"""
    Solve ``f(x) = target`` for a nondecreasing ``f`` inside a bracket.

    Each iteration proposes a Newton step from the current point and
    accepts it only if it lands strictly inside the current bracket;
    otherwise the bracket midpoint is used. The bracket is then updated
    from the sign of the residual, so it always contains the solution.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Vectorized nondecreasing function.
    target : Tensor
        Values to solve for.
    lower, upper : Tensor
        Bracket endpoints with ``f(lower) <= target <= f(upper)``.
    derivative : Callable[[Tensor], Tensor], optional
        Derivative of ``f``. Without it the iteration is pure bisection.
    guess : Tensor, optional
        Starting point. Defaults to the bracket midpoint.
    xtol : float, optional
        Absolute tolerance. Default: dtype-aware (see
        :func:`default_tolerances`).
    rtol : float, optional
        Relative tolerance. Default: dtype-aware.
    maxiter : int, default=200
        Maximum iterations.

    Returns
    -------
    tuple[Tensor, Tensor]
        - **root** -- Best estimate of the solution.
        - **converged** -- Boolean tensor, True where the bracket width or
          the last step fell below ``xtol + rtol * |root|``, or the
          residual was exactly zero.

    Raises
    ------
    BracketError
        If ``lower > upper`` or ``f`` fails to enclose the target for
        any element.

    Examples
    --------
    >>> root, converged = newton_bisection(
    ...     lambda x: x**3, torch.tensor([8.0]), torch.tensor([0.0]),
    ...     torch.tensor([5.0]), derivative=lambda x: 3 * x**2
    ... )
    >>> float(root)  # doctest: +ELLIPSIS
    2.0...

    Notes
    -----
    If an accepted Newton step fails to halve the bracket over two
    iterations, the next step is forced to bisect. The bracket width
    therefore shrinks geometrically and convergence is guaranteed even
    where rounding noise in ``f`` stalls the Newton steps.
    """
    if torch.any(lower > upper):
        raise BracketError("Invalid bracket: lower must not exceed upper")

    f_lower = f(lower)
    f_upper = f(upper)
    if torch.any((f_lower > target) | (f_upper < target)):
        invalid = (f_lower > target) | (f_upper < target)
        raise BracketError(
            f"Invalid bracket: {int(invalid.sum())} of {invalid.numel()} "
            f"intervals do not enclose the target."
        )

    defaults = default_tolerances(lower.dtype)
    if xtol is None:
        xtol = defaults["xtol"]
    if rtol is None:
        rtol = defaults["rtol"]

    if guess is None:
        x = (lower + upper) / 2
    else:
        x = torch.where(
            (guess > lower) & (guess < upper), guess, (lower + upper) / 2
        )

    converged = torch.zeros_like(x, dtype=torch.bool)
    width_before = upper - lower
    width_previous = width_before
    force_bisection = torch.zeros_like(converged)

    for _ in range(maxiter):
        residual = f(x) - target

        exact = residual == 0
        lower = torch.where(~converged & (residual <= 0), x, lower)
        upper = torch.where(~converged & (residual >= 0), x, upper)

        width = upper - lower
        tolerance = xtol + rtol * torch.abs(x)
        converged = converged | exact | (width <= tolerance)
        if bool(converged.all()):
            break

        midpoint = (lower + upper) / 2
        candidate = midpoint
        if derivative is not None:
            slope = derivative(x)
            newton = x - residual / slope
            usable = (
                torch.isfinite(newton)
                & (slope > 0)
                & (newton > lower)
                & (newton < upper)
                & ~force_bisection
            )
            candidate = torch.where(usable, newton, midpoint)

        x_new = torch.where(converged, x, candidate)
        # Only an accepted Newton step counts as a converged step
        converged = converged | (
            check_convergence(x, x_new, xtol, rtol) & (x_new != midpoint)
        )
        x = x_new

        force_bisection = width > width_before / 2
        width_before = width_previous
        width_previous = width

    return x, converged
