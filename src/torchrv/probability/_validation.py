"""Argument checks shared by the distribution functions.

Every public distribution function takes ``validate_args``. ``True``
checks parameter domains and raises :class:`DomainError`, ``False``
skips the checks, and ``None`` defers to a process-wide default that
follows ``__debug__``, as :mod:`torch.distributions` does.
"""

import torch
from torch import Tensor

from ._exceptions import DomainError

_validate_args = __debug__


def set_default_validate_args(value: bool) -> None:
    """Set whether distribution functions validate arguments by default.

    Parameters
    ----------
    value : bool
        New default for calls made with ``validate_args=None``.
    """
    if value not in (True, False):
        raise ValueError("validate_args must be True or False")
    global _validate_args
    _validate_args = value


def get_default_validate_args() -> bool:
    """Return the default used for ``validate_args=None``."""
    return _validate_args


def should_validate(validate_args: bool | None) -> bool:
    if validate_args is None:
        return _validate_args
    return validate_args


def _fail(name: str, requirement: str, mask: Tensor, value: Tensor) -> None:
    bad = value[mask]
    count = bad.numel()
    example = bad.flatten()[0].item()
    raise DomainError(
        f"{name} must be {requirement}, got {example}"
        + (f" ({count} invalid elements)" if count > 1 else "")
    )


def check_not_nan(name: str, value: Tensor) -> None:
    """Reject NaN."""
    mask = torch.isnan(value)
    if bool(mask.any()):
        _fail(name, "a number", mask, value)


def check_finite(name: str, value: Tensor) -> None:
    """Reject NaN and infinities."""
    mask = ~torch.isfinite(value)
    if bool(mask.any()):
        _fail(name, "finite", mask, value)


def check_positive(name: str, value: Tensor) -> None:
    """Require finite ``value > 0``."""
    mask = ~(torch.isfinite(value) & (value > 0))
    if bool(mask.any()):
        _fail(name, "positive and finite", mask, value)


def check_probability(
    name: str,
    value: Tensor,
    *,
    open_lower: bool = False,
    open_upper: bool = False,
) -> None:
    """Require ``value`` in ``[0, 1]``, optionally excluding either end."""
    above = value > 0 if open_lower else value >= 0
    below = value < 1 if open_upper else value <= 1
    mask = ~(above & below)
    if bool(mask.any()):
        interval = ("(" if open_lower else "[") + "0, 1" + (
            ")" if open_upper else "]"
        )
        _fail(name, f"in {interval}", mask, value)


def check_integer(
    name: str, value: Tensor, *, minimum: float | None = None
) -> None:
    """Require a finite integer value, at least ``minimum`` if given."""
    mask = ~(torch.isfinite(value) & (value == torch.floor(value)))
    requirement = "an integer"
    if minimum is not None:
        mask = mask | (value < minimum)
        requirement = f"an integer >= {minimum:g}"
    if bool(mask.any()):
        _fail(name, requirement, mask, value)


def check_ordered(
    lower_name: str,
    lower: Tensor,
    upper_name: str,
    upper: Tensor,
    *,
    strict: bool = False,
) -> None:
    """Require ``lower <= upper`` (``<`` when ``strict``)."""
    mask = ~(lower < upper) if strict else ~(lower <= upper)
    if bool(mask.any()):
        relation = "<" if strict else "<="
        raise DomainError(
            f"{lower_name} must be {relation} {upper_name}, got "
            f"{lower[mask].flatten()[0].item()} and "
            f"{upper[mask].flatten()[0].item()}"
        )
