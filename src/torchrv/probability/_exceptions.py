"""Probability module exceptions."""

__all__ = ["ProbabilityError", "DomainError"]


class ProbabilityError(ValueError):
    """Base exception for distribution function errors."""

    pass


class DomainError(ProbabilityError):
    """Raised when a parameter or argument lies outside its domain.

    Only raised by validated calls; see :func:`set_default_validate_args`.
    """

    pass
