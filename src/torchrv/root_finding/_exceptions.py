"""Exception classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class BracketError(RootFindingError):
    """Raised when a bracket does not enclose the target value."""

    pass


class RootFindingWarning(UserWarning):
    """Warning for elements that failed to bracket or converge."""

    pass
