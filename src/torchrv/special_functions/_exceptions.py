"""Special function warnings."""


class ConvergenceWarning(UserWarning):
    """Warning for series or continued fractions that hit their iteration cap."""

    pass
