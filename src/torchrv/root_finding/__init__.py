from ._bisection import newton_bisection
from ._bracket import expand_bracket
from ._convergence import check_convergence, default_tolerances
from ._exceptions import BracketError, RootFindingError, RootFindingWarning
from ._integer_search import integer_search

__all__ = [
    "check_convergence",
    "default_tolerances",
    "expand_bracket",
    "integer_search",
    "newton_bisection",
    "BracketError",
    "RootFindingError",
    "RootFindingWarning",
]
