from ._elementary import log1pmx, stirling_correction
from ._exceptions import ConvergenceWarning
from ._gauss_legendre import gauss_legendre_nodes_weights, unit_interval_rule
from ._log_beta import log_beta, log_binomial_coefficient
from ._regularized_beta import regularized_beta, regularized_beta_pair
from ._regularized_gamma import (
    regularized_gamma_p,
    regularized_gamma_pair,
    regularized_gamma_q,
)

__all__ = [
    "ConvergenceWarning",
    "gauss_legendre_nodes_weights",
    "log1pmx",
    "log_beta",
    "log_binomial_coefficient",
    "regularized_beta",
    "regularized_beta_pair",
    "regularized_gamma_p",
    "regularized_gamma_pair",
    "regularized_gamma_q",
    "stirling_correction",
    "unit_interval_rule",
]
