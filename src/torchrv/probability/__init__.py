"""Distribution functions: densities, CDFs, survival functions and quantiles.

Each distribution ``<name>`` provides ``<name>_density``,
``<name>_probability``, ``<name>_survival`` and ``<name>_quantile``;
those evaluated in log space also provide ``<name>_log_density``. All
functions broadcast their arguments, accept Python numbers or tensors,
and return a :class:`torch.Tensor`.
"""

from ._benford import (
    benford_density,
    benford_probability,
    benford_quantile,
    benford_survival,
)
from ._bernoulli import (
    bernoulli_density,
    bernoulli_probability,
    bernoulli_quantile,
    bernoulli_survival,
)
from ._beta import (
    beta_density,
    beta_log_density,
    beta_probability,
    beta_quantile,
    beta_survival,
)
from ._beta_binomial import (
    beta_binomial_density,
    beta_binomial_log_density,
    beta_binomial_probability,
    beta_binomial_quantile,
    beta_binomial_survival,
)
from ._beta_prime import (
    beta_prime_density,
    beta_prime_log_density,
    beta_prime_probability,
    beta_prime_quantile,
    beta_prime_survival,
)
from ._binomial import (
    binomial_density,
    binomial_log_density,
    binomial_probability,
    binomial_quantile,
    binomial_survival,
)
from ._cauchy import (
    cauchy_density,
    cauchy_probability,
    cauchy_quantile,
    cauchy_survival,
)
from ._chi import (
    chi_density,
    chi_log_density,
    chi_probability,
    chi_quantile,
    chi_survival,
)
from ._chi_squared import (
    chi_squared_density,
    chi_squared_log_density,
    chi_squared_probability,
    chi_squared_quantile,
    chi_squared_survival,
)
from ._continuous_bernoulli import (
    continuous_bernoulli_density,
    continuous_bernoulli_probability,
    continuous_bernoulli_quantile,
    continuous_bernoulli_survival,
)
from ._dagum import (
    dagum_density,
    dagum_probability,
    dagum_quantile,
    dagum_survival,
)
from ._discrete_uniform import (
    discrete_uniform_density,
    discrete_uniform_probability,
    discrete_uniform_quantile,
    discrete_uniform_survival,
)
from ._exceptions import DomainError, ProbabilityError
from ._exponential import (
    exponential_density,
    exponential_probability,
    exponential_quantile,
    exponential_survival,
)
from ._f import (
    f_density,
    f_log_density,
    f_probability,
    f_quantile,
    f_survival,
)
from ._gamma import (
    gamma_density,
    gamma_log_density,
    gamma_probability,
    gamma_quantile,
    gamma_survival,
)
from ._geometric import (
    geometric_density,
    geometric_probability,
    geometric_quantile,
    geometric_survival,
)
from ._gompertz import (
    gompertz_density,
    gompertz_probability,
    gompertz_quantile,
    gompertz_survival,
)
from ._gumbel import (
    gumbel_density,
    gumbel_probability,
    gumbel_quantile,
    gumbel_survival,
)
from ._hypergeometric import (
    hypergeometric_density,
    hypergeometric_log_density,
    hypergeometric_probability,
    hypergeometric_quantile,
    hypergeometric_survival,
)
from ._laplace import (
    laplace_density,
    laplace_probability,
    laplace_quantile,
    laplace_survival,
)
from ._log_normal import (
    log_normal_density,
    log_normal_log_density,
    log_normal_probability,
    log_normal_quantile,
    log_normal_survival,
)
from ._logarithmic import (
    logarithmic_density,
    logarithmic_probability,
    logarithmic_quantile,
    logarithmic_survival,
)
from ._logistic import (
    logistic_density,
    logistic_probability,
    logistic_quantile,
    logistic_survival,
)
from ._negative_binomial import (
    negative_binomial_density,
    negative_binomial_log_density,
    negative_binomial_probability,
    negative_binomial_quantile,
    negative_binomial_survival,
)
from ._normal import (
    normal_density,
    normal_log_density,
    normal_probability,
    normal_quantile,
    normal_survival,
)
from ._pareto import (
    pareto_density,
    pareto_probability,
    pareto_quantile,
    pareto_survival,
)
from ._poisson import (
    poisson_density,
    poisson_log_density,
    poisson_probability,
    poisson_quantile,
    poisson_survival,
)
from ._rayleigh import (
    rayleigh_density,
    rayleigh_probability,
    rayleigh_quantile,
    rayleigh_survival,
)
from ._t import (
    t_density,
    t_log_density,
    t_probability,
    t_quantile,
    t_survival,
)
from ._uniform import (
    uniform_density,
    uniform_probability,
    uniform_quantile,
    uniform_survival,
)
from ._weibull import (
    weibull_density,
    weibull_probability,
    weibull_quantile,
    weibull_survival,
)
from ._validation import get_default_validate_args, set_default_validate_args

__all__ = [
    "benford_density",
    "benford_probability",
    "benford_quantile",
    "benford_survival",
    "bernoulli_density",
    "bernoulli_probability",
    "bernoulli_quantile",
    "bernoulli_survival",
    "beta_binomial_density",
    "beta_binomial_log_density",
    "beta_binomial_probability",
    "beta_binomial_quantile",
    "beta_binomial_survival",
    "beta_density",
    "beta_log_density",
    "beta_prime_density",
    "beta_prime_log_density",
    "beta_prime_probability",
    "beta_prime_quantile",
    "beta_prime_survival",
    "beta_probability",
    "beta_quantile",
    "beta_survival",
    "binomial_density",
    "binomial_log_density",
    "binomial_probability",
    "binomial_quantile",
    "binomial_survival",
    "cauchy_density",
    "cauchy_probability",
    "cauchy_quantile",
    "cauchy_survival",
    "chi_density",
    "chi_log_density",
    "chi_probability",
    "chi_quantile",
    "chi_squared_density",
    "chi_squared_log_density",
    "chi_squared_probability",
    "chi_squared_quantile",
    "chi_squared_survival",
    "chi_survival",
    "continuous_bernoulli_density",
    "continuous_bernoulli_probability",
    "continuous_bernoulli_quantile",
    "continuous_bernoulli_survival",
    "dagum_density",
    "dagum_probability",
    "dagum_quantile",
    "dagum_survival",
    "discrete_uniform_density",
    "discrete_uniform_probability",
    "discrete_uniform_quantile",
    "discrete_uniform_survival",
    "DomainError",
    "exponential_density",
    "exponential_probability",
    "exponential_quantile",
    "exponential_survival",
    "f_density",
    "f_log_density",
    "f_probability",
    "f_quantile",
    "f_survival",
    "gamma_density",
    "gamma_log_density",
    "gamma_probability",
    "gamma_quantile",
    "gamma_survival",
    "geometric_density",
    "geometric_probability",
    "geometric_quantile",
    "geometric_survival",
    "get_default_validate_args",
    "gompertz_density",
    "gompertz_probability",
    "gompertz_quantile",
    "gompertz_survival",
    "gumbel_density",
    "gumbel_probability",
    "gumbel_quantile",
    "gumbel_survival",
    "hypergeometric_density",
    "hypergeometric_log_density",
    "hypergeometric_probability",
    "hypergeometric_quantile",
    "hypergeometric_survival",
    "laplace_density",
    "laplace_probability",
    "laplace_quantile",
    "laplace_survival",
    "logarithmic_density",
    "logarithmic_probability",
    "logarithmic_quantile",
    "logarithmic_survival",
    "logistic_density",
    "logistic_probability",
    "logistic_quantile",
    "logistic_survival",
    "log_normal_density",
    "log_normal_log_density",
    "log_normal_probability",
    "log_normal_quantile",
    "log_normal_survival",
    "negative_binomial_density",
    "negative_binomial_log_density",
    "negative_binomial_probability",
    "negative_binomial_quantile",
    "negative_binomial_survival",
    "normal_density",
    "normal_log_density",
    "normal_probability",
    "normal_quantile",
    "normal_survival",
    "pareto_density",
    "pareto_probability",
    "pareto_quantile",
    "pareto_survival",
    "poisson_density",
    "poisson_log_density",
    "poisson_probability",
    "poisson_quantile",
    "poisson_survival",
    "ProbabilityError",
    "rayleigh_density",
    "rayleigh_probability",
    "rayleigh_quantile",
    "rayleigh_survival",
    "set_default_validate_args",
    "t_density",
    "t_log_density",
    "t_probability",
    "t_quantile",
    "t_survival",
    "uniform_density",
    "uniform_probability",
    "uniform_quantile",
    "uniform_survival",
    "weibull_density",
    "weibull_probability",
    "weibull_quantile",
    "weibull_survival",
]
