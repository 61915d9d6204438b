"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL Variates:

- continuous: uniform, normal, log-normal, exponential, gamma, chi-squared,
  Fisher-F, Student-t, Cauchy and Pareto;
- discrete: uniform integers, Bernoulli, Poisson and weighted index.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent: a family that is already registered is kept.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates._logging import get_logger
from pysatl_variates.families.builtins import (
    configure_bernoulli_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_discrete_uniform_family,
    configure_exponential_family,
    configure_fisher_f_family,
    configure_gamma_family,
    configure_log_normal_family,
    configure_normal_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_student_t_family,
    configure_uniform_family,
    configure_weighted_index_family,
)
from pysatl_variates.families.registry import ParametricFamilyRegister

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_uniform_family()
    configure_discrete_uniform_family()
    configure_normal_family()
    configure_log_normal_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_chi_squared_family()
    configure_fisher_f_family()
    configure_student_t_family()
    configure_cauchy_family()
    configure_pareto_family()
    configure_bernoulli_family()
    configure_poisson_family()
    configure_weighted_index_family()
    registry = ParametricFamilyRegister()
    logger.debug("families register configured", families=len(registry.list_registered_families()))
    return registry


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
