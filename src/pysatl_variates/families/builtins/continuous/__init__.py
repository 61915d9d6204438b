"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous.cauchy import Cauchy, configure_cauchy_family
from pysatl_variates.families.builtins.continuous.chi_squared import (
    ChiSquared,
    ChiSquaredMethod,
    configure_chi_squared_family,
)
from pysatl_variates.families.builtins.continuous.exponential import (
    Exp1,
    Exponential,
    configure_exponential_family,
)
from pysatl_variates.families.builtins.continuous.fisher_f import FisherF, configure_fisher_f_family
from pysatl_variates.families.builtins.continuous.gamma import Gamma, configure_gamma_family
from pysatl_variates.families.builtins.continuous.normal import (
    LogNormal,
    Normal,
    StandardNormal,
    configure_log_normal_family,
    configure_normal_family,
)
from pysatl_variates.families.builtins.continuous.pareto import Pareto, configure_pareto_family
from pysatl_variates.families.builtins.continuous.student_t import (
    StudentT,
    configure_student_t_family,
)
from pysatl_variates.families.builtins.continuous.uniform import (
    Open01,
    OpenClosed01,
    StandardUniform,
    UniformFloat,
    configure_uniform_family,
)

__all__ = [
    "Cauchy",
    "ChiSquared",
    "ChiSquaredMethod",
    "Exp1",
    "Exponential",
    "FisherF",
    "Gamma",
    "LogNormal",
    "Normal",
    "Open01",
    "OpenClosed01",
    "Pareto",
    "StandardNormal",
    "StandardUniform",
    "StudentT",
    "UniformFloat",
    "configure_cauchy_family",
    "configure_chi_squared_family",
    "configure_exponential_family",
    "configure_fisher_f_family",
    "configure_gamma_family",
    "configure_log_normal_family",
    "configure_normal_family",
    "configure_pareto_family",
    "configure_student_t_family",
    "configure_uniform_family",
]
