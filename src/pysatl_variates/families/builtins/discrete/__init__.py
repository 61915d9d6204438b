"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families and the
weighted choice samplers.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.discrete.bernoulli import (
    Bernoulli,
    configure_bernoulli_family,
)
from pysatl_variates.families.builtins.discrete.poisson import Poisson, configure_poisson_family
from pysatl_variates.families.builtins.discrete.uniform import (
    UniformInt,
    configure_discrete_uniform_family,
)
from pysatl_variates.families.builtins.discrete.weighted import (
    WeightedChoice,
    WeightedIndex,
    configure_weighted_index_family,
)

__all__ = [
    "Bernoulli",
    "Poisson",
    "UniformInt",
    "WeightedChoice",
    "WeightedIndex",
    "configure_bernoulli_family",
    "configure_discrete_uniform_family",
    "configure_poisson_family",
    "configure_weighted_index_family",
]
