"""
Core Type Definitions
=====================

Distribution type descriptors, numeric aliases and the names under which
the built-in families are registered.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution's variates are discrete or continuous."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution over a Euclidean space.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Dimension of one variate; every distribution here draws scalars, so
        it is always 1.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Scalar real-valued variates."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Scalar integer, boolean or categorical variates."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]

type ParametrizationName = str
"""Name of a parametrization within a family, e.g. ``"meanStd"``."""


class FamilyName(StrEnum):
    """Names under which the built-in families are registered."""

    CONTINUOUS_UNIFORM = "ContinuousUniform"
    DISCRETE_UNIFORM = "DiscreteUniform"
    NORMAL = "Normal"
    LOG_NORMAL = "LogNormal"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    CHI_SQUARED = "ChiSquared"
    FISHER_F = "FisherF"
    STUDENT_T = "StudentT"
    CAUCHY = "Cauchy"
    PARETO = "Pareto"
    BERNOULLI = "Bernoulli"
    POISSON = "Poisson"
    WEIGHTED_INDEX = "WeightedIndex"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "ParametrizationName",
    "FamilyName",
]
