"""
Chi-squared distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from pysatl_variates._logging import get_logger
from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.ziggurat import standard_exponential, standard_normal
from pysatl_variates.families.builtins.continuous.gamma import Gamma
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource

logger = get_logger(__name__)

EXPONENTIAL_SUM_MAX_DOF = 8
"""Largest even number of degrees of freedom sampled as a sum of exponentials."""


class ChiSquaredMethod(Enum):
    """How a :class:`ChiSquared` instance draws its variates."""

    SQUARED_NORMAL = auto()
    EXPONENTIAL_SUM = auto()
    GAMMA = auto()


@dataclass(frozen=True, slots=True)
class ChiSquared(ParametricFamilyDistribution):
    """
    Chi-squared distribution, Gamma(dof / 2, 2).

    Parameters
    ----------
    dof : float
        Degrees of freedom (k), not necessarily an integer

    Notes
    -----
    One degree of freedom squares a standard normal. An even number of
    degrees of freedom up to ``EXPONENTIAL_SUM_MAX_DOF`` sums ``dof / 2``
    exponentials of rate 1/2. Everything else is a Gamma variate.
    """

    dof: float
    _method: ChiSquaredMethod = field(init=False, repr=False, compare=False)
    _gamma: Gamma | None = field(init=False, repr=False, compare=False)
    _terms: int = field(init=False, repr=False, compare=False)

    @constraint(description="dof > 0")
    def check_dof_positive(self) -> bool:
        """Check that the degrees of freedom are positive."""
        return self.dof > 0

    @constraint(description="dof is finite")
    def check_dof_finite(self) -> bool:
        return math.isfinite(self.dof)

    def _prepare(self) -> None:
        gamma = None
        terms = 0
        if self.dof == 1:
            method = ChiSquaredMethod.SQUARED_NORMAL
        elif self.dof % 2 == 0 and self.dof <= EXPONENTIAL_SUM_MAX_DOF:
            method = ChiSquaredMethod.EXPONENTIAL_SUM
            terms = int(self.dof) // 2
        else:
            method = ChiSquaredMethod.GAMMA
            gamma = Gamma(shape=0.5 * self.dof, scale=2.0)
        object.__setattr__(self, "_method", method)
        object.__setattr__(self, "_gamma", gamma)
        object.__setattr__(self, "_terms", terms)
        logger.debug("chi-squared sampler prepared", dof=self.dof, method=method.name)

    @property
    def method(self) -> ChiSquaredMethod:
        """The sampling path chosen for these degrees of freedom."""
        return self._method

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def sample(self, bits: BitSource) -> float:
        if self._gamma is not None:
            return self._gamma.sample(bits)
        if self._method is ChiSquaredMethod.SQUARED_NORMAL:
            z = standard_normal(bits)
            return z * z
        total = 0.0
        for _ in range(self._terms):
            total += standard_exponential(bits)
        return 2.0 * total


def configure_chi_squared_family() -> None:
    """
    Configure and register the ChiSquared distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    ChiSquaredFamily = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
    )
    ChiSquaredFamily.__doc__ = """
    Chi-squared distribution.

    The distribution of a sum of k squared independent standard normal
    variates, extended to real k > 0 as Gamma(k/2, 2).
    """
    ChiSquaredFamily.register_parametrization("dof", ChiSquared)

    ParametricFamilyRegister.register(ChiSquaredFamily)
