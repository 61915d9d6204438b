"""
Fisher-Snedecor F distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.families.builtins.continuous.chi_squared import ChiSquared
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource


@dataclass(frozen=True, slots=True)
class FisherF(ParametricFamilyDistribution):
    """
    Fisher-Snedecor F distribution, ``(X1 / d1) / (X2 / d2)`` for
    independent chi-squared ``X1`` and ``X2``.

    Parameters
    ----------
    d1 : float
        Numerator degrees of freedom
    d2 : float
        Denominator degrees of freedom
    """

    d1: float
    d2: float
    _numerator: ChiSquared = field(init=False, repr=False, compare=False)
    _denominator: ChiSquared = field(init=False, repr=False, compare=False)
    _dof_ratio: float = field(init=False, repr=False, compare=False)

    @constraint(description="d1 > 0")
    def check_d1_positive(self) -> bool:
        return self.d1 > 0

    @constraint(description="d2 > 0")
    def check_d2_positive(self) -> bool:
        return self.d2 > 0

    @constraint(description="d1 and d2 are finite")
    def check_dof_finite(self) -> bool:
        return math.isfinite(self.d1) and math.isfinite(self.d2)

    def _prepare(self) -> None:
        object.__setattr__(self, "_numerator", ChiSquared(dof=self.d1))
        object.__setattr__(self, "_denominator", ChiSquared(dof=self.d2))
        object.__setattr__(self, "_dof_ratio", self.d2 / self.d1)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def sample(self, bits: BitSource) -> float:
        numerator = self._numerator.sample(bits)
        denominator = self._denominator.sample(bits)
        if denominator == 0.0:
            # tiny dof can underflow the chi-squared draw to zero
            return math.inf
        return numerator / denominator * self._dof_ratio


def configure_fisher_f_family() -> None:
    """
    Configure and register the FisherF distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.FISHER_F):
        return

    FisherFFamily = ParametricFamily(
        name=FamilyName.FISHER_F,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
    )
    FisherFFamily.__doc__ = """
    Fisher-Snedecor F distribution.

    The ratio of two independent chi-squared variates, each divided by its
    degrees of freedom.
    """
    FisherFFamily.register_parametrization("dof", FisherF)

    ParametricFamilyRegister.register(FisherFFamily)
