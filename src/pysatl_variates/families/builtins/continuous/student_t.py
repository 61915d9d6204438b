"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.ziggurat import standard_normal
from pysatl_variates.families.builtins.continuous.chi_squared import ChiSquared
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource


@dataclass(frozen=True, slots=True)
class StudentT(ParametricFamilyDistribution):
    """
    Student's t distribution, ``Z / sqrt(X / nu)`` for a standard normal
    ``Z`` and an independent chi-squared ``X``.

    Parameters
    ----------
    nu : float
        Degrees of freedom
    """

    nu: float
    _chi: ChiSquared = field(init=False, repr=False, compare=False)

    @constraint(description="nu > 0")
    def check_nu_positive(self) -> bool:
        return self.nu > 0

    @constraint(description="nu is finite")
    def check_nu_finite(self) -> bool:
        return math.isfinite(self.nu)

    def _prepare(self) -> None:
        object.__setattr__(self, "_chi", ChiSquared(dof=self.nu))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def sample(self, bits: BitSource) -> float:
        z = standard_normal(bits)
        chi = self._chi.sample(bits)
        if chi == 0.0:
            return math.copysign(math.inf, z)
        return z * math.sqrt(self.nu / chi)


def configure_student_t_family() -> None:
    """
    Configure and register the StudentT distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    StudentTFamily = ParametricFamily(
        name=FamilyName.STUDENT_T,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
    )
    StudentTFamily.__doc__ = """
    Student's t distribution.
    """
    StudentTFamily.register_parametrization("dof", StudentT)

    ParametricFamilyRegister.register(StudentTFamily)
