"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.uniform import standard_float
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource


def standard_cauchy(bits: BitSource) -> float:
    """Cauchy variate with median 0 and scale 1, by inversion."""
    while True:
        u = standard_float(bits)
        # tan(pi / 2) is a pole
        if u != 0.5:
            return math.tan(math.pi * u)


@dataclass(frozen=True, slots=True)
class Cauchy(ParametricFamilyDistribution):
    """
    Cauchy (Lorentz) distribution.

    Parameters
    ----------
    median : float
        Location of the peak
    scale : float
        Half width at half maximum
    """

    median: float
    scale: float

    @constraint(description="median is finite")
    def check_median_finite(self) -> bool:
        return math.isfinite(self.median)

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        """Check that scale parameter is positive."""
        return self.scale > 0

    @constraint(description="scale is finite")
    def check_scale_finite(self) -> bool:
        return math.isfinite(self.scale)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def sample(self, bits: BitSource) -> float:
        return self.median + self.scale * standard_cauchy(bits)


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CauchyFamily = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["medianScale"],
    )
    CauchyFamily.__doc__ = """
    Cauchy distribution.

    Probability density function:
        f(x) = 1 / (π * γ * (1 + ((x - x0) / γ)^2))
    """
    CauchyFamily.register_parametrization("medianScale", Cauchy)

    ParametricFamilyRegister.register(CauchyFamily)
