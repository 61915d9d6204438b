"""
Pareto distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.uniform import open_closed01
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource


@dataclass(frozen=True, slots=True)
class Pareto(ParametricFamilyDistribution):
    """
    Pareto (type I) distribution, sampled by inversion.

    Parameters
    ----------
    scale : float
        Minimum value (x_m) of the distribution
    shape : float
        Tail index (α) of the distribution

    Notes
    -----
    Variates beyond the largest float are returned as ``inf``, which small
    shapes make common.
    """

    scale: float
    shape: float
    _inv_neg_shape: float = field(init=False, repr=False, compare=False)

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="scale and shape are finite")
    def check_parameters_finite(self) -> bool:
        return math.isfinite(self.scale) and math.isfinite(self.shape)

    def _prepare(self) -> None:
        object.__setattr__(self, "_inv_neg_shape", -1.0 / self.shape)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=float(self.scale))

    def sample(self, bits: BitSource) -> float:
        try:
            return self.scale * open_closed01(bits) ** self._inv_neg_shape
        except OverflowError:
            return math.inf


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    ParetoFamily = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scaleShape"],
    )
    ParetoFamily.__doc__ = """
    Pareto distribution.

    Probability density function:
        f(x) = α * x_m^α / x^(α+1) for x ≥ x_m
    """
    ParetoFamily.register_parametrization("scaleShape", Pareto)

    ParametricFamilyRegister.register(ParetoFamily)
