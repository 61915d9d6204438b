"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate
parameterizations, sampled with the Marsaglia-Tsang method.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates._logging import get_logger
from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.uniform import open01
from pysatl_variates.distributions.ziggurat import standard_normal
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource

logger = get_logger(__name__)


def marsaglia_tsang(bits: BitSource, d: float, c: float) -> float:
    """
    Gamma(d + 1/3, 1) variate for ``d >= 2/3``.

    Parameters
    ----------
    bits : BitSource
        Source of words.
    d : float
        ``shape - 1/3``.
    c : float
        ``1 / sqrt(9 * d)``.
    """
    while True:
        x = standard_normal(bits)
        v_cbrt = 1.0 + c * x
        if v_cbrt <= 0.0:
            continue
        v = v_cbrt * v_cbrt * v_cbrt
        u = open01(bits)
        x_sqr = x * x
        if u < 1.0 - 0.0331 * x_sqr * x_sqr or math.log(u) < 0.5 * x_sqr + d * (
            1.0 - v + math.log(v)
        ):
            return d * v


@dataclass(frozen=True, slots=True)
class Gamma(ParametricFamilyDistribution):
    """
    Gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter (k) of the distribution
    scale : float
        Scale parameter (θ) of the distribution

    Notes
    -----
    For ``shape >= 1`` variates come straight from the Marsaglia-Tsang
    squeeze-and-reject loop over normal variates. For ``shape < 1`` a
    Gamma(shape + 1) variate is multiplied by ``U ** (1 / shape)`` with
    ``U`` uniform on ``(0, 1)``, which is exact in distribution. For tiny
    shapes that power underflows, so ``0.0`` can be drawn and the support
    includes it.
    """

    shape: float
    scale: float
    _d: float = field(init=False, repr=False, compare=False)
    _c: float = field(init=False, repr=False, compare=False)
    _inv_shape: float | None = field(init=False, repr=False, compare=False)

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        """Check that shape parameter is positive."""
        return self.shape > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        """Check that scale parameter is positive."""
        return self.scale > 0

    @constraint(description="shape and scale are finite")
    def check_parameters_finite(self) -> bool:
        return math.isfinite(self.shape) and math.isfinite(self.scale)

    def _prepare(self) -> None:
        boosted = self.shape < 1.0
        core_shape = self.shape + 1.0 if boosted else float(self.shape)
        d = core_shape - 1.0 / 3.0
        object.__setattr__(self, "_d", d)
        object.__setattr__(self, "_c", 1.0 / math.sqrt(9.0 * d))
        object.__setattr__(self, "_inv_shape", 1.0 / self.shape if boosted else None)
        logger.debug(
            "gamma sampler prepared",
            shape=self.shape,
            method="boosted" if boosted else "marsaglia_tsang",
        )

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def sample(self, bits: BitSource) -> float:
        value = marsaglia_tsang(bits, self._d, self._c)
        if self._inv_shape is not None:
            value *= open01(bits) ** self._inv_shape
        return value * self.scale


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GammaFamily = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate"],
    )
    GammaFamily.__doc__ = """
    Gamma distribution.

    Probability density function (shape-scale parametrization):
        f(x) = x^(k-1) * exp(-x/θ) / (Γ(k) * θ^k) for x > 0
    """
    GammaFamily.register_parametrization("shapeScale", Gamma)

    @parametrization(family=GammaFamily, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (k) of the distribution
        rate : float
            Rate parameter (β = 1/θ) of the distribution
        """

        shape: float
        rate: float

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale parametrization instance
            """
            return Gamma(shape=self.shape, scale=1.0 / self.rate)

    ParametricFamilyRegister.register(GammaFamily)
