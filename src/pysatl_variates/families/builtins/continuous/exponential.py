"""
Exponential distribution family implementation.

Contains the standard exponential and the Exponential family with rate and
scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.ziggurat import standard_exponential
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


@dataclass(frozen=True, slots=True)
class Exp1(ParametricFamilyDistribution):
    """Exponential distribution with rate 1, sampled by ziggurat."""

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def sample(self, bits: BitSource) -> float:
        return standard_exponential(bits)


@dataclass(frozen=True, slots=True)
class Exponential(ParametricFamilyDistribution):
    """
    Exponential distribution.

    Describes the time between events in a Poisson process.

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ) of the distribution
    """

    lambda_: float
    _scale: float = field(init=False, repr=False, compare=False)

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0

    @constraint(description="lambda_ is finite")
    def check_lambda_finite(self) -> bool:
        return math.isfinite(self.lambda_)

    def _prepare(self) -> None:
        object.__setattr__(self, "_scale", 1.0 / self.lambda_)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def sample(self, bits: BitSource) -> float:
        return standard_exponential(bits) * self._scale


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    ExponentialFamily = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
    )
    ExponentialFamily.__doc__ = """
    Exponential distribution.

    It has a single parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0
    """
    ExponentialFamily.register_parametrization("rate", Exponential)

    @parametrization(family=ExponentialFamily, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return Exponential(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(ExponentialFamily)
