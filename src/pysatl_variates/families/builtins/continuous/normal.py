"""
Normal distribution family implementation.

Contains the standard normal, the Normal family with mean-std and
mean-precision parameterizations, and the LogNormal family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
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


@dataclass(frozen=True, slots=True)
class StandardNormal(ParametricFamilyDistribution):
    """Normal distribution with mean 0 and standard deviation 1, sampled by ziggurat."""

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def sample(self, bits: BitSource) -> float:
        return standard_normal(bits)


@dataclass(frozen=True, slots=True)
class Normal(ParametricFamilyDistribution):
    """
    Normal (Gaussian) distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="mu is finite")
    def check_mu_finite(self) -> bool:
        return math.isfinite(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0

    @constraint(description="sigma is finite")
    def check_sigma_finite(self) -> bool:
        return math.isfinite(self.sigma)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def sample(self, bits: BitSource) -> float:
        return self.mu + self.sigma * standard_normal(bits)


@dataclass(frozen=True, slots=True)
class LogNormal(ParametricFamilyDistribution):
    """
    Log-normal distribution: ``exp`` of a Normal(mu, sigma) variate.

    Parameters
    ----------
    mu : float
        Mean of the underlying normal distribution
    sigma : float
        Standard deviation of the underlying normal distribution

    Notes
    -----
    Exponents past the float range give ``inf`` or ``0.0`` instead of
    raising, so the support includes zero.
    """

    mu: float
    sigma: float

    @constraint(description="mu is finite")
    def check_mu_finite(self) -> bool:
        return math.isfinite(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0

    @constraint(description="sigma is finite")
    def check_sigma_finite(self) -> bool:
        return math.isfinite(self.sigma)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def sample(self, bits: BitSource) -> float:
        try:
            return math.exp(self.mu + self.sigma * standard_normal(bits))
        except OverflowError:
            return math.inf


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NormalFamily = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
    )
    NormalFamily.__doc__ = """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1 / (σ√(2π)) * exp(-(x-μ)² / (2σ²))
    """
    NormalFamily.register_parametrization("meanStd", Normal)

    @parametrization(family=NormalFamily, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to mean-std parametrization.

            Returns
            -------
            Parametrization
                Mean-std parametrization instance
            """
            sigma = math.sqrt(1 / self.tau)
            return Normal(mu=self.mu, sigma=sigma)

    ParametricFamilyRegister.register(NormalFamily)


def configure_log_normal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LogNormalFamily = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd"],
    )
    LogNormalFamily.__doc__ = """
    Log-normal distribution.

    The distribution of exp(X) for X ~ Normal(μ, σ).
    """
    LogNormalFamily.register_parametrization("meanStd", LogNormal)

    ParametricFamilyRegister.register(LogNormalFamily)
