"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scipy.special import gammaln

from pysatl_variates._logging import get_logger
from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.distributions.uniform import standard_float
from pysatl_variates.families.builtins.continuous.cauchy import standard_cauchy
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource

logger = get_logger(__name__)

PRODUCT_METHOD_MAX_LAMBDA = 12.0
"""Rates below this use the product of uniforms; the rest use rejection."""


@dataclass(frozen=True, slots=True)
class Poisson(ParametricFamilyDistribution):
    """
    Poisson distribution.

    Parameters
    ----------
    lambda_ : float
        Expected number of events (λ)

    Notes
    -----
    Small rates count how many unit floats can be multiplied together before
    the product drops to ``exp(-λ)``, which costs about ``λ + 1`` words per
    draw. Larger rates use rejection from a Cauchy envelope centred on ``λ``
    with width ``sqrt(2λ)``, whose cost does not grow with ``λ``.
    """

    lambda_: float
    _exp_lambda: float = field(init=False, repr=False, compare=False)
    _log_lambda: float = field(init=False, repr=False, compare=False)
    _sqrt_2lambda: float = field(init=False, repr=False, compare=False)
    _magic: float = field(init=False, repr=False, compare=False)

    _distribution_type = UnivariateDiscrete

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0

    @constraint(description="lambda_ is finite")
    def check_lambda_finite(self) -> bool:
        return math.isfinite(self.lambda_)

    def _prepare(self) -> None:
        lam = float(self.lambda_)
        log_lambda = math.log(lam)
        object.__setattr__(self, "_exp_lambda", math.exp(-lam))
        object.__setattr__(self, "_log_lambda", log_lambda)
        object.__setattr__(self, "_sqrt_2lambda", math.sqrt(2.0 * lam))
        object.__setattr__(self, "_magic", lam * log_lambda - float(gammaln(1.0 + lam)))
        logger.debug(
            "poisson sampler prepared",
            lambda_=lam,
            method="product" if self.uses_product_method else "rejection",
        )

    @property
    def uses_product_method(self) -> bool:
        """Whether draws multiply uniforms instead of rejecting from an envelope."""
        return self.lambda_ < PRODUCT_METHOD_MAX_LAMBDA

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

    def sample(self, bits: BitSource) -> int:
        if self.uses_product_method:
            count = 0
            product = 1.0
            while True:
                product *= standard_float(bits)
                if product <= self._exp_lambda:
                    return count
                count += 1

        while True:
            while True:
                slope = standard_cauchy(bits)
                candidate = self._sqrt_2lambda * slope + self.lambda_
                if candidate >= 0.0:
                    break
            candidate = math.floor(candidate)
            log_ratio = candidate * self._log_lambda - float(gammaln(1.0 + candidate)) - self._magic
            # exact ratios stay below e; rounding at huge rates can overshoot exp's range
            check = 0.9 * (1.0 + slope * slope) * math.exp(min(log_ratio, 1.0))
            if standard_float(bits) <= check:
                return int(candidate)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    PoissonFamily = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
    )
    PoissonFamily.__doc__ = """
    Poisson distribution.

    Probability mass function:
        P(X = k) = λ^k * exp(-λ) / k! for k = 0, 1, 2, ...
    """
    PoissonFamily.register_parametrization("rate", Poisson)

    ParametricFamilyRegister.register(PoissonFamily)
