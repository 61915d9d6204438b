"""
Bernoulli distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource

_SCALE_64 = 2.0**64


@dataclass(frozen=True, slots=True)
class Bernoulli(ParametricFamilyDistribution):
    """
    Bernoulli distribution over ``{False, True}``.

    Parameters
    ----------
    p : float
        Probability of ``True``.

    Notes
    -----
    ``p`` is turned into an integer threshold on ``[0, 2**64]`` once, so a
    draw is one 64-bit word and one comparison. ``p == 0`` never yields
    ``True``; ``p == 1`` maps to ``2**64`` and always does.
    """

    p: float
    _threshold: int = field(init=False, repr=False, compare=False)

    _distribution_type = UnivariateDiscrete

    @constraint(description="0 <= p <= 1")
    def check_probability_range(self) -> bool:
        """Check that p is a probability; NaN fails."""
        return 0.0 <= self.p <= 1.0

    def _prepare(self) -> None:
        object.__setattr__(self, "_threshold", int(self.p * _SCALE_64))

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0, max_k=1)

    def sample(self, bits: BitSource) -> bool:
        return bits.next_u64() < self._threshold


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BernoulliFamily = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
    )
    BernoulliFamily.__doc__ = """
    Bernoulli distribution.

    A single trial that succeeds with probability p.
    """
    BernoulliFamily.register_parametrization("probability", Bernoulli)

    ParametricFamilyRegister.register(BernoulliFamily)
