"""
Discrete uniform distribution family implementation.

Contains the uniform integer range, sampled without modulo bias.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.distributions.uniform import (
    random_word,
    rejection_zone,
    widening_split,
    word_width,
)
from pysatl_variates.errors import InvalidRange
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource


def _is_integer(value: object) -> bool:
    return isinstance(value, int | np.integer) and not isinstance(value, bool | np.bool_)


@dataclass(frozen=True, slots=True)
class UniformInt(ParametricFamilyDistribution):
    """
    Uniform integer on ``[low, high)``, or on ``[low, high]`` when ``closed``.

    Parameters
    ----------
    low : int
        Inclusive lower bound.
    high : int
        Exclusive upper bound, inclusive when ``closed``.
    closed : bool, default False
        Whether ``high`` belongs to the range.

    Notes
    -----
    Words are 32 bits wide while the range has at most ``2**32`` values and
    grow in 64-bit steps beyond that, so ranges of any size are supported.
    Each word is mapped with a widening multiply and the few words that
    would make some values more likely than others are redrawn; fewer than
    half of all words are ever rejected, and none when the range covers the
    whole word domain.
    """

    low: int
    high: int
    closed: bool = False
    _low: int = field(init=False, repr=False, compare=False)
    _span: int = field(init=False, repr=False, compare=False)
    _width: int = field(init=False, repr=False, compare=False)
    _zone: int = field(init=False, repr=False, compare=False)

    _error_type = InvalidRange
    _distribution_type = UnivariateDiscrete

    @constraint(description="low and high are integers")
    def check_bounds_integer(self) -> bool:
        return _is_integer(self.low) and _is_integer(self.high)

    @constraint(description="low < high (low <= high for a closed range)")
    def check_bounds_ordered(self) -> bool:
        return self.low <= self.high if self.closed else self.low < self.high

    def _prepare(self) -> None:
        low = int(self.low)
        span = int(self.high) - low + (1 if self.closed else 0)
        width = word_width(span)
        object.__setattr__(self, "_low", low)
        object.__setattr__(self, "_span", span)
        object.__setattr__(self, "_width", width)
        object.__setattr__(self, "_zone", rejection_zone(span, width))

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(
            residue=0, modulus=1, min_k=self._low, max_k=self._low + self._span - 1
        )

    def sample(self, bits: BitSource) -> int:
        while True:
            offset, rest = widening_split(random_word(bits, self._width), self._span, self._width)
            if rest <= self._zone:
                return self._low + offset


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the discrete Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
    )
    DiscreteUniform.__doc__ = """
    Uniform (discrete) distribution.

    Every integer of the range is equally probable.
    """
    DiscreteUniform.register_parametrization("standard", UniformInt)

    ParametricFamilyRegister.register(DiscreteUniform)
