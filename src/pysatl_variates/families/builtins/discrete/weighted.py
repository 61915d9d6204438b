"""
Weighted choice implementation.

Contains :class:`WeightedIndex`, which draws an index with probability
proportional to its weight, and :class:`WeightedChoice`, which draws the
value of a ``(value, weight)`` pair.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_variates.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_variates.errors import InvalidWeights
from pysatl_variates.families.builtins.continuous.uniform import UniformFloat
from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import constraint
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_variates.bits import BitSource


def _weights_are_finite(weights: Sequence[Any]) -> bool:
    return all(
        isinstance(w, Real) and not isinstance(w, bool) and math.isfinite(w) for w in weights
    )


def _weights_are_non_negative(weights: Sequence[float]) -> bool:
    return all(w >= 0 for w in weights)


def _total_is_positive(weights: Sequence[float]) -> bool:
    total = sum(float(w) for w in weights)
    return 0.0 < total < math.inf


@dataclass(frozen=True, slots=True)
class _PrefixSums:
    """Read-only cumulative weights and a uniform sampler over their total."""

    cumulative: npt.NDArray[np.float64]
    uniform: UniformFloat

    @classmethod
    def build(cls, weights: Sequence[float]) -> _PrefixSums:
        cumulative = np.cumsum(np.asarray(weights, dtype=np.float64))
        cumulative.setflags(write=False)
        return cls(cumulative=cumulative, uniform=UniformFloat(0.0, float(cumulative[-1])))

    def pick(self, bits: BitSource) -> int:
        x = self.uniform.sample(bits)
        return int(np.searchsorted(self.cumulative, x, side="right"))


@dataclass(frozen=True, slots=True)
class WeightedIndex(ParametricFamilyDistribution):
    """
    Index ``i`` drawn with probability ``weights[i] / sum(weights)``.

    Parameters
    ----------
    weights : sequence of float
        Non-negative finite weights with a positive total. Stored as a tuple.

    Notes
    -----
    Construction computes the prefix sums once. A draw takes one uniform
    float ``x`` on ``[0, total)`` and returns the first index whose prefix
    sum exceeds ``x``, so an item of weight zero is never returned.
    """

    weights: tuple[float, ...]
    _prefix: _PrefixSums = field(init=False, repr=False, compare=False)

    _error_type = InvalidWeights
    _distribution_type = UnivariateDiscrete

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights", tuple(self.weights))
        ParametricFamilyDistribution.__post_init__(self)

    @constraint(description="weights are not empty")
    def check_not_empty(self) -> bool:
        return len(self.weights) > 0

    @constraint(description="weights are finite numbers")
    def check_weights_finite(self) -> bool:
        return _weights_are_finite(self.weights)

    @constraint(description="weights >= 0")
    def check_weights_non_negative(self) -> bool:
        return _weights_are_non_negative(self.weights)

    @constraint(description="total weight is positive and finite")
    def check_total_positive(self) -> bool:
        return _total_is_positive(self.weights)

    def _prepare(self) -> None:
        object.__setattr__(self, "_prefix", _PrefixSums.build(self.weights))

    @property
    def cumulative_weights(self) -> npt.NDArray[np.float64]:
        """Read-only prefix sums of the weights."""
        return self._prefix.cumulative

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(
            residue=0, modulus=1, min_k=0, max_k=len(self.weights) - 1
        )

    def sample(self, bits: BitSource) -> int:
        return self._prefix.pick(bits)


@dataclass(frozen=True, slots=True)
class WeightedChoice(ParametricFamilyDistribution):
    """
    Value of a ``(value, weight)`` pair, chosen with probability proportional
    to its weight.

    Parameters
    ----------
    items : sequence of (value, weight)
        Candidate values with their weights. Stored as a tuple of pairs; the
        values themselves are returned as given, never copied.
    """

    items: tuple[tuple[Any, float], ...]
    _values: tuple[Any, ...] = field(init=False, repr=False, compare=False)
    _prefix: _PrefixSums = field(init=False, repr=False, compare=False)

    _error_type = InvalidWeights
    _distribution_type = UnivariateDiscrete

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(tuple(item) for item in self.items))
        ParametricFamilyDistribution.__post_init__(self)

    @constraint(description="items are not empty")
    def check_not_empty(self) -> bool:
        return len(self.items) > 0

    @constraint(description="items are (value, weight) pairs")
    def check_pairs(self) -> bool:
        return all(len(item) == 2 for item in self.items)

    @constraint(description="weights are finite numbers")
    def check_weights_finite(self) -> bool:
        return _weights_are_finite([w for _, w in self.items])

    @constraint(description="weights >= 0")
    def check_weights_non_negative(self) -> bool:
        return _weights_are_non_negative([w for _, w in self.items])

    @constraint(description="total weight is positive and finite")
    def check_total_positive(self) -> bool:
        return _total_is_positive([w for _, w in self.items])

    def _prepare(self) -> None:
        object.__setattr__(self, "_values", tuple(value for value, _ in self.items))
        object.__setattr__(self, "_prefix", _PrefixSums.build([w for _, w in self.items]))

    @property
    def support(self) -> None:
        return None

    def sample(self, bits: BitSource) -> Any:
        return self._values[self._prefix.pick(bits)]


def configure_weighted_index_family() -> None:
    """
    Configure and register the WeightedIndex distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.WEIGHTED_INDEX):
        return

    WeightedIndexFamily = ParametricFamily(
        name=FamilyName.WEIGHTED_INDEX,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["weights"],
    )
    WeightedIndexFamily.__doc__ = """
    Weighted index distribution.

    Probability mass function:
        P(X = i) = w_i / Σ w_j for i = 0, ..., n-1
    """
    WeightedIndexFamily.register_parametrization("weights", WeightedIndex)

    ParametricFamilyRegister.register(WeightedIndexFamily)
