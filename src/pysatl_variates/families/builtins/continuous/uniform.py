"""
Continuous uniform distribution family implementation.

Contains the unit-interval distributions and the uniform float range with
standard and mean-width parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.support import ContinuousSupport
from pysatl_variates.distributions.uniform import (
    MAX_STANDARD_FLOAT,
    open01,
    open_closed01,
    standard_float,
)
from pysatl_variates.errors import InvalidRange
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
class StandardUniform(ParametricFamilyDistribution):
    """Uniform on ``[0, 1)``."""

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0, right_closed=False)

    def sample(self, bits: BitSource) -> float:
        return standard_float(bits)


@dataclass(frozen=True, slots=True)
class Open01(ParametricFamilyDistribution):
    """Uniform on the open interval ``(0, 1)``."""

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0, left_closed=False, right_closed=False)

    def sample(self, bits: BitSource) -> float:
        return open01(bits)


@dataclass(frozen=True, slots=True)
class OpenClosed01(ParametricFamilyDistribution):
    """Uniform on ``(0, 1]``."""

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0, left_closed=False)

    def sample(self, bits: BitSource) -> float:
        return open_closed01(bits)


def _fit_scale(low: float, high: float, width: float, closed: bool) -> float:
    """
    Largest scale (to float resolution) keeping ``low + u * scale`` inside the range.

    ``u`` is any unit float up to ``MAX_STANDARD_FLOAT``; since the map is
    monotone in ``u``, bounding its value at the top bounds every draw.
    """

    def fits(scale: float) -> bool:
        top = low + MAX_STANDARD_FLOAT * scale
        return top <= high if closed else top < high

    if fits(width):
        return width
    below, above = 0.0, width
    while math.nextafter(below, above) < above:
        middle = 0.5 * (below + above)
        if not below < middle < above:
            break
        if fits(middle):
            below = middle
        else:
            above = middle
    return below


@dataclass(frozen=True, slots=True)
class UniformFloat(ParametricFamilyDistribution):
    """
    Uniform float on ``[low, high)``, or on ``[low, high]`` when ``closed``.

    Parameters
    ----------
    low : float
        Inclusive lower bound.
    high : float
        Exclusive upper bound, inclusive when ``closed``.
    closed : bool, default False
        Whether ``high`` belongs to the range. A closed range with
        ``low == high`` always yields ``low``.

    Notes
    -----
    The scale applied to unit floats is fitted at construction so that even
    the largest unit float lands below ``high`` (or on it, when closed);
    no draw is ever redrawn or clamped.
    """

    low: float
    high: float
    closed: bool = False
    _offset: float = field(init=False, repr=False, compare=False)
    _scale: float = field(init=False, repr=False, compare=False)

    _error_type = InvalidRange

    @constraint(description="low and high are finite")
    def check_bounds_finite(self) -> bool:
        return math.isfinite(self.low) and math.isfinite(self.high)

    @constraint(description="low < high (low <= high for a closed range)")
    def check_bounds_ordered(self) -> bool:
        return self.low <= self.high if self.closed else self.low < self.high

    @constraint(description="high - low is finite")
    def check_width_finite(self) -> bool:
        return math.isfinite(float(self.high) - float(self.low))

    def _prepare(self) -> None:
        low = float(self.low)
        high = float(self.high)
        width = high - low
        if self.closed:
            stretched = width / MAX_STANDARD_FLOAT
            if math.isfinite(stretched):
                width = stretched
        object.__setattr__(self, "_offset", low)
        object.__setattr__(self, "_scale", _fit_scale(low, high, width, self.closed))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.low, right=self.high, right_closed=self.closed)

    def sample(self, bits: BitSource) -> float:
        return self._offset + standard_float(bits) * self._scale


def configure_uniform_family() -> None:
    """
    Configure and register the continuous Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
    )
    Uniform.__doc__ = """
    Uniform (continuous) distribution.

    All sub-intervals of the same length are equally probable. The base
    parametrization is the half-open range ``[low, high)``.
    """
    Uniform.register_parametrization("standard", UniformFloat)

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of the uniform distribution.

        Parameters
        ----------
        mean : float
            Midpoint of the range.
        width : float
            Length of the range.
        """

        mean: float
        width: float

        _error_type = InvalidRange

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to the standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return UniformFloat(low=self.mean - half_width, high=self.mean + half_width)

    ParametricFamilyRegister.register(Uniform)
