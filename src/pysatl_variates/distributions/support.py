"""
Supports
========

Sets of values a distribution can produce. Samplers never consult their
support; it describes the range of ``sample`` for callers and tests.

Both supports answer membership for a scalar (``x in support``) or, through
``contains``, elementwise for a NumPy array.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

__all__ = [
    "ContinuousSupport",
    "IntegerLatticeDiscreteSupport",
    "Support",
    "SupportShape",
]

from dataclasses import dataclass
from enum import Enum, auto
from math import inf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_variates.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class SupportShape(Enum):
    """Topological shape of a :class:`ContinuousSupport`."""

    EMPTY = auto()
    SINGLE_POINT = auto()
    BOUNDED_INTERVAL = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    REAL_LINE = auto()


def _scalar_or_array(result: np.ndarray, x: np.ndarray) -> bool | BoolArray:
    if np.ndim(x) == 0:
        return bool(result)
    return cast("BoolArray", result)


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Interval of the real line.

    Parameters
    ----------
    left, right : float
        Endpoints; infinite by default.
    left_closed, right_closed : bool
        Whether each endpoint belongs to the interval. An infinite endpoint
        is always open.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        return _scalar_or_array(above & below, arr)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))

    @property
    def is_empty(self) -> bool:
        if self.left == self.right:
            return not (self.left_closed and self.right_closed)
        return self.left > self.right

    @property
    def shape(self) -> SupportShape:
        if self.is_empty:
            return SupportShape.EMPTY
        if self.left == self.right:
            return SupportShape.SINGLE_POINT
        match (self.left == -inf, self.right == inf):
            case (True, True):
                return SupportShape.REAL_LINE
            case (True, False):
                return SupportShape.RAY_LEFT
            case (False, True):
                return SupportShape.RAY_RIGHT
            case _:
                return SupportShape.BOUNDED_INTERVAL


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(Support):
    """
    Integers ``n`` with ``n % modulus == residue``, optionally bounded.

    Parameters
    ----------
    residue : int
        Offset of the lattice.
    modulus : int
        Spacing of the lattice, ``> 0``.
    min_k, max_k : int or None
        Inclusive value bounds; ``None`` leaves that side unbounded.
    """

    residue: int
    modulus: int
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        mask = (arr == np.floor(arr)) & ((arr - self.residue) % self.modulus == 0)
        if self.min_k is not None:
            mask &= arr >= self.min_k
        if self.max_k is not None:
            mask &= arr <= self.max_k
        return _scalar_or_array(mask, arr)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))

    def iter_points(self) -> Iterator[int]:
        """Yield the members in increasing order; both bounds are required."""
        if self.min_k is None or self.max_k is None:
            raise RuntimeError("cannot enumerate a lattice without both min_k and max_k")
        first = self.min_k + (self.residue - self.min_k) % self.modulus
        return iter(range(first, self.max_k + 1, self.modulus))

    __iter__ = iter_points
