"""
Ziggurat Rejection Sampling
===========================

Marsaglia-Tsang ziggurat sampling for densities whose inverse CDF has no
closed form. This module provides:

- :class:`ZigguratTable` – 256 equal-area layers of a monotone density;
- :func:`normal_table` / :func:`exponential_table` – the shared tables,
  built lazily exactly once per process;
- :func:`ziggurat` – the generic accept/reject loop;
- :func:`standard_normal` / :func:`standard_exponential` – the two
  primitives everything continuous is built from.

Notes
-----
- One 64-bit word feeds each iteration: bits 0-7 choose the layer, bit 8 is
  the sign of symmetric densities and bits 12-63 give the position inside
  the layer.
- The loop has no iteration cap; the expected number of iterations is close
  to one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import erfc

from pysatl_variates._logging import get_logger
from pysatl_variates.distributions.uniform import open01, standard_float

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy.typing as npt

    from pysatl_variates.bits import BitSource

logger = get_logger(__name__)

LAYERS = 256
NORMAL_R = 3.654152885361008796
"""Start of the normal tail for a 256-layer ziggurat."""
EXPONENTIAL_R = 7.697117470131050077
"""Start of the exponential tail for a 256-layer ziggurat."""

_LAYER_MASK = LAYERS - 1
_SIGN_BIT = 1 << 8
_SCALE_52 = 2.0**-52


@dataclass(frozen=True, slots=True)
class ZigguratTable:
    """
    Layer boundaries of a ziggurat over a monotone decreasing density.

    Parameters
    ----------
    x : numpy.ndarray
        ``LAYERS + 1`` right edges, decreasing. ``x[0] = v / f(r)`` is the
        width of the base layer, ``x[1] = r`` and ``x[LAYERS] = 0``.
    f : numpy.ndarray
        Unnormalized density at each ``x``; ``f[LAYERS] = 1``.
    r : float
        Where the tail begins.
    v : float
        Common area of every layer, the base layer's tail included.
    """

    x: npt.NDArray[np.float64]
    f: npt.NDArray[np.float64]
    r: float
    v: float
    x_values: tuple[float, ...] = field(init=False, repr=False, compare=False)
    f_values: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # plain floats for the draw loop; indexing the arrays boxes NumPy scalars
        object.__setattr__(self, "x_values", tuple(self.x.tolist()))
        object.__setattr__(self, "f_values", tuple(self.f.tolist()))

    @classmethod
    def build(
        cls,
        pdf: Callable[[float], float],
        inverse_pdf: Callable[[float], float],
        r: float,
        v: float,
        layers: int = LAYERS,
    ) -> ZigguratTable:
        """
        Run the layer recurrence ``x[i+1] = f^-1(f(x[i]) + v / x[i])``.

        Parameters
        ----------
        pdf : Callable[[float], float]
            Unnormalized density with ``pdf(0) = 1``.
        inverse_pdf : Callable[[float], float]
            Inverse of ``pdf`` on ``(0, 1]``.
        r : float
            Tail start.
        v : float
            Layer area consistent with ``r``.
        layers : int, default LAYERS
            Number of layers.
        """
        x = np.empty(layers + 1, dtype=np.float64)
        f = np.empty(layers + 1, dtype=np.float64)
        x[0] = v / pdf(r)
        x[1] = r
        for i in range(1, layers - 1):
            height = pdf(x[i]) + v / x[i]
            x[i + 1] = inverse_pdf(height) if height < 1.0 else 0.0
        x[layers] = 0.0
        for i in range(layers + 1):
            f[i] = pdf(x[i])
        x.flags.writeable = False
        f.flags.writeable = False
        return cls(x=x, f=f, r=r, v=v)


class _LazyTable:
    """Build a table on first access, exactly once, under a lock."""

    def __init__(self, name: str, builder: Callable[[], ZigguratTable]) -> None:
        self._name = name
        self._builder = builder
        self._lock = threading.Lock()
        self._table: ZigguratTable | None = None

    def get(self) -> ZigguratTable:
        table = self._table
        if table is None:
            with self._lock:
                if self._table is None:
                    self._table = self._builder()
                    logger.debug("ziggurat table built", density=self._name, layers=LAYERS)
                table = self._table
        return table


def _normal_pdf(x: float) -> float:
    return math.exp(-0.5 * x * x)


def _normal_inverse_pdf(y: float) -> float:
    return math.sqrt(-2.0 * math.log(y))


def _exponential_pdf(x: float) -> float:
    return math.exp(-x)


def _exponential_inverse_pdf(y: float) -> float:
    return -math.log(y)


def _build_normal_table() -> ZigguratTable:
    r = NORMAL_R
    v = r * _normal_pdf(r) + math.sqrt(math.pi / 2.0) * float(erfc(r / math.sqrt(2.0)))
    return ZigguratTable.build(_normal_pdf, _normal_inverse_pdf, r, v)


def _build_exponential_table() -> ZigguratTable:
    r = EXPONENTIAL_R
    v = (r + 1.0) * math.exp(-r)
    return ZigguratTable.build(_exponential_pdf, _exponential_inverse_pdf, r, v)


_NORMAL = _LazyTable("normal", _build_normal_table)
_EXPONENTIAL = _LazyTable("exponential", _build_exponential_table)


def normal_table() -> ZigguratTable:
    """Shared table for the standard normal density ``exp(-x**2 / 2)``."""
    return _NORMAL.get()


def exponential_table() -> ZigguratTable:
    """Shared table for the standard exponential density ``exp(-x)``."""
    return _EXPONENTIAL.get()


def ziggurat(
    bits: BitSource,
    table: ZigguratTable,
    pdf: Callable[[float], float],
    tail: Callable[[BitSource, float], float],
    symmetric: bool,
) -> float:
    """
    Draw one variate by ziggurat rejection.

    Parameters
    ----------
    bits : BitSource
        Source of words.
    table : ZigguratTable
        Layers of ``pdf``.
    pdf : Callable[[float], float]
        Exact unnormalized density used by the overhang test.
    tail : Callable[[BitSource, float], float]
        Draws a magnitude ``>= r`` from the tail beyond ``r``.
    symmetric : bool
        Whether to attach a random sign to the accepted magnitude.

    Returns
    -------
    float
        A variate distributed according to ``pdf`` (mirrored when symmetric).
    """
    xs = table.x_values
    fs = table.f_values
    while True:
        word = bits.next_u64()
        i = word & _LAYER_MASK
        x = xs[i] * ((word >> 12) * _SCALE_52)
        if x < xs[i + 1]:
            break
        if i == 0:
            x = tail(bits, table.r)
            break
        if fs[i + 1] + (fs[i] - fs[i + 1]) * standard_float(bits) < pdf(x):
            break
    if symmetric and word & _SIGN_BIT:
        return -x
    return x


def _normal_tail(bits: BitSource, r: float) -> float:
    inv_r = 1.0 / r
    while True:
        x = -math.log(open01(bits)) * inv_r
        y = -math.log(open01(bits))
        if 2.0 * y >= x * x:
            return r + x


def _exponential_tail(bits: BitSource, r: float) -> float:
    return r - math.log(open01(bits))


def standard_normal(bits: BitSource) -> float:
    """Standard normal variate, mean 0 and variance 1."""
    return ziggurat(bits, normal_table(), _normal_pdf, _normal_tail, symmetric=True)


def standard_exponential(bits: BitSource) -> float:
    """Standard exponential variate, rate 1."""
    return ziggurat(bits, exponential_table(), _exponential_pdf, _exponential_tail, symmetric=False)
