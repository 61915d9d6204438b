"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: a stateless
generator that turns words from a caller-supplied bit source into one
scalar variate per call.

Notes
-----
- ``sample`` is the only operation a distribution must provide; the lazy
  ``sample_iter`` is derived from it.
- Implementations never keep a reference to the bit source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    from pysatl_variates.bits import BitSource
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.types import DistributionType


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support | None: ...

    def sample(self, bits: BitSource) -> Any: ...

    def sample_iter(self, bits: BitSource) -> Iterator[Any]:
        """
        Yield an endless stream of independent variates.

        Parameters
        ----------
        bits : BitSource
            Source consumed by every yielded draw.
        """
        while True:
            yield self.sample(bits)
