"""
Uniform Bit Sources
===================

The capability every distribution consumes:

- :class:`BitSource` – protocol with ``next_u32``, ``next_u64`` and
  ``fill_bytes``.
- :class:`BitSourceBase` – derives the wide primitives from ``next_u32``.
- :class:`NumPyBitSource` – adapter over :class:`numpy.random.Generator`.

Notes
-----
- Bit sources carry mutable state and are not meant to be shared between
  threads; distributions never store them.
- How a source is seeded is the source's own business.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from numpy.random import BitGenerator, Generator, SeedSequence

U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


@runtime_checkable
class BitSource(Protocol):
    """Source of statistically uniform, independent random words."""

    def next_u32(self) -> int:
        """Return a uniform integer in ``[0, 2**32)``."""
        ...

    def next_u64(self) -> int:
        """Return a uniform integer in ``[0, 2**64)``."""
        ...

    def fill_bytes(self, n: int) -> bytes:
        """Return ``n`` uniform bytes."""
        ...


class BitSourceBase(ABC):
    """
    Bit source implemented on top of a single ``next_u32`` primitive.

    ``next_u64`` takes the first 32-bit word as the low half, and
    ``fill_bytes`` lays 64-bit words out little-endian, truncating the
    last one. Subclasses with a native 64-bit output should override both.
    """

    @abstractmethod
    def next_u32(self) -> int: ...

    def next_u64(self) -> int:
        low = self.next_u32()
        high = self.next_u32()
        return (high << 32) | low

    def fill_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative.")
        buf = bytearray()
        while len(buf) < n:
            buf += self.next_u64().to_bytes(8, "little")
        return bytes(buf[:n])


class NumPyBitSource(BitSourceBase):
    """
    Bit source backed by a NumPy random generator.

    Parameters
    ----------
    seed : int, SeedSequence, BitGenerator, Generator or None, optional
        Anything accepted by :func:`numpy.random.default_rng`. An existing
        ``Generator`` is used as is (and its state is advanced by draws).
    """

    __slots__ = ("_rng",)

    def __init__(
        self, seed: int | SeedSequence | BitGenerator | Generator | None = None
    ) -> None:
        self._rng = np.random.default_rng(seed)

    @property
    def generator(self) -> Generator:
        """The wrapped NumPy generator."""
        return self._rng

    def next_u32(self) -> int:
        return int(self._rng.integers(0, U32_MAX, endpoint=True, dtype=np.uint32))

    def next_u64(self) -> int:
        # random_raw only yields 32 significant bits for MT19937
        return int(self._rng.integers(0, U64_MAX, endpoint=True, dtype=np.uint64))

    def fill_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("n must be non-negative.")
        return self._rng.bytes(n)
