from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from itertools import cycle

from pysatl_variates.bits import U32_MAX, U64_MAX, BitSourceBase, NumPyBitSource


class SequenceBitSource(BitSourceBase):
    """
    Replays 32-bit words in a loop.

    ``next_u64`` and ``fill_bytes`` are the inherited derivations, so the
    source also pins down how they combine 32-bit words.
    """

    def __init__(self, words: Iterable[int]) -> None:
        self.words = list(words)
        if not self.words:
            raise ValueError("at least one word is required")
        self._it = cycle(self.words)
        self.u32_calls = 0

    def next_u32(self) -> int:
        self.u32_calls += 1
        return next(self._it) & U32_MAX


class Word64Source(BitSourceBase):
    """Replays 64-bit words in a loop; ``next_u32`` returns their high halves."""

    def __init__(self, words: Iterable[int]) -> None:
        self.words = list(words)
        if not self.words:
            raise ValueError("at least one word is required")
        self._it = cycle(self.words)
        self.u64_calls = 0

    def next_u64(self) -> int:
        self.u64_calls += 1
        return next(self._it) & U64_MAX

    def next_u32(self) -> int:
        return self.next_u64() >> 32


class AllOnesSource(Word64Source):
    """Every word has every bit set, the largest value any word can take."""

    def __init__(self) -> None:
        super().__init__([U64_MAX])


class CountingBitSource(BitSourceBase):
    """Seeded NumPy source that counts how many words are taken."""

    def __init__(self, seed: int = 0) -> None:
        self._inner = NumPyBitSource(seed)
        self.u32_calls = 0
        self.u64_calls = 0

    def next_u32(self) -> int:
        self.u32_calls += 1
        return self._inner.next_u32()

    def next_u64(self) -> int:
        self.u64_calls += 1
        return self._inner.next_u64()


class FailingBitSource(BitSourceBase):
    """Raises on every request."""

    def next_u32(self) -> int:
        raise RuntimeError("bit source exhausted")
