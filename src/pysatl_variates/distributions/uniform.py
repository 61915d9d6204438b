"""
Uniform Primitives
==================

Conversions from raw words to uniform values that every distribution builds
on:

- unit floats: :func:`standard_float` on ``[0, 1)``, :func:`open01` on
  ``(0, 1)`` and :func:`open_closed01` on ``(0, 1]``;
- integers: :func:`word_width`, :func:`random_word`, :func:`rejection_zone`
  and :func:`widening_split`, the pieces of the unbiased widening-multiply
  range reduction used by
  :class:`~pysatl_variates.families.builtins.discrete.uniform.UniformInt`.

Notes
-----
- A unit float keeps the top 53 (or 52) bits of a 64-bit word and drops the
  rest, so every representable output is equally likely.
- Scaling constants are powers of two, so converting a word never divides.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_variates.bits import BitSource

_SCALE_53 = 2.0**-53
_SCALE_52 = 2.0**-52

MAX_STANDARD_FLOAT = 1.0 - _SCALE_53
"""Largest value :func:`standard_float` can return."""


def standard_float(bits: BitSource) -> float:
    """Uniform float on ``[0, 1)`` with 53 bits of precision."""
    return (bits.next_u64() >> 11) * _SCALE_53


def open01(bits: BitSource) -> float:
    """Uniform float on ``(0, 1)``; both endpoints are excluded."""
    return ((bits.next_u64() >> 12) + 0.5) * _SCALE_52


def open_closed01(bits: BitSource) -> float:
    """Uniform float on ``(0, 1]``."""
    return ((bits.next_u64() >> 11) + 1) * _SCALE_53


def word_width(span: int) -> int:
    """
    Number of bits in the words used to sample ``span`` distinct values.

    32 bits while ``span`` fits in a 32-bit word, otherwise the smallest
    multiple of 64 bits whose domain holds ``span`` values.

    Parameters
    ----------
    span : int
        Number of distinct outcomes, ``>= 1``.
    """
    if span <= 1 << 32:
        return 32
    return 64 * -(-(span - 1).bit_length() // 64)


def random_word(bits: BitSource, width: int) -> int:
    """Uniform integer on ``[0, 2**width)`` for ``width`` 32 or a multiple of 64."""
    if width == 32:
        return bits.next_u32()
    word = 0
    for _ in range(width // 64):
        word = (word << 64) | bits.next_u64()
    return word


def rejection_zone(span: int, width: int) -> int:
    """
    Largest accepted low half of ``word * span`` for ``width``-bit words.

    Exactly ``2**width mod span`` low halves are rejected, which leaves every
    value of the high half with the same number of accepted words. When
    ``span == 2**width`` nothing is rejected.
    """
    domain = 1 << width
    return domain - 1 - (domain - span) % span


def widening_split(word: int, span: int, width: int) -> tuple[int, int]:
    """
    Split ``word * span`` into its high and low ``width``-bit halves.

    The high half is the candidate offset in ``[0, span)``, the low half is
    compared against :func:`rejection_zone`.
    """
    product = word * span
    return product >> width, product & ((1 << width) - 1)
