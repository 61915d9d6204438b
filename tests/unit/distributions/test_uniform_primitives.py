from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter

import pytest

from pysatl_variates.bits import U64_MAX
from pysatl_variates.distributions.uniform import (
    MAX_STANDARD_FLOAT,
    open01,
    open_closed01,
    random_word,
    rejection_zone,
    standard_float,
    widening_split,
    word_width,
)
from tests.utils.mocks import AllOnesSource, SequenceBitSource, Word64Source


class TestUnitFloats:
    def test_zero_word(self):
        bits = Word64Source([0])
        assert standard_float(bits) == 0.0
        assert open01(bits) == 2.0**-53
        assert open_closed01(bits) == 2.0**-53

    def test_all_ones_word(self):
        assert standard_float(AllOnesSource()) == MAX_STANDARD_FLOAT
        assert open01(AllOnesSource()) == 1.0 - 2.0**-53
        assert open_closed01(AllOnesSource()) == 1.0

    def test_only_top_bits_matter(self):
        low_noise = Word64Source([(1 << 63) | 0x7FF])
        assert standard_float(low_noise) == 0.5

    @pytest.mark.parametrize("word", [0, 1, 1 << 11, 1 << 52, U64_MAX >> 1, U64_MAX])
    def test_ranges(self, word):
        assert 0.0 <= standard_float(Word64Source([word])) < 1.0
        assert 0.0 < open01(Word64Source([word])) < 1.0
        assert 0.0 < open_closed01(Word64Source([word])) <= 1.0


class TestWordWidth:
    @pytest.mark.parametrize(
        "span, expected",
        [
            (1, 32),
            (10, 32),
            (2**32, 32),
            (2**32 + 1, 64),
            (2**64, 64),
            (2**64 + 1, 128),
            (2**128, 128),
            (2**200, 256),
        ],
    )
    def test_word_width(self, span, expected):
        assert word_width(span) == expected

    def test_random_word_concatenates_u64(self):
        bits = Word64Source([1, 2])
        assert random_word(bits, 128) == (1 << 64) | 2
        assert random_word(SequenceBitSource([0xABCD]), 32) == 0xABCD


class TestWideningMultiply:
    WIDTH = 8

    @pytest.mark.parametrize("span", range(1, 2**8 + 1))
    def test_accepted_offsets_are_exactly_uniform(self, span):
        zone = rejection_zone(span, self.WIDTH)
        accepted: Counter[int] = Counter()
        rejected = 0
        for word in range(2**self.WIDTH):
            hi, lo = widening_split(word, span, self.WIDTH)
            assert 0 <= hi < span
            if lo <= zone:
                accepted[hi] += 1
            else:
                rejected += 1

        assert set(accepted) == set(range(span))
        assert len(set(accepted.values())) == 1
        assert rejected == 2**self.WIDTH % span
        assert rejected < 2**self.WIDTH / 2

    def test_full_domain_never_rejects(self):
        assert rejection_zone(2**32, 32) == 2**32 - 1
        assert rejection_zone(2**64, 64) == 2**64 - 1

    def test_zone_for_small_span(self):
        # 2**32 mod 10 == 6 low halves are rejected
        assert rejection_zone(10, 32) == 2**32 - 1 - 6
