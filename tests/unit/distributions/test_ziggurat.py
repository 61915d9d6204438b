from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.bits import U64_MAX, NumPyBitSource
from pysatl_variates.distributions.ziggurat import (
    EXPONENTIAL_R,
    LAYERS,
    NORMAL_R,
    ZigguratTable,
    _LazyTable,
    exponential_table,
    normal_table,
    standard_exponential,
    standard_normal,
)
from tests.utils.mocks import Word64Source


@pytest.mark.parametrize(
    "table_getter, r, v",
    [
        (normal_table, NORMAL_R, 0.00492867323399),
        (exponential_table, EXPONENTIAL_R, 0.0039496598225815571993),
    ],
    ids=["normal", "exponential"],
)
class TestTables:
    def test_shape_and_endpoints(self, table_getter, r, v):
        table = table_getter()
        assert table.x.shape == (LAYERS + 1,)
        assert table.f.shape == (LAYERS + 1,)
        assert table.x[1] == r
        assert table.x[LAYERS] == 0.0
        assert table.f[LAYERS] == 1.0
        assert table.r == r

    def test_layer_area(self, table_getter, r, v):
        table = table_getter()
        assert table.v == pytest.approx(v, rel=1e-9)
        assert table.x[0] == pytest.approx(table.v / table.f[1], rel=1e-12)

    def test_boundaries_strictly_decrease(self, table_getter, r, v):
        x = table_getter().x
        assert np.all(np.diff(x) < 0)

    def test_equal_layer_areas(self, table_getter, r, v):
        table = table_getter()
        x, f = table.x, table.f
        areas = x[1 : LAYERS - 1] * (f[2:LAYERS] - f[1 : LAYERS - 1])
        np.testing.assert_allclose(areas, table.v, rtol=1e-9)
        # the top layer closes the recurrence only as accurately as r is known
        assert x[LAYERS - 1] * (1.0 - f[LAYERS - 1]) == pytest.approx(table.v, rel=5e-2)

    def test_tables_are_read_only_and_shared(self, table_getter, r, v):
        table = table_getter()
        assert table_getter() is table
        with pytest.raises(ValueError):
            table.x[3] = 1.0
        with pytest.raises(ValueError):
            table.f[3] = 1.0

    def test_draw_path_tuples_mirror_arrays(self, table_getter, r, v):
        table = table_getter()
        assert table.x_values == tuple(table.x)
        assert table.f_values == tuple(table.f)
        assert all(type(value) is float for value in table.x_values + table.f_values)


def test_lazy_table_built_once_across_threads():
    calls = []
    barrier = threading.Barrier(8)

    def builder() -> ZigguratTable:
        calls.append(1)
        return normal_table()

    lazy = _LazyTable("counting", builder)
    results = []

    def worker():
        barrier.wait()
        results.append(lazy.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert all(result is results[0] for result in results)


class TestWordLayout:
    def test_zero_word_is_zero(self):
        assert standard_normal(Word64Source([0])) == 0.0
        assert standard_exponential(Word64Source([0])) == 0.0

    def test_layer_sign_and_position(self):
        # layer 5, sign bit set, position 0.5
        word = (1 << 63) | (1 << 8) | 5
        bits = Word64Source([word])

        assert standard_normal(bits) == -0.5 * normal_table().x[5]
        assert bits.u64_calls == 1

    def test_exponential_ignores_sign_bit(self):
        word = (1 << 63) | (1 << 8) | 5
        assert standard_exponential(Word64Source([word])) == 0.5 * exponential_table().x[5]

    def test_normal_tail(self):
        # base layer, sign bit set, position beyond r
        bits = Word64Source([U64_MAX ^ 0xFF])
        value = standard_normal(bits)

        assert value <= -NORMAL_R
        assert value == pytest.approx(-NORMAL_R)

    def test_exponential_tail(self):
        bits = Word64Source([U64_MAX ^ 0xFF])
        value = standard_exponential(bits)

        assert value >= EXPONENTIAL_R
        assert value == pytest.approx(EXPONENTIAL_R)


class TestSampling:
    N = 20_000

    def test_standard_normal_goodness_of_fit(self):
        bits = NumPyBitSource(42)
        samples = np.array([standard_normal(bits) for _ in range(self.N)])

        assert abs(samples.mean()) < 5 / np.sqrt(self.N)
        assert samples.var() == pytest.approx(1.0, abs=0.05)
        assert stats.kstest(samples, stats.norm.cdf).pvalue > 1e-4

    def test_standard_normal_symmetry(self):
        bits = NumPyBitSource(7)
        samples = np.array([standard_normal(bits) for _ in range(self.N)])
        positive = int(np.count_nonzero(samples > 0))

        assert stats.binomtest(positive, self.N).pvalue > 1e-4

    def test_standard_exponential_goodness_of_fit(self):
        bits = NumPyBitSource(43)
        samples = np.array([standard_exponential(bits) for _ in range(self.N)])

        assert samples.min() >= 0.0
        assert samples.mean() == pytest.approx(1.0, abs=0.05)
        assert stats.kstest(samples, stats.expon.cdf).pvalue > 1e-4

    def test_same_seed_same_variates(self):
        a = NumPyBitSource(3)
        b = NumPyBitSource(3)
        assert [standard_normal(a) for _ in range(100)] == [standard_normal(b) for _ in range(100)]
