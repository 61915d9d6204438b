from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from pysatl_variates.distributions.support import (
    ContinuousSupport,
    IntegerLatticeDiscreteSupport,
    SupportShape,
)


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    def test_continuous_support_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    @pytest.mark.parametrize(
        "support, expected_shape",
        [
            (ContinuousSupport(1, 0), SupportShape.EMPTY),
            (ContinuousSupport(0, 1), SupportShape.BOUNDED_INTERVAL),
            (ContinuousSupport(left=0), SupportShape.RAY_RIGHT),
            (ContinuousSupport(right=0), SupportShape.RAY_LEFT),
            (ContinuousSupport(), SupportShape.REAL_LINE),
            (ContinuousSupport(1, 1), SupportShape.SINGLE_POINT),
        ],
        ids=["empty", "bounded", "ray_right", "ray_left", "real_line", "single_point"],
    )
    def test_continuous_support_shape_variants(self, support, expected_shape):
        assert support.shape == expected_shape

    def test_inf_bound_is_not_closed(self):
        assert ContinuousSupport().left_closed is False
        assert ContinuousSupport().right_closed is False


class TestIntegerLatticeDiscreteSupport:
    support_examples = {
        "boundless": IntegerLatticeDiscreteSupport(residue=0, modulus=1),
        "bounded_left": IntegerLatticeDiscreteSupport(residue=1, modulus=2, min_k=5),
        "full_bounded": IntegerLatticeDiscreteSupport(residue=0, modulus=2, min_k=0, max_k=10),
        "dice": IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=1, max_k=6),
    }

    def test_invalid_modulus_raises(self):
        with pytest.raises(ValueError):
            IntegerLatticeDiscreteSupport(residue=0, modulus=0)

    @pytest.mark.parametrize(
        "support_name, point, expected_result",
        [
            ("boundless", 1, True),
            ("boundless", 1.5, False),
            ("bounded_left", 1, False),
            ("bounded_left", 5, True),
            ("full_bounded", 0, True),
            ("full_bounded", -2, False),
            ("dice", 6, True),
            ("dice", 7, False),
        ],
    )
    def test_contains_scalar(self, support_name, point, expected_result):
        support = self.support_examples[support_name]
        assert (point in support) is expected_result
        assert support.contains(point) is expected_result

    def test_contains_array(self):
        result = self.support_examples["full_bounded"].contains(np.array([-2, 0, 10, 12]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    def test_iter_points(self):
        with pytest.raises(RuntimeError):
            list(self.support_examples["boundless"].iter_points())
        with pytest.raises(RuntimeError):
            list(self.support_examples["bounded_left"].iter_points())

        assert list(self.support_examples["full_bounded"].iter_points()) == [0, 2, 4, 6, 8, 10]
        assert list(self.support_examples["dice"]) == [1, 2, 3, 4, 5, 6]
