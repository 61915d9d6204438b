"""
Tests for Cauchy Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import stats

from pysatl_variates.errors import InvalidParameter
from pysatl_variates.families.builtins.continuous.cauchy import Cauchy
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.types import FamilyName
from tests.utils.mocks import Word64Source

from ..base import BaseDistributionTest


class TestCauchyFamily(BaseDistributionTest):
    """Test suite for Cauchy distribution family."""

    def test_registered(self):
        family = configure_families_register().get(FamilyName.CAUCHY)
        assert family(median=1.0, scale=2.0) == Cauchy(1.0, 2.0)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"median": math.nan, "scale": 1.0}, "median is finite"),
            ({"median": 0.0, "scale": 0.0}, "scale > 0"),
            ({"median": 0.0, "scale": math.inf}, "scale is finite"),
        ],
    )
    def test_constraints(self, params, message):
        with pytest.raises(InvalidParameter, match=message):
            Cauchy(**params)

    def test_pole_is_redrawn(self):
        # the first word maps to u == 0.5, the second to u == 0
        bits = Word64Source([1 << 63, 0])
        assert Cauchy(2.0, 3.0).sample(bits) == 2.0
        assert bits.u64_calls == 2

    def test_sampling(self):
        samples = self.draw(Cauchy(median=-1.0, scale=0.5), self.SAMPLE_SIZE, seed=31)
        self.assert_fits(samples, stats.cauchy(loc=-1.0, scale=0.5).cdf)
