"""
Tests for Fisher-Snedecor F Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from scipy import stats

from pysatl_variates.errors import InvalidParameter
from pysatl_variates.families.builtins.continuous.fisher_f import FisherF
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.types import FamilyName

from ..base import BaseDistributionTest


class TestFisherFFamily(BaseDistributionTest):
    """Test suite for FisherF distribution family."""

    def test_registered(self):
        family = configure_families_register().get(FamilyName.FISHER_F)
        assert family(d1=2.0, d2=3.0) == FisherF(2.0, 3.0)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"d1": 0.0, "d2": 1.0}, "d1 > 0"),
            ({"d1": 1.0, "d2": -1.0}, "d2 > 0"),
            ({"d1": float("inf"), "d2": 1.0}, "finite"),
        ],
    )
    def test_constraints(self, params, message):
        with pytest.raises(InvalidParameter, match=message):
            FisherF(**params)

    @pytest.mark.parametrize("d1, d2", [(5.0, 10.0), (2.5, 1.5), (1.0, 8.0)])
    def test_sampling(self, d1, d2):
        samples = self.draw(FisherF(d1, d2), self.SAMPLE_SIZE, seed=int(d1 * 10 + d2))

        assert samples.min() >= 0.0
        self.assert_fits(samples, stats.f(dfn=d1, dfd=d2).cdf)

    def test_moments(self):
        d1, d2 = 5.0, 40.0
        samples = self.draw(FisherF(d1, d2), self.SAMPLE_SIZE, seed=45)
        mean = d2 / (d2 - 2)
        variance = 2 * d2**2 * (d1 + d2 - 2) / (d1 * (d2 - 2) ** 2 * (d2 - 4))

        self.assert_mean_close(samples, mean, variance**0.5)
        self.assert_variance_close(samples, variance, rel=0.15)
