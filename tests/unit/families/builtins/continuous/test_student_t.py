"""
Tests for Student's t Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from scipy import stats

from pysatl_variates.distributions.support import SupportShape
from pysatl_variates.errors import InvalidParameter
from pysatl_variates.families.builtins.continuous.student_t import StudentT
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.types import FamilyName

from ..base import BaseDistributionTest


class TestStudentTFamily(BaseDistributionTest):
    """Test suite for StudentT distribution family."""

    def test_registered(self):
        family = configure_families_register().get(FamilyName.STUDENT_T)
        dist = family(nu=4.0)
        assert dist == StudentT(4.0)
        assert dist.support.shape == SupportShape.REAL_LINE

    @pytest.mark.parametrize("nu", [0.0, -2.0, float("nan"), float("inf")])
    def test_constraints(self, nu):
        with pytest.raises(InvalidParameter, match="nu"):
            StudentT(nu)

    @pytest.mark.parametrize("nu", [1.0, 3.5, 10.0])
    def test_sampling(self, nu):
        samples = self.draw(StudentT(nu), self.SAMPLE_SIZE, seed=int(nu * 10))
        self.assert_fits(samples, stats.t(df=nu).cdf)

    def test_moments(self):
        nu = 10.0
        samples = self.draw(StudentT(nu), self.SAMPLE_SIZE, seed=100)

        self.assert_mean_close(samples, 0.0, (nu / (nu - 2)) ** 0.5)
        self.assert_variance_close(samples, nu / (nu - 2), rel=0.1)
