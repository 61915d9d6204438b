"""
Draws at extreme but valid parameters never raise
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_variates.bits import NumPyBitSource
from pysatl_variates.families.builtins.continuous.cauchy import Cauchy
from pysatl_variates.families.builtins.continuous.chi_squared import ChiSquared
from pysatl_variates.families.builtins.continuous.fisher_f import FisherF
from pysatl_variates.families.builtins.continuous.gamma import Gamma
from pysatl_variates.families.builtins.continuous.normal import LogNormal
from pysatl_variates.families.builtins.continuous.pareto import Pareto
from pysatl_variates.families.builtins.continuous.student_t import StudentT
from pysatl_variates.families.builtins.discrete.poisson import Poisson

from .base import BaseDistributionTest


class TestExtremeParameters(BaseDistributionTest):
    """Variates stay finite or infinite, never NaN or an exception, inside the support."""

    DRAWS = 3_000

    @pytest.mark.parametrize(
        "dist",
        [
            LogNormal(mu=1000.0, sigma=1.0),
            LogNormal(mu=0.0, sigma=1000.0),
            LogNormal(mu=-1000.0, sigma=1.0),
            Pareto(scale=1.0, shape=0.001),
            Pareto(scale=1e300, shape=0.5),
            FisherF(1.0, 0.01),
            FisherF(0.01, 0.01),
            StudentT(0.01),
            ChiSquared(0.01),
            Gamma(shape=0.001, scale=1.0),
            Gamma(shape=0.001, scale=1e300),
            Gamma(shape=1e6, scale=1e300),
            Cauchy(median=0.0, scale=1e300),
            Poisson(1e9),
        ],
        ids=repr,
    )
    def test_draws_do_not_raise(self, dist):
        bits = NumPyBitSource(11)
        support = dist.support
        for _ in range(self.DRAWS):
            value = dist.sample(bits)
            assert isinstance(value, float | int)
            assert not math.isnan(value)
            assert math.isinf(value) or value in support, value

    def test_lognormal_saturates(self):
        bits = NumPyBitSource(12)
        assert all(LogNormal(1000.0, 1.0).sample(bits) == math.inf for _ in range(100))
        assert all(LogNormal(-1000.0, 1.0).sample(bits) == 0.0 for _ in range(100))

    def test_tiny_gamma_shape_underflows_into_support(self):
        dist = Gamma(shape=0.001, scale=1.0)
        samples = self.draw(dist, self.DRAWS, seed=16)

        assert (samples == 0.0).any()
        assert dist.support.contains(samples).all()

    def test_tiny_dof_reaches_infinity(self):
        f_samples = self.draw(FisherF(1.0, 0.01), self.DRAWS, seed=13)
        t_samples = self.draw(StudentT(0.01), self.DRAWS, seed=14)

        assert (f_samples == math.inf).any()
        assert (abs(t_samples) == math.inf).any()

    def test_poisson_huge_rate_mean(self):
        lam = 1e9
        samples = self.draw(Poisson(lam), self.DRAWS, seed=15)
        self.assert_mean_close(samples.astype(float), lam, math.sqrt(lam))
