"""
Concrete distribution instances with specific parameter values.

This module provides the base class of every built-in distribution: a
frozen, validated parametrization that also implements the
:class:`~pysatl_variates.distributions.distribution.Distribution` protocol.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pysatl_variates.distributions.distribution import Distribution
from pysatl_variates.families.parametrizations import Parametrization
from pysatl_variates.types import UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from pysatl_variates.bits import BitSource
    from pysatl_variates.distributions.support import Support
    from pysatl_variates.types import DistributionType


class ParametricFamilyDistribution(Parametrization, Distribution):
    """
    A distribution whose parameters are its base parametrization.

    Subclasses are frozen dataclasses: init fields are the parameters,
    checked by ``@constraint`` methods when the instance is built; derived
    constants are non-init fields filled in by ``_prepare``. Instances hold
    no reference to a bit source and are safe to share between threads.
    """

    _distribution_type: ClassVar[DistributionType] = UnivariateContinuous

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return None

    @abstractmethod
    def sample(self, bits: BitSource) -> Any:
        """
        Draw a single variate.

        Parameters
        ----------
        bits : BitSource
            Source of uniform words; consumed, never stored.
        """
