"""
Distributions subpackage

The distribution protocol, supports, and the sampling primitives shared by
every distribution: uniform word conversions and the ziggurat.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import Distribution
from .support import ContinuousSupport, IntegerLatticeDiscreteSupport, Support, SupportShape
from .uniform import open01, open_closed01, standard_float
from .ziggurat import (
    ZigguratTable,
    exponential_table,
    normal_table,
    standard_exponential,
    standard_normal,
)

__all__ = [
    "ContinuousSupport",
    "Distribution",
    "IntegerLatticeDiscreteSupport",
    "Support",
    "SupportShape",
    "ZigguratTable",
    "exponential_table",
    "normal_table",
    "open01",
    "open_closed01",
    "standard_exponential",
    "standard_float",
    "standard_normal",
]
