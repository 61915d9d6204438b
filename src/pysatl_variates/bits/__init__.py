"""
Bit sources subpackage

The uniform-bit capability consumed by every distribution, plus a base class
and a NumPy-backed adapter.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .source import U32_MAX, U64_MAX, BitSource, BitSourceBase, NumPyBitSource

__all__ = [
    "BitSource",
    "BitSourceBase",
    "NumPyBitSource",
    "U32_MAX",
    "U64_MAX",
]
