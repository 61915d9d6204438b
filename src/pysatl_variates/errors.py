"""
Construction Errors
===================

Every error this package raises on its own account is a construction error:
distributions validate their parameters once, when they are built, and
sampling never fails afterwards. Errors raised by a bit source propagate
unchanged.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

__all__ = [
    "ConstructionError",
    "InvalidParameter",
    "InvalidRange",
    "InvalidWeights",
]


class ConstructionError(ValueError):
    """
    A distribution was built with out-of-domain parameters.

    Parameters
    ----------
    message : str
        Human-readable reason.
    owner : str or None, optional
        Name of the distribution class being constructed.
    """

    def __init__(self, message: str, owner: str | None = None) -> None:
        self.owner = owner
        super().__init__(f"{owner}: {message}" if owner else message)


class InvalidRange(ConstructionError):
    """Uniform range with inverted, empty or non-finite bounds."""


class InvalidParameter(ConstructionError):
    """Non-positive scale, shape, rate or degrees of freedom, or a non-finite location."""


class InvalidWeights(ConstructionError):
    """Empty collection, negative or non-finite weight, or zero total weight."""
