"""
PySATL Variates
===============

Random variates from uniform bits: unbiased uniform ranges, ziggurat
sampling of the normal and exponential distributions, the distributions
derived from them, and weighted choice, organised in parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from ._logging import configure_logging
from .bits import *
from .bits import __all__ as _bits_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    "configure_logging",
    *_bits_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _bits_all
del _distr_all
del _errors_all
del _family_all
del _types_all
