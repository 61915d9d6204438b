"""
Parameterization classes and constraints for distribution families.

This module provides the core abstractions for defining different parameterizations
of statistical distributions, including constraints validation and conversion
between parameterization formats.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ClassVar, ParamSpec

from pysatl_variates._logging import get_logger
from pysatl_variates.errors import ConstructionError, InvalidParameter
from pysatl_variates.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_variates.families.parametric_family import ParametricFamily

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are frozen dataclasses. Constraint methods
    marked with :func:`constraint` are collected when the subclass is
    created, in definition order and after those of its bases, and are
    checked right after the dataclass ``__init__``. Once every constraint
    holds, :meth:`_prepare` may precompute derived, non-init fields.
    """

    # Set when the class is registered in a family
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []
    _error_type: ClassVar[type[ConstructionError]] = InvalidParameter

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        inherited = list(getattr(cls, "_constraints", []))
        own = _collect_constraints(cls)
        known = {c.check for c in inherited}
        cls._constraints = inherited + [c for c in own if c.check not in known]

    def __post_init__(self) -> None:
        self.validate()
        self._prepare()

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return getattr(self.__class__, "__param_name__", self.__class__.__name__)

    @property
    def parameters(self) -> dict[str, Any]:
        """Get the constructor parameters as a dictionary."""
        if is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ConstructionError
            The class's error type (``InvalidParameter`` unless overridden)
            if any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                logger.debug(
                    "constraint violated",
                    parametrization=type(self).__name__,
                    constraint=constraint.description,
                )
                raise self._error_type(
                    f'Constraint "{constraint.description}" does not hold',
                    owner=type(self).__name__,
                )

    def _prepare(self) -> None:
        """Precompute derived fields; runs once, after validation."""

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in the base parametrization.

        Notes
        -----
        Base implementation returns self. Subclasses should override
        if conversion to a different parametrization is needed.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type) -> list[ParametrizationConstraint]:
    """Collect constraint methods defined directly on ``cls``."""
    constraints: list[ParametrizationConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @staticmethod"
                )
            continue
        if isinstance(attr, classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @classmethod"
                )
            continue

        func = attr if callable(attr) and isfunction(attr) else None
        if not func:
            continue
        if getattr(func, "__is_constraint", False):
            desc = getattr(func, "__constraint_description", func.__name__)
            constraints.append(ParametrizationConstraint(description=desc, check=func))
    return constraints


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that registers the parametrization.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
