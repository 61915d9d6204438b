"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: a named set of parametrizations, one of which is the
distribution class itself, and a factory that builds validated
distributions from any of them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, dataclass_transform

from pysatl_variates._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_variates.families.distribution import ParametricFamilyDistribution
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.types import DistributionType, ParametrizationName

logger = get_logger(__name__)


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Distribution type shared by every member of the family.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization). The
        base parametrization class is the distribution class.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
    ):
        self._name = name
        self.distribution_type = distr_type

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name, one of ``parametrization_names``.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered or is not declared by the family.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        parametrization_class.__family__ = self
        parametrization_class.__param_name__ = name
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ConstructionError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        distribution = self.to_base(parameters)
        logger.debug(
            "distribution built",
            family=self.name,
            parametrization=parameters.name,
            parameters=parameters.parameters,
        )
        return distribution  # type: ignore[return-value]

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_variates.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
