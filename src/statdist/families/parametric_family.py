"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions, including support for multiple parameterizations and a
factory creating distribution instances.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any

    from statdist.families.distribution import ParametricFamilyDistribution
    from statdist.families.parametrizations import Parametrization
    from statdist.types import DistributionType, ParametrizationName


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., beta, gamma)
    that can be parameterized in different ways. Manages parametrizations
    and provides factory methods for creating distribution instances.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Type of every distribution of the family.
    distribution_class : type[ParametricFamilyDistribution]
        Concrete distribution class built from base-parametrization values.
    distr_parametrizations : Iterable[type[Parametrization]], optional
        Parametrization classes; the first one is the base parametrization.
        More can be added later with :meth:`parametrization`.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distribution_class: type[ParametricFamilyDistribution],
        distr_parametrizations: Iterable[type[Parametrization]] = (),
    ):
        self._name = name
        self._distr_type = distr_type
        self.distribution_class = distribution_class

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = []

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        for parametrization_class in distr_parametrizations:
            self.register_parametrization(
                parametrization_class.__param_name__, parametrization_class
            )

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the type shared by the distributions of this family."""
        return self._distr_type

    @property
    def base_parametrization_name(self) -> ParametrizationName:
        """
        Get the name of the base parametrization.

        Raises
        ------
        ValueError
            If no parametrization is registered.
        """
        if not self.parametrization_names:
            raise ValueError(f"Family '{self._name}' has no registered parametrizations.")
        return self.parametrization_names[0]

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """Get the base parametrization class."""
        return self._parametrizations[self.base_parametrization_name]

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
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class
        self.parametrization_names.append(name)

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
        TypeError
            If parameters are missing or unknown.
        ParameterConstraintError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return self.distribution_class.from_parameters(self.to_base(parameters))

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        If you want to use this syntax and so that Mypy doesn't swear,
        you should mark your class as a dataclass.
        At the moment, Mypy cannot identify dataclass_transform if the decorator is a class method.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from statdist.families.parametrizations import parametrization as _param_deco

        return _param_deco(name=name, family=self)

    __call__ = distribution
