"""
Concrete distribution instances with specific parameter values.

This module provides the base class shared by the distributions of every
parametric family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from abc import abstractmethod
from typing import TYPE_CHECKING, Self

from statdist.distributions.distribution import Distribution
from statdist.distributions.strategies import DirectSamplingStrategy
from statdist.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from typing import ClassVar

    from statdist.distributions.strategies import SamplingStrategy
    from statdist.families.parametric_family import ParametricFamily
    from statdist.families.parametrizations import Parametrization
    from statdist.types import DistributionType


class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Holds validated parameter values in the family's base parametrization.
    Instances are immutable: every query is a pure read of the parameters
    and of state derived from them at construction.

    Parameters
    ----------
    parameters : Parametrization
        Parameter values in the base parametrization of the family.
    sampling_strategy : SamplingStrategy, optional
        Strategy used by :meth:`sample_array`; defaults to
        :class:`DirectSamplingStrategy`.

    Raises
    ------
    ParameterConstraintError
        If the parameters violate a constraint of their parametrization.
    """

    family_name: ClassVar[str]
    _distribution_type: ClassVar[DistributionType]

    def __init__(
        self, parameters: Parametrization, sampling_strategy: SamplingStrategy | None = None
    ) -> None:
        parameters.validate()
        self._parameters = parameters
        self._sampling_strategy = (
            DirectSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )

    @classmethod
    @abstractmethod
    def from_parameters(cls, parameters: Parametrization) -> Self:
        """Create a distribution from base-parametrization values."""

    @property
    def parameters(self) -> Parametrization:
        """Get the parameter values of this distribution."""
        return self._parameters

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Raises
        ------
        ValueError
            If the family is not configured in the register.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self._sampling_strategy

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._parameters == other._parameters  # type: ignore[attr-defined, no-any-return]

    def __hash__(self) -> int:
        return hash((type(self), self._parameters))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._parameters.parameters.items())
        return f"{type(self).__name__}({args})"
