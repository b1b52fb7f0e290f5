"""
Uniform distribution family implementation.

Contains the continuous Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np

from statdist.distributions.distribution import squeeze_scalar, validate_probability
from statdist.distributions.support import ContinuousSupport
from statdist.families.distribution import ParametricFamilyDistribution
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statdist.distributions.sampling import RandomSource
    from statdist.distributions.strategies import SamplingStrategy
    from statdist.types import Number, NumericArray


@parametrization(name="standard")
@dataclass(slots=True, frozen=True)
class UniformStandard(Parametrization):
    """
    Standard parametrization of uniform distribution.

    Parameters
    ----------
    lower_bound : float
        Lower bound of the distribution
    upper_bound : float
        Upper bound of the distribution
    """

    lower_bound: float
    upper_bound: float

    @constraint(description="lower_bound < upper_bound")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.lower_bound < self.upper_bound

    @constraint(description="bounds are finite")
    def check_bounds_finite(self) -> bool:
        return math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)


@parametrization(name="meanWidth")
@dataclass(slots=True, frozen=True)
class UniformMeanWidth(Parametrization):
    """
    Mean-width parametrization of uniform distribution.

    Parameters
    ----------
    mean : float
        Mean (center) of the distribution
    width : float
        Width of the distribution (upper_bound - lower_bound)
    """

    mean: float
    width: float

    @constraint(description="width > 0")
    def check_width_positive(self) -> bool:
        """Check that width is positive."""
        return self.width > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        half_width = self.width / 2
        return UniformStandard(lower_bound=self.mean - half_width, upper_bound=self.mean + half_width)


@parametrization(name="minRange")
@dataclass(slots=True, frozen=True)
class UniformMinRange(Parametrization):
    """
    Minimum-range parametrization of uniform distribution.

    Parameters
    ----------
    minimum : float
        Minimum value (lower bound)
    range_val : float
        Range of the distribution (upper_bound - lower_bound)
    """

    minimum: float
    range_val: float

    @constraint(description="range_val > 0")
    def check_range_positive(self) -> bool:
        """Check that range is positive."""
        return self.range_val > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        return UniformStandard(lower_bound=self.minimum, upper_bound=self.minimum + self.range_val)


class Uniform(ParametricFamilyDistribution):
    """
    Continuous uniform distribution on ``[lower_bound, upper_bound]``.

    Parameters
    ----------
    lower_bound : float
        Left endpoint of the support.
    upper_bound : float
        Right endpoint of the support, ``lower_bound < upper_bound``.
    sampling_strategy : SamplingStrategy, optional
        Strategy used for bulk sampling.
    """

    family_name = FamilyName.CONTINUOUS_UNIFORM
    _distribution_type = UnivariateContinuous

    def __init__(
        self,
        lower_bound: float,
        upper_bound: float,
        *,
        sampling_strategy: SamplingStrategy | None = None,
    ) -> None:
        super().__init__(
            UniformStandard(lower_bound=float(lower_bound), upper_bound=float(upper_bound)),
            sampling_strategy,
        )

    @classmethod
    def from_parameters(cls, parameters: Parametrization) -> Uniform:
        parameters = cast(UniformStandard, parameters)
        return cls(parameters.lower_bound, parameters.upper_bound)

    @property
    def lower_bound(self) -> float:
        return cast(UniformStandard, self._parameters).lower_bound

    @property
    def upper_bound(self) -> float:
        return cast(UniformStandard, self._parameters).upper_bound

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.lower_bound, right=self.upper_bound)

    def _lerp(self, t: Any) -> Any:
        return (1.0 - t) * self.lower_bound + t * self.upper_bound

    def mean(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2

    def var(self) -> float:
        return (self.upper_bound - self.lower_bound) ** 2 / 12

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self, excess: bool = True) -> float:
        return -1.2 if excess else 1.8

    def median(self) -> float:
        return self.mean()

    def modes(self) -> list[float]:
        """Every point of the support is a mode, so none is singled out."""
        return []

    def entropy(self) -> float:
        return math.log(self.upper_bound - self.lower_bound)

    def pdf(self, x: Number | NumericArray) -> Any:
        inside = self.support.contains(np.asarray(x, dtype=np.float64))
        return squeeze_scalar(np.where(inside, 1.0 / (self.upper_bound - self.lower_bound), 0.0))

    def cdf(self, x: Number | NumericArray) -> Any:
        t = (np.asarray(x, dtype=np.float64) - self.lower_bound) / (
            self.upper_bound - self.lower_bound
        )
        return squeeze_scalar(np.clip(t, 0.0, 1.0))

    def inv_cdf(self, p: Number | NumericArray) -> Any:
        """
        Inverse of the cumulative distribution function.

        ``p = 0`` maps to ``lower_bound`` and ``p = 1`` to ``upper_bound``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        validate_probability(p)
        return squeeze_scalar(self._lerp(np.asarray(p, dtype=np.float64)))

    def sample(self, source: RandomSource) -> float:
        return float(self._lerp(source.next_f64()))


def configure_uniform_family() -> None:
    """
    Configure and register the continuous Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution.

    Every point of the interval [lower_bound, upper_bound] is equally likely.

    Probability density function:
        f(x) = 1 / (upper_bound - lower_bound) for x in [lower_bound, upper_bound]
    """

    family = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distribution_class=Uniform,
        distr_parametrizations=[UniformStandard, UniformMeanWidth, UniformMinRange],
    )
    family.__doc__ = UNIFORM_DOC

    ParametricFamilyRegister.register(family)
