"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
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
from statdist.distributions.generators import standard_exponential
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


@parametrization(name="rate")
@dataclass(slots=True, frozen=True)
class ExponentialRate(Parametrization):
    """
    Rate parametrization of exponential distribution.

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ) of the distribution
    """

    lambda_: float

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0


@parametrization(name="scale")
@dataclass(slots=True, frozen=True)
class ExponentialScale(Parametrization):
    """
    Scale parametrization of exponential distribution.

    Parameters
    ----------
    beta : float
        Scale parameter (β) of the distribution, β = 1/λ
    """

    beta: float

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        """Check that scale parameter is positive."""
        return self.beta > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Transform to Rate parametrization.

        Returns
        -------
        Parametrization
            Rate parametrization instance
        """
        return ExponentialRate(lambda_=1.0 / self.beta)


class Exponential(ParametricFamilyDistribution):
    """
    Exponential distribution with rate ``lambda_``.

    Parameters
    ----------
    lambda_ : float
        Rate parameter, ``lambda_ > 0``.
    sampling_strategy : SamplingStrategy, optional
        Strategy used for bulk sampling.
    """

    family_name = FamilyName.EXPONENTIAL
    _distribution_type = UnivariateContinuous

    def __init__(self, lambda_: float, *, sampling_strategy: SamplingStrategy | None = None) -> None:
        super().__init__(ExponentialRate(lambda_=float(lambda_)), sampling_strategy)

    @classmethod
    def from_parameters(cls, parameters: Parametrization) -> Exponential:
        return cls(cast(ExponentialRate, parameters).lambda_)

    @property
    def lambda_(self) -> float:
        return cast(ExponentialRate, self._parameters).lambda_

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def mean(self) -> float:
        return 1.0 / self.lambda_

    def var(self) -> float:
        return 1.0 / (self.lambda_**2)

    def sd(self) -> float:
        return 1.0 / self.lambda_

    def skewness(self) -> float:
        return 2.0

    def kurtosis(self, excess: bool = True) -> float:
        return 6.0 if excess else 9.0

    def median(self) -> float:
        return math.log(2.0) / self.lambda_

    def modes(self) -> list[float]:
        return [0.0]

    def entropy(self) -> float:
        return 1.0 - math.log(self.lambda_)

    def pdf(self, x: Number | NumericArray) -> Any:
        lambda_ = self.lambda_
        arr = np.asarray(x, dtype=np.float64)
        return squeeze_scalar(np.where(arr >= 0, lambda_ * np.exp(-lambda_ * np.clip(arr, 0.0, None)), 0.0))

    def cdf(self, x: Number | NumericArray) -> Any:
        arr = np.asarray(x, dtype=np.float64)
        return squeeze_scalar(np.where(arr > 0, -np.expm1(-self.lambda_ * arr), 0.0))

    def inv_cdf(self, p: Number | NumericArray) -> Any:
        """
        Inverse of the cumulative distribution function.

        Returns
        -------
        float or NumericArray
            - For p = 0: returns 0.0
            - For p = 1: returns inf
            - For p in (0, 1): returns -ln(1-p)/λ

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        validate_probability(p)
        p_arr = np.asarray(p, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            return squeeze_scalar(np.where(p_arr < 1.0, -np.log1p(-p_arr) / self.lambda_, np.inf))

    def sample(self, source: RandomSource) -> float:
        return standard_exponential(source) / self.lambda_


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    The exponential distribution is memoryless and is widely used in reliability
    engineering, queuing theory, and survival analysis.
    """

    family = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distribution_class=Exponential,
        distr_parametrizations=[ExponentialRate, ExponentialScale],
    )
    family.__doc__ = EXPONENTIAL_DOC

    ParametricFamilyRegister.register(family)
