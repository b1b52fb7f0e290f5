"""
Gamma distribution family implementation.

Contains the Gamma family with shape/scale and shape/rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import xlogy

from statdist.distributions.distribution import squeeze_scalar, validate_probability
from statdist.distributions.generators import GammaSampler
from statdist.distributions.support import ContinuousSupport
from statdist.families.distribution import ParametricFamilyDistribution
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.special import DEFAULT_SPECIAL_FUNCTIONS
from statdist.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statdist.distributions.sampling import RandomSource
    from statdist.distributions.strategies import SamplingStrategy
    from statdist.special import SpecialFunctions
    from statdist.types import Number, NumericArray


@parametrization(name="shapeScale")
@dataclass(slots=True, frozen=True)
class GammaShapeScale(Parametrization):
    """
    Shape/scale parametrization of the Gamma distribution.

    Parameters
    ----------
    k : float
        Shape parameter.
    theta : float, default=1.0
        Scale parameter.
    """

    k: float
    theta: float = 1.0

    @constraint(description="k > 0")
    def check_k_positive(self) -> bool:
        return self.k > 0

    @constraint(description="theta > 0")
    def check_theta_positive(self) -> bool:
        return self.theta > 0


@parametrization(name="shapeRate")
@dataclass(slots=True, frozen=True)
class GammaShapeRate(Parametrization):
    """
    Shape/rate parametrization of the Gamma distribution.

    Parameters
    ----------
    k : float
        Shape parameter.
    rate : float
        Rate parameter, ``1 / theta``.
    """

    k: float
    rate: float

    @constraint(description="k > 0")
    def check_k_positive(self) -> bool:
        return self.k > 0

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        return GammaShapeScale(k=self.k, theta=1.0 / self.rate)


class Gamma(ParametricFamilyDistribution):
    """
    Gamma distribution with shape ``k`` and scale ``theta``.

    Parameters
    ----------
    k : float
        Shape parameter, ``k > 0``.
    theta : float, default=1.0
        Scale parameter, ``theta > 0``.
    special_functions : SpecialFunctions, optional
        Provider of the incomplete gamma function and its inverse.
    sampling_strategy : SamplingStrategy, optional
        Strategy used for bulk sampling.
    """

    family_name = FamilyName.GAMMA
    _distribution_type = UnivariateContinuous

    def __init__(
        self,
        k: float,
        theta: float = 1.0,
        *,
        special_functions: SpecialFunctions | None = None,
        sampling_strategy: SamplingStrategy | None = None,
    ) -> None:
        super().__init__(GammaShapeScale(k=float(k), theta=float(theta)), sampling_strategy)
        self._special = DEFAULT_SPECIAL_FUNCTIONS if special_functions is None else special_functions
        self._ln_gamma = float(self._special.ln_gamma(self.k))
        self._sampler = GammaSampler(self.k, self.theta)

    @classmethod
    def from_parameters(cls, parameters: Parametrization) -> Gamma:
        parameters = cast(GammaShapeScale, parameters)
        return cls(parameters.k, parameters.theta)

    @property
    def k(self) -> float:
        return cast(GammaShapeScale, self._parameters).k

    @property
    def theta(self) -> float:
        return cast(GammaShapeScale, self._parameters).theta

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def mean(self) -> float:
        return self.k * self.theta

    def var(self) -> float:
        return self.k * self.theta**2

    def skewness(self) -> float:
        return 2.0 / math.sqrt(self.k)

    def kurtosis(self, excess: bool = True) -> float:
        value = 6.0 / self.k
        return value if excess else value + 3.0

    def median(self) -> float:
        return float(self.inv_cdf(0.5))

    def modes(self) -> list[float]:
        if self.k >= 1.0:
            return [(self.k - 1.0) * self.theta]
        return [0.0]

    def entropy(self) -> float:
        k = self.k
        return k + math.log(self.theta) + self._ln_gamma + (1.0 - k) * self._special.digamma(k)

    def pdf(self, x: Number | NumericArray) -> Any:
        k, theta = self.k, self.theta
        arr = np.asarray(x, dtype=np.float64)
        xc = np.clip(arr, 0.0, None)
        log_density = xlogy(k - 1.0, xc) - xc / theta - self._ln_gamma - k * math.log(theta)
        return squeeze_scalar(np.where(arr >= 0.0, np.exp(log_density), 0.0))

    def cdf(self, x: Number | NumericArray) -> Any:
        arr = np.asarray(x, dtype=np.float64)
        values = self._special.incomplete_gamma(np.clip(arr, 0.0, None) / self.theta, self.k)
        return squeeze_scalar(np.where(arr <= 0.0, 0.0, values))

    def inv_cdf(self, p: Number | NumericArray) -> Any:
        """
        Inverse of the cumulative distribution function.

        ``p = 0`` maps to ``0`` and ``p = 1`` to ``inf``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        validate_probability(p)
        values = self._special.inverse_incomplete_gamma(np.asarray(p, dtype=np.float64), self.k)
        return squeeze_scalar(np.asarray(values, dtype=np.float64) * self.theta)

    def sample(self, source: RandomSource) -> float:
        return self._sampler.sample(source)


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    A continuous distribution on [0, ∞) with shape k and scale θ. It models
    waiting times for k events of a Poisson process and includes the
    exponential (k = 1) and chi-squared distributions as special cases.

    Probability density function:
        f(x) = x^(k-1) exp(-x/θ) / (Γ(k) θ^k) for x ≥ 0
    """

    family = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distribution_class=Gamma,
        distr_parametrizations=[GammaShapeScale, GammaShapeRate],
    )
    family.__doc__ = GAMMA_DOC

    ParametricFamilyRegister.register(family)
