"""
Gaussian distribution family implementation.

Contains the Gaussian (normal) family with multiple parameterizations.
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
from statdist.distributions.generators import standard_normal
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


@parametrization(name="meanStd")
@dataclass(slots=True, frozen=True)
class GaussianMeanStd(Parametrization):
    """
    Standard parametrization of Gaussian distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0


@parametrization(name="meanPrec")
@dataclass(slots=True, frozen=True)
class GaussianMeanPrec(Parametrization):
    """
    Mean-precision parametrization of Gaussian distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    tau : float
        Precision parameter (inverse variance)
    """

    mu: float
    tau: float

    @constraint(description="tau > 0")
    def check_tau_positive(self) -> bool:
        """Check that precision parameter is positive."""
        return self.tau > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Transform to Standard parametrization.

        Returns
        -------
        Parametrization
            Standard parametrization instance
        """
        sigma = math.sqrt(1 / self.tau)
        return GaussianMeanStd(mu=self.mu, sigma=sigma)


class Gaussian(ParametricFamilyDistribution):
    """
    Gaussian distribution with mean ``mu`` and standard deviation ``sigma``.

    Parameters
    ----------
    mu : float
        Mean of the distribution.
    sigma : float
        Standard deviation, ``sigma > 0``.
    special_functions : SpecialFunctions, optional
        Provider of ``erf`` and ``erfinv``.
    sampling_strategy : SamplingStrategy, optional
        Strategy used for bulk sampling.
    """

    family_name = FamilyName.GAUSSIAN
    _distribution_type = UnivariateContinuous

    def __init__(
        self,
        mu: float,
        sigma: float,
        *,
        special_functions: SpecialFunctions | None = None,
        sampling_strategy: SamplingStrategy | None = None,
    ) -> None:
        super().__init__(GaussianMeanStd(mu=float(mu), sigma=float(sigma)), sampling_strategy)
        self._special = DEFAULT_SPECIAL_FUNCTIONS if special_functions is None else special_functions

    @classmethod
    def from_parameters(cls, parameters: Parametrization) -> Gaussian:
        parameters = cast(GaussianMeanStd, parameters)
        return cls(parameters.mu, parameters.sigma)

    @property
    def mu(self) -> float:
        return cast(GaussianMeanStd, self._parameters).mu

    @property
    def sigma(self) -> float:
        return cast(GaussianMeanStd, self._parameters).sigma

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def mean(self) -> float:
        return self.mu

    def var(self) -> float:
        return self.sigma**2

    def sd(self) -> float:
        return self.sigma

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self, excess: bool = True) -> float:
        return 0.0 if excess else 3.0

    def median(self) -> float:
        return self.mu

    def modes(self) -> list[float]:
        return [self.mu]

    def entropy(self) -> float:
        return 0.5 * math.log(2.0 * math.pi * math.e * self.sigma**2)

    def pdf(self, x: Number | NumericArray) -> Any:
        """
        Probability density function.

        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
        """
        sigma = self.sigma
        coefficient = 1.0 / (sigma * np.sqrt(2 * np.pi))
        exponent = -((np.asarray(x, dtype=np.float64) - self.mu) ** 2) / (2 * sigma**2)
        return squeeze_scalar(coefficient * np.exp(exponent))

    def cdf(self, x: Number | NumericArray) -> Any:
        z = (np.asarray(x, dtype=np.float64) - self.mu) / (self.sigma * np.sqrt(2))
        return squeeze_scalar(0.5 * (1 + self._special.erf(z)))

    def inv_cdf(self, p: Number | NumericArray) -> Any:
        """
        Inverse of the cumulative distribution function.

        ``p = 0`` and ``p = 1`` map to ``-inf`` and ``inf`` respectively.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        validate_probability(p)
        p_arr = np.asarray(p, dtype=np.float64)
        return squeeze_scalar(self.mu + self.sigma * np.sqrt(2) * self._special.erfinv(2 * p_arr - 1))

    def sample(self, source: RandomSource) -> float:
        return self.mu + self.sigma * standard_normal(source)


def configure_gaussian_family() -> None:
    """
    Configure and register the Gaussian distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAUSSIAN):
        return

    GAUSSIAN_DOC = """
    Gaussian (normal) distribution.

    The Gaussian distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    family = ParametricFamily(
        name=FamilyName.GAUSSIAN,
        distr_type=UnivariateContinuous,
        distribution_class=Gaussian,
        distr_parametrizations=[GaussianMeanStd, GaussianMeanPrec],
    )
    family.__doc__ = GAUSSIAN_DOC

    ParametricFamilyRegister.register(family)
