"""
Binomial distribution family implementation.

Contains the Binomial family: the number of successes in ``n`` independent
trials with success probability ``p``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import xlog1py, xlogy

from statdist.distributions.distribution import squeeze_scalar, validate_probability
from statdist.distributions.generators import open_uniform
from statdist.distributions.support import IntegerLatticeDiscreteSupport
from statdist.families.distribution import ParametricFamilyDistribution
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.special import DEFAULT_SPECIAL_FUNCTIONS
from statdist.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from statdist.distributions.sampling import RandomSource
    from statdist.distributions.strategies import SamplingStrategy
    from statdist.special import SpecialFunctions
    from statdist.types import Number, NumericArray


@parametrization(name="standard")
@dataclass(slots=True, frozen=True)
class BinomialStandard(Parametrization):
    """
    Standard parametrization of binomial distribution.

    Parameters
    ----------
    n : int
        Number of trials.
    p : float
        Success probability of a single trial.
    """

    n: int
    p: float

    @constraint(description="n is a non-negative integer")
    def check_n_non_negative_integer(self) -> bool:
        return isinstance(self.n, int | np.integer) and not isinstance(self.n, bool) and self.n >= 0

    @constraint(description="0 <= p <= 1")
    def check_p_is_probability(self) -> bool:
        return 0 <= self.p <= 1


class Binomial(ParametricFamilyDistribution):
    """
    Binomial distribution with ``n`` trials and success probability ``p``.

    Values are integers in ``{0, ..., n}``; :meth:`pdf` is the probability
    mass function.

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 0``.
    p : float
        Success probability, ``0 <= p <= 1``.
    special_functions : SpecialFunctions, optional
        Provider of the log-gamma and incomplete beta functions.
    sampling_strategy : SamplingStrategy, optional
        Strategy used for bulk sampling.
    """

    family_name = FamilyName.BINOMIAL
    _distribution_type = UnivariateDiscrete

    def __init__(
        self,
        n: int,
        p: float,
        *,
        special_functions: SpecialFunctions | None = None,
        sampling_strategy: SamplingStrategy | None = None,
    ) -> None:
        super().__init__(BinomialStandard(n=n, p=float(p)), sampling_strategy)
        self._special = DEFAULT_SPECIAL_FUNCTIONS if special_functions is None else special_functions
        self._ln_gamma_n1 = float(self._special.ln_gamma(self.n + 1))

    @classmethod
    def from_parameters(cls, parameters: Parametrization) -> Binomial:
        parameters = cast(BinomialStandard, parameters)
        return cls(parameters.n, parameters.p)

    @property
    def n(self) -> int:
        return int(cast(BinomialStandard, self._parameters).n)

    @property
    def p(self) -> float:
        return cast(BinomialStandard, self._parameters).p

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0, max_k=self.n)

    def mean(self) -> float:
        return self.n * self.p

    def var(self) -> float:
        return self.n * self.p * (1.0 - self.p)

    def skewness(self) -> float:
        """Skewness; NaN for a degenerate distribution (zero variance)."""
        var = self.var()
        if var == 0.0:
            return math.nan
        return (1.0 - 2.0 * self.p) / math.sqrt(var)

    def kurtosis(self, excess: bool = True) -> float:
        """Excess (default) or raw kurtosis; NaN for a degenerate distribution."""
        var = self.var()
        if var == 0.0:
            return math.nan
        value = (1.0 - 6.0 * self.p * (1.0 - self.p)) / var
        return value if excess else value + 3.0

    def median(self) -> int:
        return int(self.inv_cdf(0.5))

    def modes(self) -> list[int]:
        n, p = self.n, self.p
        if p == 0.0:
            return [0]
        if p == 1.0:
            return [n]
        m = (n + 1) * p
        if m == math.floor(m):
            return [int(m) - 1, int(m)]
        return [math.floor(m)]

    def entropy(self) -> float:
        """Shannon entropy in nats, summed over the whole support."""
        masses = np.asarray(self.pdf(np.arange(self.n + 1)), dtype=np.float64)
        return float(-np.sum(xlogy(masses, masses)))

    def pdf(self, x: Number | NumericArray) -> Any:
        """
        Probability mass function.

        Returns
        -------
        float or NumericArray
            ``P(X = x)``; ``0`` for values outside ``{0, ..., n}``.
        """
        n, p = self.n, self.p
        arr = np.asarray(x, dtype=np.float64)
        inside = self.support.contains(arr)
        k = np.where(inside, arr, 0.0)

        ln_binom = self._ln_gamma_n1 - self._special.ln_gamma(k + 1) - self._special.ln_gamma(n - k + 1)
        log_mass = ln_binom + xlogy(k, p) + xlog1py(n - k, -p)
        return squeeze_scalar(np.where(inside, np.exp(log_mass), 0.0))

    def cdf(self, x: Number | NumericArray) -> Any:
        """
        Cumulative distribution function, ``P(X ≤ x)``.

        Evaluated through the identity ``P(X ≤ k) = I_{1-p}(n - k, k + 1)``.
        """
        n = self.n
        arr = np.asarray(x, dtype=np.float64)
        k = np.floor(np.clip(arr, 0.0, max(n - 1, 0)))

        ln_beta = (
            self._special.ln_gamma(n - k)
            + self._special.ln_gamma(k + 1)
            - self._ln_gamma_n1
        )
        values = self._special.incomplete_beta(1.0 - self.p, n - k, k + 1, ln_beta)
        return squeeze_scalar(np.where(arr < 0.0, 0.0, np.where(arr >= n, 1.0, values)))

    def _quantile(self, q: float) -> int:
        lo, hi = 0, self.n
        while lo < hi:
            mid = (lo + hi) // 2
            if self.cdf(mid) >= q:
                hi = mid
            else:
                lo = mid + 1
        return lo

    def inv_cdf(self, p: Number | NumericArray) -> Any:
        """
        Inverse of the cumulative distribution function.

        Returns the smallest ``k`` with ``cdf(k) >= p``, found by bisection.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        validate_probability(p)
        p_arr = np.asarray(p, dtype=np.float64)
        if p_arr.ndim == 0:
            return self._quantile(float(p_arr))
        return np.array([self._quantile(float(q)) for q in p_arr.ravel()], dtype=np.int64).reshape(
            p_arr.shape
        )

    def sample(self, source: RandomSource) -> int:
        """
        Draw one variate by inversion of a uniform variate.

        The uniform lies in ``(0, 1]``, so points without mass are never drawn.
        """
        return self._quantile(open_uniform(source))


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    The number of successes in n independent Bernoulli trials, each succeeding
    with probability p.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1 - p)^(n - k) for k in {0, ..., n}
    """

    family = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distribution_class=Binomial,
        distr_parametrizations=[BinomialStandard],
    )
    family.__doc__ = BINOMIAL_DOC

    ParametricFamilyRegister.register(family)
