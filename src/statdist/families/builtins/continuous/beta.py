"""
Beta distribution family implementation.

Contains the Beta distribution on an arbitrary interval ``[a, b]`` with
shape/bounds and mean/concentration parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit, xlog1py, xlogy

from statdist.distributions.distribution import squeeze_scalar, validate_probability
from statdist.distributions.generators import LOG_FLOAT_MAX, GammaSampler
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


@parametrization(name="standard")
@dataclass(slots=True, frozen=True)
class BetaShape(Parametrization):
    """
    Shape/bounds parametrization of the Beta distribution.

    Parameters
    ----------
    alpha : float
        First shape parameter (α).
    beta : float
        Second shape parameter (β).
    a : float, default=0.0
        Left endpoint of the support.
    b : float, default=1.0
        Right endpoint of the support.
    """

    alpha: float
    beta: float
    a: float = 0.0
    b: float = 1.0

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0

    @constraint(description="a < b")
    def check_bounds_ordered(self) -> bool:
        return self.a < self.b

    @constraint(description="a and b are finite")
    def check_bounds_finite(self) -> bool:
        return math.isfinite(self.a) and math.isfinite(self.b)


@parametrization(name="meanConcentration")
@dataclass(slots=True, frozen=True)
class BetaMeanConcentration(Parametrization):
    """
    Mean/concentration parametrization of the Beta distribution.

    Parameters
    ----------
    mu : float
        Mean of the standard Beta distribution on ``[0, 1]``.
    kappa : float
        Concentration ``α + β``.
    a : float, default=0.0
        Left endpoint of the support.
    b : float, default=1.0
        Right endpoint of the support.
    """

    mu: float
    kappa: float
    a: float = 0.0
    b: float = 1.0

    @constraint(description="0 < mu < 1")
    def check_mu_in_unit_interval(self) -> bool:
        return 0 < self.mu < 1

    @constraint(description="kappa > 0")
    def check_kappa_positive(self) -> bool:
        return self.kappa > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Transform to shape/bounds parametrization.

        Returns
        -------
        Parametrization
            ``BetaShape(alpha=mu * kappa, beta=(1 - mu) * kappa, a, b)``
        """
        return BetaShape(
            alpha=self.mu * self.kappa,
            beta=(1.0 - self.mu) * self.kappa,
            a=self.a,
            b=self.b,
        )


class Beta(ParametricFamilyDistribution):
    """
    Beta distribution on the interval ``[a, b]``.

    Probability density function:
        f(x) = t^(α-1) (1-t)^(β-1) / (B(α, β) (b - a)),  t = (x - a) / (b - a)

    Parameters
    ----------
    alpha : float
        First shape parameter, ``alpha > 0``.
    beta : float
        Second shape parameter, ``beta > 0``.
    a : float, default=0.0
        Left endpoint of the support.
    b : float, default=1.0
        Right endpoint of the support, ``a < b``.
    special_functions : SpecialFunctions, optional
        Provider of the incomplete beta function and its inverse.
    sampling_strategy : SamplingStrategy, optional
        Strategy used for bulk sampling.

    Raises
    ------
    ParameterConstraintError
        If ``alpha <= 0``, ``beta <= 0``, ``a >= b`` or a bound is not finite.

    Notes
    -----
    The Gamma generators used for sampling and ``ln B(α, β)`` are computed once
    here and shared by every later query.
    """

    family_name = FamilyName.BETA
    _distribution_type = UnivariateContinuous

    def __init__(
        self,
        alpha: float,
        beta: float,
        a: float = 0.0,
        b: float = 1.0,
        *,
        special_functions: SpecialFunctions | None = None,
        sampling_strategy: SamplingStrategy | None = None,
    ) -> None:
        super().__init__(
            BetaShape(alpha=float(alpha), beta=float(beta), a=float(a), b=float(b)),
            sampling_strategy,
        )
        self._special = DEFAULT_SPECIAL_FUNCTIONS if special_functions is None else special_functions
        self._ln_beta = self._special.ln_beta(self.alpha, self.beta)
        self._gamma_alpha = GammaSampler(self.alpha, 1.0)
        self._gamma_beta = GammaSampler(self.beta, 1.0)

    @classmethod
    def from_parameters(cls, parameters: Parametrization) -> Beta:
        parameters = cast(BetaShape, parameters)
        return cls(parameters.alpha, parameters.beta, parameters.a, parameters.b)

    @property
    def alpha(self) -> float:
        """First shape parameter."""
        return cast(BetaShape, self._parameters).alpha

    @property
    def beta(self) -> float:
        """Second shape parameter."""
        return cast(BetaShape, self._parameters).beta

    @property
    def a(self) -> float:
        """Left endpoint of the support."""
        return cast(BetaShape, self._parameters).a

    @property
    def b(self) -> float:
        """Right endpoint of the support."""
        return cast(BetaShape, self._parameters).b

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.a, right=self.b)

    def _from_standard(self, t: Any) -> Any:
        # exact at both endpoints: t = 0 gives a, t = 1 gives b
        return (1.0 - t) * self.a + t * self.b

    def mean(self) -> float:
        return float(self._from_standard(self.alpha / (self.alpha + self.beta)))

    def var(self) -> float:
        alpha, beta = self.alpha, self.beta
        total = alpha + beta
        width = self.b - self.a
        return width**2 * alpha * beta / (total**2 * (total + 1.0))

    def skewness(self) -> float:
        alpha, beta = self.alpha, self.beta
        total = alpha + beta
        return 2.0 * (beta - alpha) * math.sqrt(total + 1.0) / ((total + 2.0) * math.sqrt(alpha * beta))

    def kurtosis(self, excess: bool = True) -> float:
        """
        Excess (default) or raw kurtosis.

        Parameters
        ----------
        excess : bool, default True
            Return the excess kurtosis; the raw kurtosis is larger by 3.
        """
        alpha, beta = self.alpha, self.beta
        total = alpha + beta
        numerator = 6.0 * ((alpha - beta) ** 2 * (total + 1.0) - alpha * beta * (total + 2.0))
        value = numerator / (alpha * beta * (total + 2.0) * (total + 3.0))
        return value if excess else value + 3.0

    def median(self) -> float:
        """Median; no closed form exists, so ``inv_cdf(0.5)`` is returned."""
        return float(self.inv_cdf(0.5))

    def modes(self) -> list[float]:
        """
        Modes in increasing order.

        Returns
        -------
        list[float]
            - interior mode when ``alpha > 1`` and ``beta > 1``;
            - ``[a, b]`` when both shapes are below 1 (U-shaped density);
            - ``[a]`` or ``[b]`` for J-shaped densities;
            - ``[]`` when ``alpha == beta == 1``: every point of the support
              is a mode.
        """
        alpha, beta = self.alpha, self.beta
        if alpha == 1.0 and beta == 1.0:
            return []
        if alpha < 1.0 and beta < 1.0:
            return [self.a, self.b]
        if alpha <= 1.0 and beta >= 1.0:
            return [self.a]
        if alpha >= 1.0 and beta <= 1.0:
            return [self.b]
        return [float(self._from_standard((alpha - 1.0) / (alpha + beta - 2.0)))]

    def entropy(self) -> float:
        """Differential entropy in nats."""
        alpha, beta = self.alpha, self.beta
        psi = self._special.digamma
        return (
            self._ln_beta
            - (alpha - 1.0) * psi(alpha)
            - (beta - 1.0) * psi(beta)
            + (alpha + beta - 2.0) * psi(alpha + beta)
            + math.log(self.b - self.a)
        )

    def pdf(self, x: Number | NumericArray) -> Any:
        """
        Probability density function.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the density.

        Returns
        -------
        float or NumericArray
            Densities; ``0`` outside ``[a, b]`` and ``inf`` at an endpoint
            whose shape parameter is below 1.
        """
        width = self.b - self.a
        t = (np.asarray(x, dtype=np.float64) - self.a) / width
        inside = (t >= 0.0) & (t <= 1.0)
        tc = np.clip(t, 0.0, 1.0)

        log_density = xlogy(self.alpha - 1.0, tc) + xlog1py(self.beta - 1.0, -tc) - self._ln_beta
        return squeeze_scalar(np.where(inside, np.exp(log_density) / width, 0.0))

    def cdf(self, x: Number | NumericArray) -> Any:
        """
        Cumulative distribution function.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the cumulative distribution function.

        Returns
        -------
        float or NumericArray
            Probabilities P(X ≤ x); ``0`` for ``x <= a`` and ``1`` for ``x >= b``.
        """
        t = (np.asarray(x, dtype=np.float64) - self.a) / (self.b - self.a)
        values = self._special.incomplete_beta(
            np.clip(t, 0.0, 1.0), self.alpha, self.beta, self._ln_beta
        )
        return squeeze_scalar(np.where(t <= 0.0, 0.0, np.where(t >= 1.0, 1.0, values)))

    def inv_cdf(self, p: Number | NumericArray) -> Any:
        """
        Inverse of the cumulative distribution function.

        Parameters
        ----------
        p : Number or NumericArray
            Probability from [0, 1]

        Returns
        -------
        float or NumericArray
            Quantiles; ``p = 0`` maps to ``a`` and ``p = 1`` to ``b`` exactly.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        validate_probability(p)
        t = self._special.inverse_incomplete_beta(
            np.asarray(p, dtype=np.float64), self.alpha, self.beta, self._ln_beta
        )
        return squeeze_scalar(self._from_standard(np.asarray(t, dtype=np.float64)))

    def sample(self, source: RandomSource) -> float:
        """
        Draw one variate as a ratio of Gamma variates.

        ``x ~ Gamma(alpha)`` is drawn before ``y ~ Gamma(beta)`` from the same
        source and ``x / (x + y)`` is mapped onto ``[a, b]``. When both draws
        underflow to zero the pair is redrawn in log space.
        """
        x = self._gamma_alpha.sample(source)
        y = self._gamma_beta.sample(source)
        total = x + y
        if total > 0.0:
            t = x / total
        else:
            t = self._log_space_ratio(source)
        # max(a, min(b, nan)) is b, so the result never leaves [a, b]
        return max(self.a, min(self.b, float(self._from_standard(t))))

    def _log_space_ratio(self, source: RandomSource) -> float:
        # log x - log y = (head_x - head_y) + exp(tail_y) - exp(tail_x)
        head_x, tail_x = self._gamma_alpha.sample_log_split(source)
        head_y, tail_y = self._gamma_beta.sample_log_split(source)
        if tail_x == tail_y:
            diff = head_x - head_y
        elif max(tail_x, tail_y) > LOG_FLOAT_MAX:
            return 0.0 if tail_x > tail_y else 1.0
        else:
            diff = (head_x - head_y) + (math.exp(tail_y) - math.exp(tail_x))
        return float(expit(diff))


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    The Beta distribution is a continuous distribution on a bounded interval
    [a, b] with two positive shape parameters α and β. On [0, 1] it is the
    conjugate prior of the Bernoulli and binomial success probability.

    Probability density function:
        f(x) = t^(α-1) (1-t)^(β-1) / (B(α, β) (b - a)),  t = (x - a) / (b - a)
    """

    family = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distribution_class=Beta,
        distr_parametrizations=[BetaShape, BetaMeanConcentration],
    )
    family.__doc__ = BETA_DOC

    ParametricFamilyRegister.register(family)
