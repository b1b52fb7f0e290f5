"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: the uniform
query surface (moments, density, cumulative distribution function and its
inverse, sampling) implemented by every distribution of the catalogue.

Notes
-----
- ``sd`` defaults to ``sqrt(var)``; every other characteristic is
  implemented per family.
- All operations except ``sample`` are pure functions of the distribution's
  parameters and the query argument.
- ``cdf``, ``inv_cdf`` and ``pdf`` are element-wise: scalars in, scalars out;
  arrays in, arrays of the same shape out.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from statdist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable

    from statdist.distributions.sampling import RandomSource, Sample
    from statdist.distributions.strategies import SamplingStrategy
    from statdist.distributions.support import Support
    from statdist.types import DistributionType, Number, NumericArray


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and generic callers."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> Support | None: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def mean(self) -> float: ...

    def var(self) -> float: ...

    def sd(self) -> float:
        """Standard deviation, ``sqrt(var)``."""
        return math.sqrt(self.var())

    def skewness(self) -> float: ...

    def kurtosis(self, excess: bool = True) -> float: ...

    def median(self) -> Any: ...

    def modes(self) -> list[Any]: ...

    def entropy(self) -> float: ...

    def cdf(self, x: Number | NumericArray) -> Any: ...

    def inv_cdf(self, p: Number | NumericArray) -> Any: ...

    def pdf(self, x: Number | NumericArray) -> Any: ...

    def sample(self, source: RandomSource) -> Any: ...

    def query_method(
        self, characteristic_name: CharacteristicName | str
    ) -> Callable[..., Any]:
        """
        Resolve a characteristic of this distribution by name.

        Raises
        ------
        ValueError
            If the name is not a known characteristic.
        """
        return getattr(self, str(CharacteristicName(characteristic_name)))  # type: ignore[no-any-return]

    def calculate_characteristic(
        self, characteristic_name: CharacteristicName | str, *args: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(*args, **options)

    def sample_array(
        self, n: int, source: RandomSource | None = None, **options: Any
    ) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, source=source, **options)


def validate_probability(p: Number | NumericArray) -> None:
    """
    Check that probabilities lie in ``[0, 1]``.

    Raises
    ------
    ValueError
        If any probability is outside ``[0, 1]`` or is NaN.
    """
    arr = np.asarray(p, dtype=np.float64)
    if not np.all((arr >= 0.0) & (arr <= 1.0)):
        raise ValueError("Probability must be in [0, 1]")


def squeeze_scalar(values: Any) -> Any:
    """Return a Python scalar for 0-d results and the array otherwise."""
    if np.ndim(values) == 0:
        return np.asarray(values).item()
    return values


__all__ = [
    "Distribution",
    "squeeze_scalar",
    "validate_probability",
]
