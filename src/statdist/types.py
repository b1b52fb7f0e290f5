"""
Core Type Definitions
=====================

Descriptors, numeric aliases and names shared by the distributions and
families of statdist.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution puts mass on points or has a density."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Kind and dimension of the values a distribution produces.

    Families and distributions carry one of the module-level instances
    below rather than building their own.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = DistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Real-valued distributions with a density."""

UnivariateDiscrete = DistributionType(kind=Kind.DISCRETE, dimension=1)
"""Integer-valued distributions with a mass function."""

NumPyNumber = np.floating[Any] | np.integer[Any]

Number = NumPyNumber | int | float
"""Scalar accepted by the distribution functions."""

NumericArray = NDArray[NumPyNumber]
"""Array accepted element-wise by the distribution functions."""

BoolArray = NDArray[np.bool_]


class ContinuousSupportShape1D(Enum):
    """
    Topological class of a real interval.

    ``BOUNDED_INTERVAL`` covers Beta and Uniform supports, ``RAY_RIGHT`` the
    Gamma and Exponential ones and ``REAL_LINE`` the Gaussian one.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Real interval with independently closed or open ends.

    Parameters
    ----------
    left : float, default=-inf
        Left end.
    right : float, default=inf
        Right end.
    left_closed : bool, default=True
        Whether ``left`` belongs to the interval. Forced to False for ``-inf``.
    right_closed : bool, default=True
        Whether ``right`` belongs to the interval. Forced to False for ``inf``.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Element-wise membership test.

        Scalars give a plain ``bool``; arrays give a boolean array of the same
        shape. NaN is never contained.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Classify the interval by which of its ends are finite."""
        if self.left > self.right or (
            self.left == self.right and not (self.left_closed and self.right_closed)
        ):
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT

        if self.left == -inf and self.right == inf:
            return ContinuousSupportShape1D.REAL_LINE
        if self.left == -inf:
            return ContinuousSupportShape1D.RAY_LEFT
        if self.right == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL


ParametrizationName: TypeAlias = str


class CharacteristicName(StrEnum):
    """
    Enumeration of distribution characteristics.

    Every member names a method of the
    :class:`~statdist.distributions.distribution.Distribution` contract, so
    generic code can look characteristics up by name.
    """

    MEAN = "mean"
    VAR = "var"
    SD = "sd"
    SKEW = "skewness"
    KURT = "kurtosis"
    MEDIAN = "median"
    MODES = "modes"
    ENTROPY = "entropy"
    PDF = "pdf"
    CDF = "cdf"
    INV_CDF = "inv_cdf"


class FamilyName(StrEnum):
    BETA = "Beta"
    GAMMA = "Gamma"
    GAUSSIAN = "Gaussian"
    EXPONENTIAL = "Exponential"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    BINOMIAL = "Binomial"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "ParametrizationName",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
