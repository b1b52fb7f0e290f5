"""
Sampling Strategies
===================

This module defines the pluggable bulk-sampling interface and its default
implementations:

- :class:`SamplingStrategy` — draws ``n`` values from a distribution.
- :class:`DirectSamplingStrategy` — repeats the distribution's own
  ``sample`` method.
- :class:`InverseTransformSamplingStrategy` — applies ``inv_cdf`` to i.i.d.
  uniform variates.

Notes
-----
- Strategies are stateless; the random source is passed per call. When no
  source is given a fresh, OS-seeded :class:`NumPyRandomSource` is used.
- Both strategies return an :class:`ArraySample` of shape ``(n, 1)``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from .sampling import ArraySample, NumPyRandomSource, RandomSource, Sample

if TYPE_CHECKING:
    from .distribution import Distribution


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(
        self, n: int, distr: "Distribution", source: RandomSource | None = None, **options: Any
    ) -> Sample: ...


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")


class DirectSamplingStrategy(SamplingStrategy):
    """
    Default univariate sampler delegating to ``distr.sample``.

    Draws are taken sequentially from one source, so a seeded source
    reproduces the same sample.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: "Distribution", source: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        src = NumPyRandomSource() if source is None else source
        vals = np.array([distr.sample(src) for _ in range(n)], dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy applies the distribution's ``inv_cdf`` to i.i.d. uniforms
    ``U ~ U(0, 1)``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: "Distribution", source: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        _check_size(n)
        src = NumPyRandomSource() if source is None else source
        U = np.array([src.next_f64() for _ in range(n)], dtype=np.float64)
        vals = np.asarray(distr.inv_cdf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)


__all__ = [
    "SamplingStrategy",
    "DirectSamplingStrategy",
    "InverseTransformSamplingStrategy",
]
