"""
Sampling Interfaces
===================

This module defines the random source consumed by samplers and the
containers returned by bulk sampling:

- :class:`RandomSource` — protocol yielding uniform variates on demand.
- :class:`NumPyRandomSource` — seedable source over :class:`numpy.random.Generator`.
- :class:`Sample` / :class:`ArraySample` — sample containers.
- :class:`Sampler` — endless iterator of draws from one distribution.

Notes
-----
- Sources are borrowed by ``sample`` calls for the duration of the call only.
  Sharing one source across threads requires external serialization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from statdist.distributions.distribution import Distribution


@runtime_checkable
class RandomSource(Protocol):
    """
    Protocol for uniform pseudo-random sources.

    Methods
    -------
    next_f64()
        Uniform float in ``[0, 1)``.
    next_u64()
        Uniform integer in ``[0, 2**64)``.
    """

    def next_f64(self) -> float: ...
    def next_u64(self) -> int: ...


class NumPyRandomSource:
    """
    Random source backed by a NumPy generator.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, optional
        Seed for :func:`numpy.random.default_rng`, or an existing generator
        to draw from. ``None`` seeds from the operating system.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        self._rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Return the underlying NumPy generator."""
        return self._rng

    def next_f64(self) -> float:
        """Draw a uniform float in ``[0, 1)``."""
        return float(self._rng.random())

    def next_u64(self) -> int:
        """Draw a uniform integer in ``[0, 2**64)``."""
        return int(self._rng.integers(0, 2**64, dtype=np.uint64, endpoint=False))


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    This implementation stores samples as a 2D floating-point array
    of shape (n_samples, n_dimensions).

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Attributes
    ----------
    data : numpy.ndarray
        Backing array containing the samples.
    dimension : int
        Dimensionality of the samples (d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


class Sampler:
    """
    Endless iterator of independent draws.

    Parameters
    ----------
    distribution : Distribution
        Distribution to draw from.
    source : RandomSource
        Source consumed by every draw.

    Examples
    --------
    >>> from itertools import islice
    >>> draws = list(islice(Sampler(distr, NumPyRandomSource(7)), 100))  # doctest: +SKIP
    """

    __slots__ = ("_distribution", "_source")

    def __init__(self, distribution: Distribution, source: RandomSource) -> None:
        self._distribution = distribution
        self._source = source

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        return self._distribution.sample(self._source)


__all__ = [
    "RandomSource",
    "NumPyRandomSource",
    "Sample",
    "ArraySample",
    "Sampler",
]
