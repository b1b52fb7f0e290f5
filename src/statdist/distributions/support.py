from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from statdist.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...


@dataclass(slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Points ``residue + modulus * j`` restricted to ``[min_k, max_k]``.

    Parameters
    ----------
    residue : int
        Offset of the lattice.
    modulus : int
        Positive lattice step.
    min_k, max_k : int or None
        Optional inclusive bounds; ``None`` means unbounded on that side.
    """

    residue: int
    modulus: int
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0)).astype(np.int64)
        mask = finite & (xf == v)

        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        mask &= ((v - self.residue) % self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        if self.min_k is None:
            return None
        first = self.min_k
        offset = (first - self.residue) % self.modulus
        if offset != 0:
            first = first + (self.modulus - offset)
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def last(self) -> int | None:
        if self.max_k is None:
            return None
        last = self.max_k
        last = last - (last - self.residue) % self.modulus
        if self.min_k is not None and last < self.min_k:
            return None
        return last

    def iter_points(self) -> Iterator[int]:
        first = self.first()
        if first is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = first
            while self.max_k is None or current <= self.max_k:
                yield current
                current += self.modulus

        return _gen()

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
