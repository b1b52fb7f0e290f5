from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from typing import Any

from statdist.special import ScipySpecialFunctions


class SequenceRandomSource:
    """
    Deterministic random source replaying a fixed sequence of uniforms.

    The sequence is repeated once exhausted; ``draws`` counts how many values
    have been handed out.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("SequenceRandomSource needs at least one value.")
        self.draws = 0

    def next_f64(self) -> float:
        value = self._values[self.draws % len(self._values)]
        self.draws += 1
        return value

    def next_u64(self) -> int:
        return int(self.next_f64() * 2**64)


class RecordingSpecialFunctions(ScipySpecialFunctions):
    """SciPy-backed special functions remembering which ones were called."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def ln_beta(self, a: float, b: float) -> float:
        self.calls.append("ln_beta")
        return super().ln_beta(a, b)

    def incomplete_beta(self, x: Any, a: Any, b: Any, ln_beta: Any) -> Any:
        self.calls.append("incomplete_beta")
        return super().incomplete_beta(x, a, b, ln_beta)

    def inverse_incomplete_beta(self, p: Any, a: float, b: float, ln_beta: float) -> Any:
        self.calls.append("inverse_incomplete_beta")
        return super().inverse_incomplete_beta(p, a, b, ln_beta)

    def ln_gamma(self, x: Any) -> Any:
        self.calls.append("ln_gamma")
        return super().ln_gamma(x)

    def digamma(self, x: float) -> float:
        self.calls.append("digamma")
        return super().digamma(x)

    def incomplete_gamma(self, x: Any, a: float) -> Any:
        self.calls.append("incomplete_gamma")
        return super().incomplete_gamma(x, a)

    def inverse_incomplete_gamma(self, p: Any, a: float) -> Any:
        self.calls.append("inverse_incomplete_gamma")
        return super().inverse_incomplete_gamma(p, a)

    def erf(self, x: Any) -> Any:
        self.calls.append("erf")
        return super().erf(x)

    def erfinv(self, y: Any) -> Any:
        self.calls.append("erfinv")
        return super().erfinv(y)
