"""
Special-Function Provider
=========================

This module defines the numerical boundary between distributions and the
special functions they are built on:

- :class:`SpecialFunctions` — protocol describing the functions a
  distribution may consume.
- :class:`ScipySpecialFunctions` — default implementation delegating to
  :mod:`scipy.special`.

Notes
-----
- All functions are element-wise: scalars in, scalars out; arrays in, arrays
  out.
- ``incomplete_beta`` and ``inverse_incomplete_beta`` take a precomputed
  ``ln_beta`` so that callers can evaluate the Beta function once per
  distribution. Providers that evaluate it internally may ignore the argument.
- Boundary values are exact: ``incomplete_beta`` returns ``0`` at ``x = 0`` and
  ``1`` at ``x = 1``; ``inverse_incomplete_beta`` returns ``0`` at ``p = 0`` and
  ``1`` at ``p = 1``. Distributions rely on this and do not clamp results.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, cast, runtime_checkable

from scipy import special

if TYPE_CHECKING:
    from statdist.types import Number, NumericArray

    Numeric: TypeAlias = Number | NumericArray


@runtime_checkable
class SpecialFunctions(Protocol):
    """Special functions consumed by the distribution catalogue."""

    def ln_beta(self, a: float, b: float) -> float: ...

    def incomplete_beta(self, x: Numeric, a: Numeric, b: Numeric, ln_beta: Numeric) -> Any: ...

    def inverse_incomplete_beta(self, p: Numeric, a: float, b: float, ln_beta: float) -> Any: ...

    def ln_gamma(self, x: Numeric) -> Any: ...

    def digamma(self, x: float) -> float: ...

    def incomplete_gamma(self, x: Numeric, a: float) -> Any: ...

    def inverse_incomplete_gamma(self, p: Numeric, a: float) -> Any: ...

    def erf(self, x: Numeric) -> Any: ...

    def erfinv(self, y: Numeric) -> Any: ...


class ScipySpecialFunctions:
    """
    Special functions backed by :mod:`scipy.special`.

    The incomplete beta routines are the Boost implementations shipped with
    SciPy; the inverse is an iterative solve with a bounded iteration budget,
    so it always returns a value for arguments inside its domain.
    """

    __slots__ = ()

    def ln_beta(self, a: float, b: float) -> float:
        """Natural logarithm of the Beta function ``B(a, b)``."""
        return float(special.betaln(a, b))

    def incomplete_beta(self, x: Numeric, a: Numeric, b: Numeric, ln_beta: Numeric) -> Any:
        """
        Regularized incomplete beta function ``I_x(a, b)``.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) in ``[0, 1]``.
        a, b : float or NumericArray
            Positive shape parameters.
        ln_beta : float or NumericArray
            Precomputed ``ln B(a, b)``; unused by this provider.

        Returns
        -------
        float or NumericArray
            Values in ``[0, 1]``.
        """
        return special.betainc(a, b, x)

    def inverse_incomplete_beta(self, p: Numeric, a: float, b: float, ln_beta: float) -> Any:
        """
        Inverse of the regularized incomplete beta function with respect to ``x``.

        Parameters
        ----------
        p : Number or NumericArray
            Probabilities in ``[0, 1]``.
        a, b : float
            Positive shape parameters.
        ln_beta : float
            Precomputed ``ln B(a, b)``; unused by this provider.

        Returns
        -------
        float or NumericArray
            Values ``x`` in ``[0, 1]`` such that ``I_x(a, b) = p``.
        """
        return special.betaincinv(a, b, p)

    def ln_gamma(self, x: Numeric) -> Any:
        """Natural logarithm of the absolute value of the Gamma function."""
        return special.gammaln(x)

    def digamma(self, x: float) -> float:
        """Logarithmic derivative of the Gamma function."""
        return float(special.digamma(x))

    def incomplete_gamma(self, x: Numeric, a: float) -> Any:
        """Regularized lower incomplete gamma function ``P(a, x)``."""
        return special.gammainc(a, x)

    def inverse_incomplete_gamma(self, p: Numeric, a: float) -> Any:
        """Inverse of ``P(a, x)`` with respect to ``x``; ``p = 1`` maps to ``inf``."""
        return special.gammaincinv(a, p)

    def erf(self, x: Numeric) -> Any:
        """Error function."""
        return special.erf(x)

    def erfinv(self, y: Numeric) -> Any:
        """Inverse error function; ``±1`` map to ``±inf``."""
        return special.erfinv(y)


DEFAULT_SPECIAL_FUNCTIONS = cast(SpecialFunctions, ScipySpecialFunctions())
"""Provider used by distributions constructed without an explicit one."""


__all__ = [
    "SpecialFunctions",
    "ScipySpecialFunctions",
    "DEFAULT_SPECIAL_FUNCTIONS",
]
