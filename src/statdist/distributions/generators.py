"""
Variate Generators
==================

Non-uniform variates built on top of a :class:`RandomSource`:

- :func:`standard_normal` — polar Box–Muller method.
- :func:`standard_exponential` — inversion.
- :class:`GammaSampler` — Marsaglia–Tsang rejection sampler with precomputed
  constants, boosted for shapes below one.

Notes
-----
Every generator only borrows the source for the duration of a call and holds
no per-draw state, so one instance can be shared by many callers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statdist.distributions.sampling import RandomSource

#: Largest argument accepted by ``math.exp`` without overflow.
LOG_FLOAT_MAX = math.log(sys.float_info.max)


def open_uniform(source: RandomSource) -> float:
    """Draw a uniform float in ``(0, 1]``, safe to pass to ``log``."""
    return 1.0 - source.next_f64()


def standard_normal(source: RandomSource) -> float:
    """
    Draw a standard normal variate.

    Uses the polar form of the Box–Muller transform; the second variate of
    each accepted pair is discarded.
    """
    while True:
        u = 2.0 * source.next_f64() - 1.0
        v = 2.0 * source.next_f64() - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return u * math.sqrt(-2.0 * math.log(s) / s)


def standard_exponential(source: RandomSource) -> float:
    """Draw an exponential variate with unit rate."""
    return -math.log(open_uniform(source))


class GammaSampler:
    """
    Gamma variate generator.

    Parameters
    ----------
    shape : float
        Shape parameter ``k > 0``.
    scale : float, default=1.0
        Scale parameter ``θ > 0``.

    Raises
    ------
    ValueError
        If ``shape`` or ``scale`` is not positive.

    Notes
    -----
    For ``shape >= 1`` the Marsaglia–Tsang method is applied directly. For
    ``shape < 1`` a variate of ``Gamma(shape + 1)`` is drawn and multiplied by
    ``U ** (1 / shape)``. The constants of the method are computed once here
    and reused by every draw.
    """

    __slots__ = ("shape", "scale", "_d", "_c", "_boost_exponent")

    def __init__(self, shape: float, scale: float = 1.0) -> None:
        if not shape > 0:
            raise ValueError(f"Gamma shape must be positive, got {shape}")
        if not scale > 0:
            raise ValueError(f"Gamma scale must be positive, got {scale}")

        self.shape = shape
        self.scale = scale

        boosted = shape < 1.0
        self._d = (shape + 1.0 if boosted else shape) - 1.0 / 3.0
        self._c = 1.0 / math.sqrt(9.0 * self._d)
        self._boost_exponent = 1.0 / shape if boosted else None

    def _marsaglia_tsang(self, source: RandomSource) -> float:
        d, c = self._d, self._c
        while True:
            x = standard_normal(source)
            v = 1.0 + c * x
            if v <= 0.0:
                continue
            v = v * v * v
            u = open_uniform(source)
            x2 = x * x
            # squeeze
            if u < 1.0 - 0.0331 * x2 * x2:
                return d * v
            if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
                return d * v

    def sample(self, source: RandomSource) -> float:
        """
        Draw one variate.

        Returns
        -------
        float
            A finite value ``>= 0``. Very small shapes may underflow to ``0.0``.
        """
        g = self._marsaglia_tsang(source)
        if self._boost_exponent is not None:
            g *= open_uniform(source) ** self._boost_exponent
        return self.scale * g

    def sample_log_split(self, source: RandomSource) -> tuple[float, float]:
        """
        Draw the logarithm of one variate as two finite-or-``-inf`` pieces.

        Consumes the source exactly like :meth:`sample`. The logarithm of the
        variate equals ``head - exp(tail)``, where ``head`` is the finite log of
        the scaled Marsaglia–Tsang draw and ``tail = log(-log U) - log(shape)``
        is the log-magnitude of the boost term (``-inf`` without a boost).
        Neither piece overflows, even for subnormal shapes.

        Returns
        -------
        tuple of float
            ``(head, tail)``.
        """
        head = math.log(self._marsaglia_tsang(source)) + math.log(self.scale)
        tail = -math.inf
        if self._boost_exponent is not None:
            log_u = math.log(open_uniform(source))
            if log_u < 0.0:
                tail = math.log(-log_u) - math.log(self.shape)
        return head, tail

    def sample_log(self, source: RandomSource) -> float:
        """
        Draw the logarithm of one variate.

        Consumes the source exactly like :meth:`sample` but does not underflow
        while the boost term stays representable; beyond that ``-inf`` is
        returned.
        """
        head, tail = self.sample_log_split(source)
        if tail > LOG_FLOAT_MAX:
            return -math.inf
        return head - math.exp(tail)


__all__ = [
    "LOG_FLOAT_MAX",
    "GammaSampler",
    "open_uniform",
    "standard_exponential",
    "standard_normal",
]
