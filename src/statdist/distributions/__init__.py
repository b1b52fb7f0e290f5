"""
Distributions subpackage

Interfaces and default implementations shared by every distribution of the
catalogue:

- distribution protocol (:mod:`.distribution`);
- random sources, sample containers and samplers (:mod:`.sampling`);
- non-uniform variate generators (:mod:`.generators`);
- pluggable bulk-sampling strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import Distribution
from .generators import GammaSampler, standard_exponential, standard_normal
from .sampling import ArraySample, NumPyRandomSource, RandomSource, Sample, Sampler
from .strategies import (
    DirectSamplingStrategy,
    InverseTransformSamplingStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, IntegerLatticeDiscreteSupport, Support

__all__ = [
    # distribution
    "Distribution",
    # sampling
    "RandomSource",
    "NumPyRandomSource",
    "Sample",
    "ArraySample",
    "Sampler",
    # generators
    "GammaSampler",
    "standard_normal",
    "standard_exponential",
    # strategies
    "SamplingStrategy",
    "DirectSamplingStrategy",
    "InverseTransformSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerLatticeDiscreteSupport",
]
