"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statdist.families.builtins.continuous.beta import (
    Beta,
    BetaMeanConcentration,
    BetaShape,
    configure_beta_family,
)
from statdist.families.builtins.continuous.exponential import (
    Exponential,
    ExponentialRate,
    ExponentialScale,
    configure_exponential_family,
)
from statdist.families.builtins.continuous.gamma import (
    Gamma,
    GammaShapeRate,
    GammaShapeScale,
    configure_gamma_family,
)
from statdist.families.builtins.continuous.gaussian import (
    Gaussian,
    GaussianMeanPrec,
    GaussianMeanStd,
    configure_gaussian_family,
)
from statdist.families.builtins.continuous.uniform import (
    Uniform,
    UniformMeanWidth,
    UniformMinRange,
    UniformStandard,
    configure_uniform_family,
)

__all__ = [
    "Beta",
    "BetaShape",
    "BetaMeanConcentration",
    "Exponential",
    "ExponentialRate",
    "ExponentialScale",
    "Gamma",
    "GammaShapeScale",
    "GammaShapeRate",
    "Gaussian",
    "GaussianMeanStd",
    "GaussianMeanPrec",
    "Uniform",
    "UniformStandard",
    "UniformMeanWidth",
    "UniformMinRange",
    "configure_beta_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_gaussian_family",
    "configure_uniform_family",
]
