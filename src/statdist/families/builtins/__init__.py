"""
Built-in distribution families for statdist.

This package contains implementations of standard statistical distribution families
that are available by default in statdist.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statdist.families.builtins.continuous import (
    Beta,
    Exponential,
    Gamma,
    Gaussian,
    Uniform,
    configure_beta_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_uniform_family,
)
from statdist.families.builtins.discrete import Binomial, configure_binomial_family

__all__ = [
    "Beta",
    "Binomial",
    "Exponential",
    "Gamma",
    "Gaussian",
    "Uniform",
    "configure_beta_family",
    "configure_binomial_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_gaussian_family",
    "configure_uniform_family",
]
