"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of statdist:

- :class:`Beta Family` — Beta distribution on an arbitrary finite interval.
- :class:`Gamma Family` — Gamma distribution with shape/scale and shape/rate forms.
- :class:`Gaussian Family` — Gaussian distribution with multiple parameterizations.
- :class:`Exponential Family` — Exponential distribution with rate and scale forms.
- :class:`ContinuousUniform Family` — Uniform distribution with multiple parameterizations.
- :class:`Binomial Family` — Binomial distribution.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each family supports its parameterizations with conversion to the base one.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from statdist.families.builtins import (
    configure_beta_family,
    configure_binomial_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_uniform_family,
)
from statdist.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_beta_family()
    configure_gamma_family()
    configure_gaussian_family()
    configure_exponential_family()
    configure_uniform_family()
    configure_binomial_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
