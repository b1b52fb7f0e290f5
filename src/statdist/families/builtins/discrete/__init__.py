"""
Discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .binomial import Binomial, BinomialStandard, configure_binomial_family

__all__ = [
    "Binomial",
    "BinomialStandard",
    "configure_binomial_family",
]
