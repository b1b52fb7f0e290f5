"""
Special functions subpackage

Numerical special functions (Beta, Gamma and error functions with their
incomplete and inverse forms) consumed by the distribution catalogue.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .functions import DEFAULT_SPECIAL_FUNCTIONS, ScipySpecialFunctions, SpecialFunctions

__all__ = [
    "SpecialFunctions",
    "ScipySpecialFunctions",
    "DEFAULT_SPECIAL_FUNCTIONS",
]
