"""
Tests for Gamma Distribution Family

This module tests the functionality of the Gamma distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import gamma as scipy_gamma

from statdist.distributions.sampling import NumPyRandomSource
from statdist.families.builtins.continuous.gamma import Gamma
from statdist.families.configuration import configure_families_register
from statdist.types import CharacteristicName, FamilyName, UnivariateContinuous

from .base import BaseDistributionTest


class TestGammaFamily(BaseDistributionTest):
    """Test suite for Gamma distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.gamma_family = registry.get(FamilyName.GAMMA)
        self.gamma_dist_example = self.gamma_family(k=2.5, theta=2.0)
        self.scipy_example = scipy_gamma(2.5, scale=2.0)

    def test_family_properties(self):
        """Test basic properties of gamma family."""
        assert self.gamma_family.name == FamilyName.GAMMA
        assert self.gamma_family.distribution_type == UnivariateContinuous
        assert set(self.gamma_family.parametrization_names) == {"shapeScale", "shapeRate"}
        assert self.gamma_family.base_parametrization_name == "shapeScale"

    def test_shape_rate_parametrization(self):
        """Test that the shape/rate form converts to scale 1 / rate."""
        dist = self.gamma_family(parametrization_name="shapeRate", k=2.5, rate=0.5)

        assert isinstance(dist, Gamma)
        assert dist == self.gamma_dist_example

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="k > 0"):
            self.gamma_family(k=0.0)

        with pytest.raises(ValueError, match="theta > 0"):
            Gamma(1.0, -2.0)

        with pytest.raises(ValueError, match="rate > 0"):
            self.gamma_family(parametrization_name="shapeRate", k=1.0, rate=0.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_method",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 0.5, 1.0, 3.0, 7.0, 20.0], "pdf"),
            (CharacteristicName.CDF, [-1.0, 0.0, 0.5, 1.0, 3.0, 7.0, 20.0], "cdf"),
            (CharacteristicName.INV_CDF, [0.0, 0.001, 0.1, 0.5, 0.9, 0.999], "ppf"),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_method):
        """Test distribution functions against scipy."""
        input_array = np.array(test_data)

        result_array = self.gamma_dist_example.query_method(char_name)(input_array)

        assert result_array.shape == input_array.shape
        expected_array = getattr(self.scipy_example, scipy_method)(input_array)
        self.assert_arrays_almost_equal(result_array, expected_array, 1e-8)

    def test_inv_cdf_edges(self):
        """Test inv_cdf at 0 and 1 and rejection outside [0, 1]."""
        assert self.gamma_dist_example.inv_cdf(0.0) == 0.0
        assert self.gamma_dist_example.inv_cdf(1.0) == math.inf

        with pytest.raises(ValueError, match="Probability must be in"):
            self.gamma_dist_example.inv_cdf(1.01)

    def test_moments(self):
        """Test moment calculations against scipy."""
        dist = self.gamma_dist_example
        mean, var, skew, kurt = self.scipy_example.stats(moments="mvsk")

        self.assert_close(dist.mean(), float(mean))
        self.assert_close(dist.var(), float(var))
        self.assert_close(dist.skewness(), float(skew))
        self.assert_close(dist.kurtosis(), float(kurt))
        self.assert_close(dist.kurtosis(excess=False), float(kurt) + 3.0)
        self.assert_close(dist.median(), float(self.scipy_example.median()))
        self.assert_close(dist.entropy(), float(self.scipy_example.entropy()))

    @pytest.mark.parametrize("k, theta, expected", [(2.5, 2.0, [3.0]), (1.0, 3.0, [0.0]), (0.5, 1.0, [0.0])])
    def test_modes(self, k, theta, expected):
        """Test modes for shapes above and below one."""
        assert Gamma(k, theta).modes() == pytest.approx(expected)

    @pytest.mark.parametrize("k", [0.3, 1.0, 4.0])
    def test_sample_mean(self, k):
        """Test that draws are non-negative and their mean approaches k * theta."""
        dist = Gamma(k, 2.0)

        draws = dist.sample_array(20_000, NumPyRandomSource(seed=17)).array

        assert np.all(draws >= 0.0)
        assert abs(float(draws.mean()) - dist.mean()) < 0.05 * dist.mean() + 0.01
