"""
Tests for Gaussian Distribution Family

This module tests the functionality of the Gaussian distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import norm

from statdist.distributions.sampling import NumPyRandomSource
from statdist.distributions.support import ContinuousSupport
from statdist.families.builtins.continuous.gaussian import Gaussian
from statdist.families.configuration import configure_families_register
from statdist.types import CharacteristicName, ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestGaussianFamily(BaseDistributionTest):
    """Test suite for Gaussian distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.gaussian_family = registry.get(FamilyName.GAUSSIAN)
        self.gaussian_dist_example = self.gaussian_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of Gaussian family."""
        assert self.gaussian_family.name == FamilyName.GAUSSIAN
        assert set(self.gaussian_family.parametrization_names) == {"meanStd", "meanPrec"}
        assert self.gaussian_family.base_parametrization_name == "meanStd"

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_sigma",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0),
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params, expected_sigma):
        """Test conversions between different parameterizations."""
        base_params = self.gaussian_family.to_base(
            self.gaussian_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION
        assert base_params.parameters["mu"] == 2.0

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="sigma > 0"):
            self.gaussian_family(mu=0.0, sigma=0.0)

        with pytest.raises(ValueError, match="tau > 0"):
            self.gaussian_family(parametrization_name="meanPrec", mu=0.0, tau=-1.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_method",
        [
            (CharacteristicName.PDF, [-3.0, 0.0, 1.0, 2.0, 3.5, 8.0], "pdf"),
            (CharacteristicName.CDF, [-3.0, 0.0, 1.0, 2.0, 3.5, 8.0], "cdf"),
            (CharacteristicName.INV_CDF, [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99], "ppf"),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_method):
        """Test distribution functions against scipy."""
        input_array = np.array(test_data)

        result_array = self.gaussian_dist_example.query_method(char_name)(input_array)

        assert result_array.shape == input_array.shape
        expected_array = getattr(norm(loc=2.0, scale=1.5), scipy_method)(input_array)
        self.assert_arrays_almost_equal(result_array, expected_array, 1e-8)

    def test_inv_cdf_edges(self):
        """Test inv_cdf at 0 and 1."""
        assert self.gaussian_dist_example.inv_cdf(0.0) == -math.inf
        assert self.gaussian_dist_example.inv_cdf(1.0) == math.inf
        assert self.gaussian_dist_example.inv_cdf(0.5) == pytest.approx(2.0)

    def test_moments(self):
        """Test moment calculations."""
        dist = self.gaussian_dist_example

        assert dist.mean() == 2.0
        assert dist.var() == pytest.approx(2.25)
        assert dist.sd() == 1.5
        assert dist.skewness() == 0.0
        assert dist.kurtosis() == 0.0
        assert dist.kurtosis(excess=False) == 3.0
        assert dist.median() == 2.0
        assert dist.modes() == [2.0]
        self.assert_close(dist.entropy(), float(norm(loc=2.0, scale=1.5).entropy()))

    def test_gaussian_support(self):
        """Test that Gaussian distribution is supported on the real line."""
        support = self.gaussian_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.shape == ContinuousSupportShape1D.REAL_LINE

    def test_sample_moments(self):
        """Test that sample mean and deviation approach the parameters."""
        draws = self.gaussian_dist_example.sample_array(20_000, NumPyRandomSource(seed=1)).array

        assert abs(float(draws.mean()) - 2.0) < 0.05
        assert abs(float(draws.std()) - 1.5) < 0.05

    def test_sd_uses_sigma(self):
        """Test that sd is exactly sigma."""
        assert Gaussian(0.0, 0.1).sd() == 0.1
