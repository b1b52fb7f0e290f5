from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from statdist.distributions.distribution import (
    Distribution,
    squeeze_scalar,
    validate_probability,
)
from statdist.families.builtins.continuous.beta import Beta
from statdist.families.builtins.continuous.gamma import Gamma
from statdist.families.builtins.discrete.binomial import Binomial
from statdist.types import CharacteristicName


class TestDistributionProtocol:
    @pytest.mark.parametrize("dist", [Beta(2.0, 3.0), Gamma(2.0), Binomial(4, 0.5)])
    def test_builtins_implement_protocol(self, dist: Distribution) -> None:
        assert isinstance(dist, Distribution)

    def test_default_sd_is_square_root_of_variance(self) -> None:
        dist = Beta(2.0, 3.0, -1.0, 2.0)

        assert dist.sd() == pytest.approx(math.sqrt(dist.var()))

    @pytest.mark.parametrize("name", list(CharacteristicName))
    def test_every_characteristic_resolves(self, name: CharacteristicName) -> None:
        assert callable(Beta(2.0, 3.0).query_method(name))


class TestHelpers:
    @pytest.mark.parametrize("p", [0.0, 0.5, 1.0, [0.0, 1.0], np.linspace(0.0, 1.0, 5)])
    def test_validate_probability_accepts(self, p: object) -> None:
        validate_probability(p)  # type: ignore[arg-type]

    @pytest.mark.parametrize("p", [-1e-12, 1.0 + 1e-12, math.nan, [0.5, math.nan]])
    def test_validate_probability_rejects(self, p: object) -> None:
        with pytest.raises(ValueError, match=r"Probability must be in \[0, 1\]"):
            validate_probability(p)  # type: ignore[arg-type]

    def test_squeeze_scalar(self) -> None:
        assert squeeze_scalar(np.float64(2.5)) == 2.5
        assert isinstance(squeeze_scalar(np.asarray(2.5)), float)
        assert squeeze_scalar(np.array([1.0, 2.0])).shape == (2,)
