from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from statdist.families import ParametricFamily, Parametrization, constraint
from statdist.families.builtins.continuous.beta import Beta, BetaShape
from statdist.families.parametrizations import ParameterConstraintError
from statdist.types import UnivariateContinuous


class TestParametricFamily:
    def setup_method(self) -> None:
        self.family = ParametricFamily(
            name="CustomBeta",
            distr_type=UnivariateContinuous,
            distribution_class=Beta,
            distr_parametrizations=[BetaShape],
        )

    def test_base_parametrization(self) -> None:
        assert self.family.base_parametrization_name == "standard"
        assert self.family.base is BetaShape
        assert self.family.get_parametrization("standard") is BetaShape
        assert self.family.distribution_type == UnivariateContinuous

    def test_requires_parametrization(self) -> None:
        family = ParametricFamily(
            name="Empty", distr_type=UnivariateContinuous, distribution_class=Beta
        )

        with pytest.raises(ValueError, match="no registered parametrizations"):
            _ = family.base_parametrization_name

    def test_duplicate_parametrization(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            self.family.register_parametrization("standard", BetaShape)

    def test_unknown_parametrization(self) -> None:
        with pytest.raises(KeyError):
            self.family(parametrization_name="missing", alpha=1.0, beta=1.0)

    def test_unknown_parameter(self) -> None:
        with pytest.raises(TypeError):
            self.family(alpha=1.0, beta=1.0, gamma=2.0)

    def test_decorator_registers_parametrization(self) -> None:
        family = self.family

        @family.parametrization(name="symmetric")
        class Symmetric(Parametrization):
            shape: float

            @constraint(description="shape > 0")
            def check_shape_positive(self) -> bool:
                return self.shape > 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return BetaShape(alpha=self.shape, beta=self.shape)

        assert family.parametrization_names == ["standard", "symmetric"]

        dist = family(parametrization_name="symmetric", shape=3.0)
        assert dist == Beta(3.0, 3.0)
        assert dist.median() == pytest.approx(0.5)

        with pytest.raises(ParameterConstraintError, match="shape > 0"):
            family(parametrization_name="symmetric", shape=-3.0)
