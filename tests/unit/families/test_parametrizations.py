from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError

import pytest

from statdist.families.parametrizations import (
    ParameterConstraintError,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)


@parametrization(name="scaled")
class Scaled(Parametrization):
    value: float
    scale: float = 1.0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @constraint(description="value is finite")
    def check_value_finite(self) -> bool:
        return abs(self.value) < float("inf")


class TestParametrizationDecorator:
    def test_becomes_frozen_dataclass(self) -> None:
        params = Scaled(value=2.0)  # type: ignore[call-arg]

        assert params.name == "scaled"
        assert params.parameters == {"value": 2.0, "scale": 1.0}
        with pytest.raises(FrozenInstanceError):
            params.value = 3.0  # type: ignore[misc]

    def test_collects_constraints_in_order(self) -> None:
        constraints = Scaled(value=1.0).constraints  # type: ignore[call-arg]

        assert [c.description for c in constraints] == ["scale > 0", "value is finite"]
        assert all(isinstance(c, ParametrizationConstraint) for c in constraints)

    def test_validate(self) -> None:
        Scaled(value=1.0, scale=2.0).validate()  # type: ignore[call-arg]

        with pytest.raises(ParameterConstraintError) as excinfo:
            Scaled(value=1.0, scale=0.0).validate()  # type: ignore[call-arg]

        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.constraint.description == "scale > 0"
        assert str(excinfo.value) == 'Constraint "scale > 0" does not hold'

    def test_base_transform_is_identity(self) -> None:
        params = Scaled(value=1.0)  # type: ignore[call-arg]

        assert params.transform_to_base_parametrization() is params

    def test_static_constraint_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="instance method"):

            @parametrization(name="broken")
            class Broken(Parametrization):
                value: float

                @staticmethod
                def check() -> bool:
                    return True

    def test_constraint_coerces_to_bool(self) -> None:
        @constraint(description="non-zero")
        def check(x: int) -> bool:
            return x  # type: ignore[return-value]

        assert check(3) is True
        assert check(0) is False
        assert getattr(check, "__constraint_description") == "non-zero"
