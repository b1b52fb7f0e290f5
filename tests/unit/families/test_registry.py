from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from statdist.families import ParametricFamily, ParametricFamilyRegister
from statdist.families.builtins.continuous.uniform import Uniform, UniformStandard
from statdist.families.configuration import configure_families_register, reset_families_register
from statdist.types import FamilyName, UnivariateContinuous


def make_family(name: str = "Custom") -> ParametricFamily:
    return ParametricFamily(
        name=name,
        distr_type=UnivariateContinuous,
        distribution_class=Uniform,
        distr_parametrizations=[UniformStandard],
    )


class TestParametricFamilyRegister:
    def test_singleton(self) -> None:
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_register_and_get(self) -> None:
        family = make_family()
        ParametricFamilyRegister.register(family)

        assert ParametricFamilyRegister.contains("Custom")
        assert ParametricFamilyRegister.get("Custom") is family
        assert ParametricFamilyRegister.names() == ["Custom"]

    def test_get_unknown(self) -> None:
        with pytest.raises(ValueError, match="No family Missing found in register"):
            ParametricFamilyRegister.get("Missing")

    def test_duplicate_registration(self) -> None:
        ParametricFamilyRegister.register(make_family())

        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(make_family())

    def test_replace_warns(self) -> None:
        ParametricFamilyRegister.register(make_family())
        replacement = make_family()

        with pytest.warns(UserWarning, match="has been replaced"):
            ParametricFamilyRegister.register(replacement, replace=True)

        assert ParametricFamilyRegister.get("Custom") is replacement


class TestConfiguration:
    def test_all_builtin_families_registered(self) -> None:
        register = configure_families_register()

        assert set(register.names()) == {str(name) for name in FamilyName}

    def test_configuration_is_cached(self) -> None:
        first = configure_families_register()
        family = first.get(FamilyName.BETA)

        assert configure_families_register() is first
        assert configure_families_register().get(FamilyName.BETA) is family

    def test_reset(self) -> None:
        family = configure_families_register().get(FamilyName.BETA)

        reset_families_register()

        assert not ParametricFamilyRegister.contains(FamilyName.BETA)
        assert configure_families_register().get(FamilyName.BETA) is not family

    def test_distribution_family_requires_configuration(self) -> None:
        dist = Uniform(0.0, 1.0)

        with pytest.raises(ValueError, match="No family"):
            _ = dist.family

        configure_families_register()
        assert dist.family.name == FamilyName.CONTINUOUS_UNIFORM
