from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from statdist.distributions.support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)
from statdist.types import ContinuousSupportShape1D


class TestContinuousSupport:
    @pytest.mark.parametrize(
        "support, shape",
        [
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
            (ContinuousSupport(left=0.0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(right=0.0), ContinuousSupportShape1D.RAY_LEFT),
            (ContinuousSupport(0.0, 1.0), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(1.0, 1.0), ContinuousSupportShape1D.SINGLE_POINT),
            (ContinuousSupport(2.0, 1.0), ContinuousSupportShape1D.EMPTY),
        ],
    )
    def test_shape(self, support: ContinuousSupport, shape: ContinuousSupportShape1D) -> None:
        assert support.shape == shape

    def test_open_endpoints(self) -> None:
        support = ContinuousSupport(0.0, 1.0, left_closed=False)

        assert support.contains(0.0) is False
        assert support.contains(1.0) is True
        np.testing.assert_array_equal(
            support.contains(np.array([-1.0, 0.0, 0.5, 1.0, 2.0])),
            [False, False, True, True, False],
        )

    def test_infinite_endpoints_are_open(self) -> None:
        support = ContinuousSupport()

        assert not support.left_closed
        assert not support.right_closed
        assert math.inf not in support
        assert isinstance(support, Support)


class TestIntegerLatticeDiscreteSupport:
    def test_contains(self) -> None:
        support = IntegerLatticeDiscreteSupport(residue=1, modulus=2, min_k=0, max_k=9)

        np.testing.assert_array_equal(
            support.contains(np.array([-1.0, 0.0, 1.0, 1.5, 3.0, 9.0, 11.0, math.nan, math.inf])),
            [False, False, True, False, True, True, False, False, False],
        )
        assert isinstance(support, DiscreteSupport)

    def test_enumeration(self) -> None:
        support = IntegerLatticeDiscreteSupport(residue=1, modulus=3, min_k=0, max_k=10)

        assert support.first() == 1
        assert support.last() == 10
        assert list(support) == [1, 4, 7, 10]

    def test_empty_range(self) -> None:
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=5, min_k=1, max_k=4)

        assert support.first() is None
        assert support.last() is None

    def test_left_unbounded_cannot_be_enumerated(self) -> None:
        with pytest.raises(RuntimeError, match="left-unbounded"):
            IntegerLatticeDiscreteSupport(residue=0, modulus=1).iter_points()

    def test_modulus_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="modulus"):
            IntegerLatticeDiscreteSupport(residue=0, modulus=0)
