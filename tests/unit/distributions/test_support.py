from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from distengine.distributions.support import ContinuousSupport, Support


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_continuous_support_doesnt_contain_inf(self, infinity):
        # inf is a limit, not a point of the real line
        support = ContinuousSupport()
        assert support.contains(infinity) is False

    def test_continuous_support_contains_array(self):
        points = np.array([-0.1, 0.0, 0.5, 1.0])
        np.testing.assert_array_equal(
            self.support_example.contains(points), [False, True, True, False]
        )

    def test_is_protocol_instance(self):
        assert isinstance(self.support_example, Support)


class TestSides:
    @pytest.mark.parametrize(
        "point, below, above",
        [
            (-0.1, True, False),
            (0.0, False, False),
            (0.5, False, False),
            (1.0, False, True),
            (1.5, False, True),
        ],
    )
    def test_half_open_interval(self, point, below, above):
        support = ContinuousSupport(0.0, 1.0, left_closed=True, right_closed=False)

        assert support.is_below(point) is below
        assert support.is_above(point) is above

    def test_open_left_endpoint_is_below(self):
        support = ContinuousSupport(0.0, inf, left_closed=False)

        assert support.is_below(0.0)
        assert not support.contains(0.0)
        assert not support.is_above(1e300)

    def test_real_line_has_no_sides(self):
        support = ContinuousSupport()

        assert not support.is_below(-1e308)
        assert not support.is_above(1e308)

    def test_infinite_endpoints_are_open(self):
        support = ContinuousSupport(-inf, inf, left_closed=True, right_closed=True)

        assert support.left_closed is False
        assert support.right_closed is False
