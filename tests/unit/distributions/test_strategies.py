from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from distengine.distributions.strategies import (
    InversionSamplingStrategy,
    log_standard_gamma_variate,
    standard_gamma_variate,
)
from distengine.families.configuration import configure_families_register
from distengine.sources import SequenceSource, seeded_source
from distengine.types import FamilyName


class TestInversionSamplingStrategy:
    def test_draw_is_ppf_of_one_uniform(self) -> None:
        normal = configure_families_register().get(FamilyName.NORMAL)
        parameters = normal.get_parametrization()(mu=1.0, sigma=2.0)
        source = SequenceSource([0.975])

        draw = InversionSamplingStrategy().draw(normal, parameters, source)

        assert draw == pytest.approx(1.0 + 2.0 * 1.959963984540054)
        assert source.consumed == 1

    def test_is_default_for_closed_form_families(self) -> None:
        normal = configure_families_register().get(FamilyName.NORMAL)
        assert isinstance(normal.sampling_strategy, InversionSamplingStrategy)

    def test_zero_uniform_is_skipped(self) -> None:
        normal = configure_families_register().get(FamilyName.NORMAL)
        parameters = normal.get_parametrization()(mu=0.0, sigma=1.0)
        source = SequenceSource([0.0, 0.5])

        draw = InversionSamplingStrategy().draw(normal, parameters, source)

        assert np.isfinite(draw)
        assert draw == pytest.approx(0.0)
        assert source.consumed == 2


class TestStandardGammaVariate:
    def test_immediate_acceptance(self) -> None:
        # ndtri(0.5) = 0, so v = 1 and the first squeeze test accepts d = shape - 1/3.
        source = SequenceSource([0.5, 0.5])

        assert standard_gamma_variate(2.0, source) == pytest.approx(5.0 / 3.0)
        assert source.consumed == 2

    def test_boost_for_small_shapes(self) -> None:
        # G(0.5) = G(1.5) * U ** 2, with the boost uniform drawn first.
        source = SequenceSource([0.5, 0.5, 0.5])

        assert standard_gamma_variate(0.5, source) == pytest.approx((1.5 - 1.0 / 3.0) * 0.25)
        assert source.consumed == 3

    def test_zero_uniforms_are_skipped(self) -> None:
        source = SequenceSource([0.0, 0.5, 0.5])

        assert standard_gamma_variate(2.0, source) == pytest.approx(5.0 / 3.0)
        assert source.consumed == 3

    def test_non_positive_v_is_rejected(self) -> None:
        # For shape 1, c = 1/sqrt(6); z = ndtri(0.001) < -sqrt(6) gives v <= 0.
        source = SequenceSource([0.001, 0.5, 0.5])

        assert standard_gamma_variate(1.0, source) == pytest.approx(2.0 / 3.0)
        assert source.consumed == 3

    @pytest.mark.parametrize("shape", [0.3, 1.0, 4.0])
    def test_moments(self, shape: float) -> None:
        source = seeded_source(11)
        draws = np.array([standard_gamma_variate(shape, source) for _ in range(4000)])

        assert np.all(draws > 0)
        assert abs(draws.mean() - shape) < 0.1 * shape + 0.05


class TestLogStandardGammaVariate:
    def test_is_log_of_variate(self) -> None:
        source = SequenceSource([0.5, 0.5])

        assert log_standard_gamma_variate(2.0, source) == pytest.approx(np.log(5.0 / 3.0))
        assert source.consumed == 2

    def test_boost_is_added_in_log_space(self) -> None:
        source = SequenceSource([0.5, 0.5, 0.5])

        expected = np.log(1.5 - 1.0 / 3.0) + np.log(0.25)
        assert log_standard_gamma_variate(0.5, source) == pytest.approx(expected)
        assert source.consumed == 3

    def test_tiny_shape_stays_finite(self) -> None:
        # U ** (1 / 1e-4) underflows to zero for any U < 1; its log does not.
        source = seeded_source(3)
        draws = np.array([log_standard_gamma_variate(1e-4, source) for _ in range(200)])

        assert np.all(np.isfinite(draws))
        assert np.median(draws) < -100
