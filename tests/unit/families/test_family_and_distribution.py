from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import numpy as np
import pytest

from distengine.engine.containers import ShapeMismatchError
from distengine.families import ParametricFamilyDistribution, ParametricFamilyRegister
from distengine.sources import SequenceSource
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import CountingSource


class TestFamilyRegistrationAndSampling(TestBaseFamily):
    def test_family_registration_and_distribution_sampling(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        distr = fam.distribution("base", value=0.0)
        assert isinstance(distr, ParametricFamilyDistribution)
        assert ParametricFamilyRegister.get("Default") is fam

        sample = distr.rvs(SequenceSource([0.1, 0.2, 0.3]), size=3)
        np.testing.assert_allclose(sample, [0.1, 0.2, 0.3])

        computations = distr.analytical_computations
        assert set(computations) == {self.PDF, self.CDF, self.PPF, "rvs"}
        assert computations[self.CDF](0.25) == pytest.approx(0.25)
        assert computations[self.PPF](0.75) == pytest.approx(0.75)

    def test_duplicate_registration_raises(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        with pytest.raises(ValueError, match="already"):
            ParametricFamilyRegister.register(self.make_default_family())


class TestInvalidParameters(TestBaseFamily):
    def test_every_function_kind_is_nan(self) -> None:
        fam = self.make_default_family()

        assert np.isnan(fam.pdf(0.5, value=-1.0))
        assert np.isnan(fam.pdf(0.5, log=True, value=-1.0))
        assert np.isnan(fam.cdf(0.5, value=-1.0))
        assert np.isnan(fam.ppf(0.5, value=-1.0))
        assert np.isnan(fam.rvs(CountingSource(), value=-1.0))

    def test_nan_parameter_is_invalid(self) -> None:
        fam = self.make_default_family()
        assert np.isnan(fam.pdf(0.5, value=np.nan))

    def test_invalid_parameters_consume_no_randomness(self) -> None:
        fam = self.make_default_family()
        source = CountingSource()

        fam.rvs(source, size=4, value=-1.0)
        assert source.calls == 0
        assert fam.sampling_strategy.calls == []

    def test_invalid_parameters_never_reach_the_formula(self) -> None:
        called = []

        def _formula(p, x, *, log=False):  # noqa: ANN001
            called.append(x)
            return x

        fam = self.make_default_family(distr_characteristics={self.PDF: _formula})
        fam.pdf(0.5, value=-1.0)
        assert called == []

    def test_per_element_sentinel(self) -> None:
        fam = self.make_default_family()

        result = fam.pdf(np.array([0.25, 0.25, 0.25]), value=np.array([0.0, -1.0, 0.5]))
        assert result[0] == pytest.approx(0.25)
        assert np.isnan(result[1])
        assert result[2] == pytest.approx(0.75)

    def test_invalid_parameters_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        fam = self.make_default_family()

        with caplog.at_level(logging.DEBUG, logger="distengine.families.parametric_family"):
            fam.pdf(0.5, value=-1.0)

        assert "value >= 0" in caplog.text

    def test_frozen_distribution_with_invalid_parameters(self) -> None:
        fam = self.make_default_family()
        distr = fam.distribution(value=-2.0)

        assert not distr.is_valid
        assert distr.support is None
        assert np.isnan(distr.cdf(0.5))


class TestSupportHandling(TestBaseFamily):
    def test_pdf_outside_support_skips_formula(self) -> None:
        fam = self.make_default_family()

        assert fam.pdf(2.0, value=0.0) == 0.0
        assert fam.pdf(-1.0, log=True, value=0.0) == -np.inf

    def test_cdf_saturates_outside_support(self) -> None:
        fam = self.make_default_family()

        assert fam.cdf(-1.0, value=0.0) == 0.0
        assert fam.cdf(2.0, value=0.0) == 1.0
        assert fam.cdf(-1.0, log=True, value=0.0) == -np.inf
        assert fam.cdf(2.0, log=True, value=0.0) == 0.0

    @pytest.mark.parametrize("p", [-0.5, 1.5, np.nan])
    def test_ppf_malformed_probability(self, p: float) -> None:
        fam = self.make_default_family()
        assert np.isnan(fam.ppf(p, value=0.0))

    def test_ppf_endpoints_are_support_bounds(self) -> None:
        fam = self.make_default_family()

        assert fam.ppf(0.0, value=0.5) == 0.0
        assert fam.ppf(1.0, value=0.5) == 1.0

    def test_nan_input_is_nan(self) -> None:
        fam = self.make_default_family()

        assert np.isnan(fam.pdf(np.nan, value=0.0))
        assert np.isnan(fam.cdf(np.nan, log=True, value=0.0))

    def test_log_form_is_passed_to_formula(self) -> None:
        fam = self.make_default_family()

        assert fam.pdf(0.5, log=True, value=0.0) == pytest.approx(np.log(0.5))
        assert fam.cdf(0.5, log=True, value=0.25) == pytest.approx(np.log(0.75))


class TestContainers(TestBaseFamily):
    def test_array_input_keeps_shape(self) -> None:
        fam = self.make_default_family()
        x = np.array([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]])

        result = fam.cdf(x, value=0.0)
        assert isinstance(result, np.ndarray)
        assert result.shape == (2, 3)
        np.testing.assert_allclose(result, x)

    def test_list_input_gives_list(self) -> None:
        fam = self.make_default_family()

        result = fam.cdf([0.1, 0.2], value=0.0)
        assert isinstance(result, list)
        assert result == pytest.approx([0.1, 0.2])

    def test_matrix_input_gives_nested_list(self) -> None:
        fam = self.make_default_family()

        result = fam.cdf([[0.1, 0.2], [0.3, 0.4]], value=0.1)
        assert isinstance(result, list)
        assert len(result) == 2
        assert result[1] == pytest.approx([0.4, 0.5])

    def test_container_parameters_broadcast_scalar_input(self) -> None:
        fam = self.make_default_family()

        result = fam.cdf(0.25, value=[0.0, 0.25, 0.5])
        assert result == pytest.approx([0.25, 0.5, 0.75])

    def test_shape_mismatch_raises_before_evaluation(self) -> None:
        called = []

        def _formula(p, x, *, log=False):  # noqa: ANN001
            called.append(x)
            return x

        fam = self.make_default_family(distr_characteristics={self.PDF: _formula})

        with pytest.raises(ShapeMismatchError):
            fam.pdf(np.array([0.1, 0.2, 0.3]), value=np.array([0.0, 0.0]))
        assert called == []

    def test_empty_container(self) -> None:
        fam = self.make_default_family()

        result = fam.pdf(np.array([]), value=0.0)
        assert result.shape == (0,)


class TestPromotion(TestBaseFamily):
    def test_integers_promote_to_float64(self) -> None:
        fam = self.make_default_family()
        result = fam.cdf(0, value=0)

        assert isinstance(result, np.float64)

    def test_float32_survives_when_all_arguments_are_float32(self) -> None:
        fam = self.make_default_family()

        result = fam.cdf(np.float32(0.5), value=np.float32(0.0))
        assert result.dtype == np.float32

        batch = fam.cdf(np.array([0.5], dtype=np.float32), value=np.float32(0.0))
        assert batch.dtype == np.float32

    def test_python_float_widens_float32(self) -> None:
        fam = self.make_default_family()

        batch = fam.cdf(np.array([0.5], dtype=np.float32), value=0.0)
        assert batch.dtype == np.float64

    def test_complex_input_is_rejected(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(TypeError):
            fam.pdf(0.5 + 1j, value=0.0)


class TestBinding(TestBaseFamily):
    def test_unknown_parameter_name(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(TypeError, match="unexpected"):
            fam.pdf(0.5, valeu=0.0)

    def test_unknown_parametrization(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(KeyError):
            fam.pdf(0.5, parametrization_name="nope", value=0.0)


class TestRandomDraws(TestBaseFamily):
    def test_scalar_draw(self) -> None:
        fam = self.make_default_family()
        source = CountingSource(0.25)

        assert fam.rvs(source, value=1.0) == pytest.approx(1.25)
        assert source.calls == 1

    def test_size_gives_array_of_that_shape(self) -> None:
        fam = self.make_default_family()

        draws = fam.rvs(CountingSource(0.5), size=(2, 3), value=0.0)
        assert draws.shape == (2, 3)
        assert np.all(draws == 0.5)

    def test_container_parameters_draw_in_linear_order(self) -> None:
        fam = self.make_default_family()
        source = SequenceSource([0.1, 0.2, 0.3])

        draws = fam.rvs(source, value=[0.0, 10.0, 20.0])
        assert draws == pytest.approx([0.1, 10.2, 20.3])
        assert fam.sampling_strategy.calls == [{"value": 0.0}, {"value": 10.0}, {"value": 20.0}]

    def test_container_parameters_with_size_raise(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(ValueError, match="size"):
            fam.rvs(CountingSource(), size=3, value=[0.0, 1.0])

    def test_alt_parametrization_draw(self) -> None:
        fam = self.make_default_family()

        draw = fam.rvs(CountingSource(0.5), parametrization_name="alt", value=2.0)
        assert draw == pytest.approx(2.5)
