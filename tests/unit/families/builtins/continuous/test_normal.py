"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from distengine.distributions.support import ContinuousSupport
from distengine.families.configuration import configure_families_register
from distengine.sources import SequenceSource
from distengine.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL

        # Check parameterizations
        expected_parametrizations = {"meanStd", "meanPrec"}
        assert set(self.normal_family.parametrization_names) == expected_parametrizations
        assert self.normal_family.base_parametrization_name == "meanStd"

    def test_mean_std_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.family_name == FamilyName.NORMAL
        assert dist.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parametrization_name == "meanStd"
        assert dist.is_valid

    def test_mean_prec_parametrization_creation(self):
        """Test creation of distribution with mean-precision parametrization."""
        dist = self.normal_family(mu=2.0, tau=0.25, parametrization_name="meanPrec")

        assert dist.parameters == {"mu": 2.0, "tau": 0.25}
        assert dist.parametrization_name == "meanPrec"

    def test_parametrization_constraints(self):
        """Invalid parameters are reported by validate() and evaluate to NaN."""
        params = self.normal_family.get_parametrization()(mu=0.0, sigma=-1.0)
        with pytest.raises(ValueError, match="0 < sigma < inf"):
            params.validate()

        prec = self.normal_family.get_parametrization("meanPrec")(mu=0.0, tau=-1.0)
        with pytest.raises(ValueError, match="0 < tau < inf"):
            prec.validate()

        dist = self.normal_family(mu=0, sigma=-1.0)
        assert not dist.is_valid
        assert dist.support is None

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu, expected_sigma",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0, math.sqrt(1 / 0.25)),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mu, expected_sigma
    ):
        """Test conversions between different parameterizations."""
        base_params = self.normal_family.to_base(
            self.normal_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION

    def test_analytical_computations_availability(self):
        """Test that analytical computations are available for normal distribution."""
        comp = self.normal_family(mu=0.0, sigma=1.0).analytical_computations

        expected_chars = {
            CharacteristicName.PDF,
            CharacteristicName.CDF,
            CharacteristicName.PPF,
            CharacteristicName.RVS,
        }
        assert set(comp.keys()) == expected_chars

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func, scipy_kwargs",
        [
            (
                CharacteristicName.PDF,
                [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0],
                norm.pdf,
                {"loc": 2.0, "scale": 1.5},
            ),
            (
                CharacteristicName.CDF,
                [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0],
                norm.cdf,
                {"loc": 2.0, "scale": 1.5},
            ),
            (
                CharacteristicName.PPF,
                [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
                norm.ppf,
                {"loc": 2.0, "scale": 1.5},
            ),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func, scipy_kwargs):
        """Test that characteristics support array inputs."""
        dist = self.normal_dist_example
        char_func = dist.query_method(char_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape

        expected_array = scipy_func(input_array, **scipy_kwargs)

        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_log_forms_match_scipy(self):
        """Log-density and log-CDF agree with scipy, including deep tails."""
        x = np.array([-40.0, -5.0, 0.0, 2.0, 7.5])
        np.testing.assert_allclose(
            self.normal_family.pdf(x, log=True, mu=2.0, sigma=1.5),
            norm.logpdf(x, loc=2.0, scale=1.5),
            rtol=1e-12,
        )
        np.testing.assert_allclose(
            self.normal_family.cdf(x, log=True, mu=2.0, sigma=1.5),
            norm.logcdf(x, loc=2.0, scale=1.5),
            rtol=1e-12,
        )

    def test_left_tail_log_cdf_is_finite(self):
        """The log-CDF stays finite where the true-scale CDF underflows."""
        assert self.normal_family.cdf(-60.0, mu=0.0, sigma=1.0) == 0.0
        log_cdf = self.normal_family.cdf(-60.0, log=True, mu=0.0, sigma=1.0)
        assert np.isfinite(log_cdf)
        assert log_cdf == pytest.approx(norm.logcdf(-60.0), rel=1e-12)

    def test_reference_values(self):
        """Known values of the normal CDF and quantile."""
        assert self.normal_family.cdf(2.0, mu=1.0, sigma=2.0) == pytest.approx(0.6914625, abs=1e-7)
        assert self.normal_family.ppf(0.975, mu=0.0, sigma=1.0) == pytest.approx(
            1.959964, abs=1e-6
        )

    def test_mean_prec_evaluates_like_mean_std(self):
        """The same distribution gives the same values in both parametrizations."""
        x = np.linspace(-3.0, 7.0, 11)
        np.testing.assert_allclose(
            self.normal_family.pdf(x, parametrization_name="meanPrec", mu=2.0, tau=0.25),
            self.normal_family.pdf(x, mu=2.0, sigma=2.0),
            rtol=1e-14,
        )

    def test_shared_properties(self):
        """Log forms, monotone CDF, round trip and container identity."""
        params = {"mu": 2.0, "sigma": 1.5}
        points = [-3.0, -1.0, 0.0, 2.0, 3.5, 8.0]
        self.assert_log_forms_agree(self.normal_family, points, **params)
        self.assert_cdf_monotone(self.normal_family, points, **params)
        self.assert_round_trip(self.normal_family, self.PROBABILITIES, **params)
        self.assert_container_matches_scalars(self.normal_family, points, **params)

    @pytest.mark.parametrize(
        "params",
        [
            {"mu": 0.0, "sigma": 0.0},
            {"mu": 0.0, "sigma": -1.0},
            {"mu": np.nan, "sigma": 1.0},
            {"mu": np.inf, "sigma": 1.0},
            {"mu": 0.0, "sigma": np.inf},
        ],
    )
    def test_invalid_parameters_give_nan(self, params):
        """Invalid parameter sets evaluate to NaN instead of raising."""
        self.assert_invalid_is_nan(self.normal_family, 0.5, 0.5, **params)

    def test_sampling_by_inversion(self):
        """Each draw is the quantile of one uniform."""
        source = SequenceSource([0.5, 0.975])
        draws = self.normal_family.rvs(source, size=2, mu=0.0, sigma=1.0)

        assert draws[0] == pytest.approx(0.0, abs=1e-15)
        assert draws[1] == pytest.approx(1.959964, abs=1e-6)
        assert source.consumed == 2

    def test_sampling_statistics(self):
        """Draws have the expected mean and standard deviation."""
        draws = self.assert_draws_reproducible(self.normal_family, mu=2.0, sigma=1.5)

        assert abs(np.mean(draws) - 2.0) < 0.15
        assert abs(np.std(draws) - 1.5) < 0.15

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        dist = self.normal_dist_example

        assert dist.support is not None
        assert isinstance(dist.support, ContinuousSupport)

        assert dist.support.left == float("-inf")
        assert dist.support.right == float("inf")
        assert not dist.support.left_closed
        assert not dist.support.right_closed

        assert dist.support.contains(0) is True
        assert dist.support.contains(float("inf")) is False
        assert dist.support.contains(float("-inf")) is False

        test_points = np.array([-500, 0, 5])
        results = dist.support.contains(test_points)
        assert np.all(results)

        assert not dist.support.is_below(-1e300)
        assert not dist.support.is_above(1e300)


class TestNormalFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)

    def test_invalid_parameterization(self):
        """Test error for invalid parameterization name."""
        with pytest.raises(KeyError):
            self.normal_family.distribution(parametrization_name="invalid_name", mu=0, sigma=1)

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0)  # Missing sigma

    def test_invalid_probability_ppf(self):
        """Test PPF with boundary and invalid probability values."""
        dist = self.normal_family(mu=2.0, sigma=1.5)
        ppf = dist.query_method(CharacteristicName.PPF)

        # Test boundaries
        assert ppf(0.0) == float("-inf")
        assert ppf(1.0) == float("inf")

        # Invalid probabilities are values, not faults
        assert np.isnan(ppf(-0.1))
        assert np.isnan(ppf(1.1))
        assert np.isnan(ppf(np.nan))

    def test_infinite_inputs(self):
        """Infinite points saturate instead of producing NaN."""
        family = self.normal_family
        assert family.pdf(np.inf, mu=0.0, sigma=1.0) == 0.0
        assert family.pdf(-np.inf, log=True, mu=0.0, sigma=1.0) == -np.inf
        assert family.cdf(np.inf, mu=0.0, sigma=1.0) == 1.0
        assert family.cdf(-np.inf, mu=0.0, sigma=1.0) == 0.0
        assert family.cdf(np.inf, log=True, mu=0.0, sigma=1.0) == 0.0

    def test_float32_is_preserved(self):
        """All-float32 arguments evaluate in float32."""
        value = self.normal_family.pdf(np.float32(0.5), mu=np.float32(0.0), sigma=np.float32(1.0))
        assert value.dtype == np.float32
        assert value == pytest.approx(norm.pdf(0.5), rel=1e-6)

        mixed = self.normal_family.pdf(np.float32(0.5), mu=0.0, sigma=1.0)
        assert mixed.dtype == np.float64
