"""
Normal distribution family implementation.

Contains the Normal family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import log_ndtr, ndtr, ndtri

from distengine.distributions.support import ContinuousSupport
from distengine.engine.logdomain import exp_if
from distengine.families.parametric_family import ParametricFamily
from distengine.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distengine.families.registry import ParametricFamilyRegister
from distengine.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any

HALF_LOG_2PI = 0.5 * np.log(2 * np.pi)


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    The normal distribution is widely used in statistics, natural sciences,
    and social sciences as a simple model for complex random phenomena.
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for normal distribution.

        The log-density ``-z²/2 - ln σ - ln(2π)/2`` is computed first and
        exponentiated only when the true-scale value is requested.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : float
            Point at which to evaluate the probability density function
        log : bool
            Return the log-density

        Returns
        -------
        float
            Probability density (or log-density) at x
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mu) / parameters.sigma
        log_density = -0.5 * z * z - np.log(parameters.sigma) - HALF_LOG_2PI
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Cumulative distribution function for normal distribution.

        Uses ``ndtr``; the log form uses ``log_ndtr``, which stays accurate
        deep in the left tail where ``ln(ndtr(z))`` would underflow.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : float
            Point at which to evaluate the cumulative distribution function
        log : bool
            Return the logarithm of the probability

        Returns
        -------
        float
            Probability P(X ≤ x) (or its logarithm)
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mu) / parameters.sigma
        return log_ndtr(z) if log else ndtr(z)

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        p : float
            Probability from (0, 1)

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_MeanStd, parameters)

        return parameters.mu + parameters.sigma * ndtri(p)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            """Check that the mean is finite."""
            return np.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive and finite."""
            return (self.sigma > 0) & (self.sigma < np.inf)

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            """Check that the mean is finite."""
            return np.isfinite(self.mu)

        @constraint(description="0 < tau < inf")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive and finite."""
            return (self.tau > 0) & (self.tau < np.inf)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _MeanStd(mu=self.mu, sigma=1 / np.sqrt(self.tau))

    ParametricFamilyRegister.register(Normal)
