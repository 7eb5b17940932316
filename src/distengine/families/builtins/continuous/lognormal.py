"""
Log-normal distribution family implementation.
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


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Log-normal distribution.

    A positive random variable X is log-normally distributed if ln(X) is
    normally distributed with mean μ and standard deviation σ.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of ln X)
            - sigma: float (standard deviation of ln X)
        x : float
            Point at which to evaluate, x > 0
        log : bool
            Return the log-density

        Returns
        -------
        float
            Probability density (or log-density) at x
        """
        parameters = cast(_LogMeanStd, parameters)

        log_x = np.log(x)
        z = (log_x - parameters.mu) / parameters.sigma
        log_density = -0.5 * z * z - log_x - np.log(parameters.sigma) - HALF_LOG_2PI
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """Cumulative distribution function, ``Φ((ln x - μ) / σ)``."""
        parameters = cast(_LogMeanStd, parameters)

        z = (np.log(x) - parameters.mu) / parameters.sigma
        return log_ndtr(z) if log else ndtr(z)

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """Percent point function, ``exp(μ + σ Φ⁻¹(p))``."""
        parameters = cast(_LogMeanStd, parameters)

        return np.exp(parameters.mu + parameters.sigma * ndtri(p))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of log-normal distribution, the open half-line (0, inf)"""
        return ContinuousSupport(left=0.0, left_closed=False)

    LogNormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        distr_parametrizations=["logMeanStd"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    LogNormal.__doc__ = LOGNORMAL_DOC

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Parametrization by the mean and standard deviation of ln X.

        Parameters
        ----------
        mu : float
            Mean of the underlying normal distribution
        sigma : float
            Standard deviation of the underlying normal distribution
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            """Check that the log-mean is finite."""
            return np.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            """Check that the log-standard deviation is positive and finite."""
            return (self.sigma > 0) & (self.sigma < np.inf)

    ParametricFamilyRegister.register(LogNormal)
