"""
Weibull distribution family implementation.

Contains the two-parameter Weibull family (shape k, scale λ).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import xlogy

from distengine.distributions.support import ContinuousSupport
from distengine.engine.logdomain import exp_if, log1mexp
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


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution.

    The Weibull distribution is widely used in reliability engineering and
    survival analysis. It is defined by a shape parameter (k) and a scale
    parameter (λ); k = 1 gives the exponential distribution with rate 1/λ.

    Probability density function:
        f(x) = (k/λ) * (x/λ)^(k-1) * exp(-(x/λ)^k) for x ≥ 0, 0 otherwise

    Cumulative distribution function:
        F(x) = 1 - exp(-(x/λ)^k)
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for Weibull distribution.

        The power term enters as ``xlogy(k - 1, x/λ)`` so that at ``x = 0``
        the density is ``1/λ`` for ``k = 1``, ``0`` for ``k > 1`` and
        ``+inf`` for ``k < 1``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - k: float (shape parameter)
            - lambda_: float (scale parameter)
        x : float
            Point at which to evaluate the probability density function
        log : bool
            Return the log-density

        Returns
        -------
        float
            Probability density (or log-density) at x
        """
        parameters = cast(_ShapeScale, parameters)

        k = parameters.k
        lambda_ = parameters.lambda_
        t = x / lambda_
        log_density = np.log(k) - np.log(lambda_) + xlogy(k - 1, t) - t**k
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Cumulative distribution function for Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - k: float (shape parameter)
            - lambda_: float (scale parameter)
        x : float
            Point at which to evaluate the cumulative distribution function
        log : bool
            Return the logarithm of the probability

        Returns
        -------
        float
            Probability P(X ≤ x) (or its logarithm)
        """
        parameters = cast(_ShapeScale, parameters)

        t = (x / parameters.lambda_) ** parameters.k
        if log:
            return log1mexp(-t)
        return -np.expm1(-t)

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """
        Percent point function, ``λ (-ln(1 - p))^(1/k)``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - k: float (shape parameter)
            - lambda_: float (scale parameter)
        p : float
            Probability from (0, 1)

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_ShapeScale, parameters)

        return parameters.lambda_ * (-np.log1p(-p)) ** (1 / parameters.k)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Weibull distribution"""
        return ContinuousSupport(left=0.0, left_closed=True)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_parametrizations=["shapeScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of Weibull distribution.

        Parameters
        ----------
        k : float
            Shape parameter of the distribution
        lambda_ : float
            Scale parameter of the distribution
        """

        k: float
        lambda_: float

        @constraint(description="0 < k < inf")
        def check_k_positive(self) -> bool:
            """Check that shape parameter is positive and finite."""
            return (self.k > 0) & (self.k < np.inf)

        @constraint(description="0 < lambda_ < inf")
        def check_lambda_positive(self) -> bool:
            """Check that scale parameter is positive and finite."""
            return (self.lambda_ > 0) & (self.lambda_ < np.inf)

    ParametricFamilyRegister.register(Weibull)
