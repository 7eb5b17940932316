"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution describes the time between events in a
    Poisson point process. It is defined by a single rate parameter (λ) or,
    equivalently, by its scale β = 1/λ.

    Probability density function:
        f(x) = λ * exp(-λx) for x ≥ 0, 0 otherwise

    The exponential distribution is memoryless: P(X > s + t | X > s) = P(X > t).
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : float
            Point at which to evaluate the probability density function
        log : bool
            Return the log-density

        Returns
        -------
        float
            Probability density (or log-density) at x
        """
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        return exp_if(np.log(lambda_) - lambda_ * x, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Cumulative distribution function for exponential distribution.

        ``1 - exp(-λx)`` is computed as ``-expm1(-λx)`` to keep precision
        for small x; its logarithm goes through ``log1mexp`` so the upper
        tail does not round to zero.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : float
            Point at which to evaluate the cumulative distribution function
        log : bool
            Return the logarithm of the probability

        Returns
        -------
        float
            Probability P(X ≤ x) (or its logarithm)
        """
        parameters = cast(_Rate, parameters)

        t = parameters.lambda_ * x
        if log:
            return log1mexp(-t)
        return -np.expm1(-t)

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """
        Percent point function (inverse CDF) for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        p : float
            Probability from (0, 1)

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_Rate, parameters)

        return -np.log1p(-p) / parameters.lambda_

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of exponential distribution"""
        return ContinuousSupport(left=0.0, left_closed=True)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ) of the distribution
        """

        lambda_: float

        @constraint(description="0 < lambda_ < inf")
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive and finite."""
            return (self.lambda_ > 0) & (self.lambda_ < np.inf)

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β = 1/λ) of the distribution
        """

        beta: float

        @constraint(description="0 < beta < inf")
        def check_beta_positive(self) -> bool:
            """Check that scale parameter is positive and finite."""
            return (self.beta > 0) & (self.beta < np.inf)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return _Rate(lambda_=1 / self.beta)

    ParametricFamilyRegister.register(Exponential)
