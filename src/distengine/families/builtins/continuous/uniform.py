"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from distengine.distributions.support import ContinuousSupport
from distengine.engine.logdomain import exp_if, log_if
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


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise

    The uniform distribution is often used when there is no prior knowledge
    about the possible values of a variable, representing maximum uncertainty.
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for uniform distribution.

        Points outside ``[lower_bound, upper_bound]`` never reach this
        function, so the density is the constant ``1 / (upper - lower)``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        x : float
            Point at which to evaluate the probability density function
        log : bool
            Return the log-density

        Returns
        -------
        float
            Probability density (or log-density) at x
        """
        parameters = cast(_Standard, parameters)

        width = parameters.upper_bound - parameters.lower_bound
        return exp_if(-np.log(width), not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Cumulative distribution function for uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        x : float
            Point at which to evaluate the cumulative distribution function
        log : bool
            Return the logarithm of the probability

        Returns
        -------
        float
            Probability P(X ≤ x) (or its logarithm)
        """
        parameters = cast(_Standard, parameters)

        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        return log_if((x - lower_bound) / (upper_bound - lower_bound), log)

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """
        Percent point function (inverse CDF) for uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        p : float
            Probability from (0, 1)

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_Standard, parameters)

        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        return lower_bound + p * (upper_bound - lower_bound)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(
            left=float(parameters.lower_bound),
            right=float(parameters.upper_bound),
            left_closed=True,
            right_closed=True,
        )

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower_bound : float
            Lower bound of the distribution
        upper_bound : float
            Upper bound of the distribution
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="bounds are finite")
        def check_bounds_finite(self) -> bool:
            """Check that both bounds are finite."""
            return np.isfinite(self.lower_bound) & np.isfinite(self.upper_bound)

        @constraint(description="lower_bound < upper_bound")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.lower_bound < self.upper_bound

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (upper_bound - lower_bound)
        """

        mean: float
        width: float

        @constraint(description="mean is finite")
        def check_mean_finite(self) -> bool:
            """Check that the center is finite."""
            return np.isfinite(self.mean)

        @constraint(description="0 < width < inf")
        def check_width_positive(self) -> bool:
            """Check that width is positive and finite."""
            return (self.width > 0) & (self.width < np.inf)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return _Standard(
                lower_bound=self.mean - half_width, upper_bound=self.mean + half_width
            )

    ParametricFamilyRegister.register(Uniform)
