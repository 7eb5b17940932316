"""
Laplace distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = 1/(2b) * exp(-|x - μ|/b)
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        parameters = cast(_LocScale, parameters)

        b = parameters.b
        log_density = -np.log(2 * b) - np.abs(x - parameters.mu) / b
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Cumulative distribution function for Laplace distribution.

        Left of the location the CDF is ``exp(z)/2`` and is formed in the
        log domain; right of it the tail ``exp(-z)/2`` is subtracted, through
        ``log1p`` when the log form is requested.
        """
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.mu) / parameters.b
        if z < 0:
            return exp_if(z - np.log(2), not log)
        tail = 0.5 * np.exp(-z)
        if log:
            return np.log1p(-tail)
        return 1 - tail

    def ppf(parameters: Parametrization, p: Any) -> Any:
        parameters = cast(_LocScale, parameters)

        mu = parameters.mu
        b = parameters.b
        if p < 0.5:
            return mu + b * np.log(2 * p)
        return mu - b * np.log(2 * (1 - p))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Laplace distribution"""
        return ContinuousSupport()

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Location of the distribution
        b : float
            Scale of the distribution
        """

        mu: float
        b: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return np.isfinite(self.mu)

        @constraint(description="0 < b < inf")
        def check_b_positive(self) -> bool:
            return (self.b > 0) & (self.b < np.inf)

    ParametricFamilyRegister.register(Laplace)
