"""
Logistic distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit, log_expit, logit

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


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution.

    Continuous distribution whose CDF is the logistic sigmoid. Defined by a
    location (μ) and a scale (s).

    Probability density function:
        f(x) = exp(-z) / (s (1 + exp(-z))²),  z = (x - μ)/s
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        # symmetric in z, written with -|z| so exp never overflows
        parameters = cast(_LocScale, parameters)

        z = np.abs((x - parameters.mu) / parameters.s)
        log_density = -z - np.log(parameters.s) - 2 * np.log1p(np.exp(-z))
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.mu) / parameters.s
        return log_expit(z) if log else expit(z)

    def ppf(parameters: Parametrization, p: Any) -> Any:
        parameters = cast(_LocScale, parameters)

        return parameters.mu + parameters.s * logit(p)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of logistic distribution"""
        return ContinuousSupport()

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Logistic.__doc__ = LOGISTIC_DOC

    @parametrization(family=Logistic, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of logistic distribution.

        Parameters
        ----------
        mu : float
            Location (mean and median)
        s : float
            Scale parameter
        """

        mu: float
        s: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return np.isfinite(self.mu)

        @constraint(description="0 < s < inf")
        def check_s_positive(self) -> bool:
            return (self.s > 0) & (self.s < np.inf)

    ParametricFamilyRegister.register(Logistic)
