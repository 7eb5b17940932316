"""
Cauchy distribution family implementation.
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


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution.

    Continuous distribution with location x0 and scale γ whose mean and
    variance are undefined.

    Probability density function:
        f(x) = 1 / (πγ (1 + ((x - x0)/γ)²))
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.x0) / parameters.gamma
        log_density = -np.log(np.pi) - np.log(parameters.gamma) - np.log1p(z * z)
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        # arctan2(1, -z) / π equals 1/2 + arctan(z)/π without cancellation in the left tail;
        # the right tail is the complement of the mirrored form
        parameters = cast(_LocScale, parameters)

        z = (x - parameters.x0) / parameters.gamma
        if z <= 0:
            return log_if(np.arctan2(1, -z) / np.pi, log)
        tail = np.arctan2(1, z) / np.pi
        if log:
            return np.log1p(-tail)
        return 1 - tail

    def ppf(parameters: Parametrization, p: Any) -> Any:
        parameters = cast(_LocScale, parameters)

        # tan(π(p - 1/2)) near the ends is rewritten as a cotangent of the
        # small distance to 0 or 1
        if p < 0.25:
            z = -1 / np.tan(np.pi * p)
        elif p > 0.75:
            z = 1 / np.tan(np.pi * (1 - p))
        else:
            z = np.tan(np.pi * (p - 0.5))
        return parameters.x0 + parameters.gamma * z

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Cauchy distribution"""
        return ContinuousSupport()

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_parametrizations=["locScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Cauchy distribution.

        Parameters
        ----------
        x0 : float
            Location (median) of the distribution
        gamma : float
            Scale (half width at half maximum)
        """

        x0: float
        gamma: float

        @constraint(description="x0 is finite")
        def check_x0_finite(self) -> bool:
            return np.isfinite(self.x0)

        @constraint(description="0 < gamma < inf")
        def check_gamma_positive(self) -> bool:
            return (self.gamma > 0) & (self.gamma < np.inf)

    ParametricFamilyRegister.register(Cauchy)
