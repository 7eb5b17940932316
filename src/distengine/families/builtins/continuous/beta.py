"""
Beta distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, cast

import numpy as np
from scipy.special import betainc, betaincc, betaln, expit, xlog1py, xlogy

from distengine.distributions.strategies import SamplingStrategy, log_standard_gamma_variate
from distengine.distributions.support import ContinuousSupport
from distengine.engine.logdomain import exp_if, log_if
from distengine.engine.rootfinding import invert_cdf
from distengine.families.parametric_family import ParametricFamily
from distengine.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distengine.families.registry import ParametricFamilyRegister
from distengine.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from distengine.sources import UniformSource


class BetaFromGammaStrategy(SamplingStrategy):
    """
    Beta sampler: ``X / (X + Y)`` with ``X ~ Gamma(α, 1)``, ``Y ~ Gamma(β, 1)``.

    X is always drawn before Y from the same source. The ratio is formed as
    ``expit(ln X - ln Y)`` from log-scale draws, so shapes small enough for
    both variates to underflow still give a value in ``[0, 1]``.
    """

    def draw(
        self,
        family: ParametricFamily,
        parameters: Parametrization,
        source: UniformSource,
    ) -> Any:
        base = family.to_base(parameters)
        log_x = log_standard_gamma_variate(base.alpha, source)  # type: ignore[attr-defined]
        log_y = log_standard_gamma_variate(base.beta, source)  # type: ignore[attr-defined]
        return expit(log_x - log_y)


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    Continuous distribution on [0, 1] with two positive shape parameters
    α and β, commonly used to model probabilities and proportions.

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β)

    The CDF is the regularized incomplete beta function I_x(α, β).
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (first shape parameter)
            - beta: float (second shape parameter)
        x : float
            Point in [0, 1]
        log : bool
            Return the log-density

        Returns
        -------
        float
            Probability density (or log-density) at x
        """
        parameters = cast(_Shapes, parameters)

        alpha = parameters.alpha
        beta = parameters.beta
        log_density = xlogy(alpha - 1, x) + xlog1py(beta - 1, -x) - betaln(alpha, beta)
        return exp_if(log_density, not log)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """Cumulative distribution function, ``I_x(α, β)``."""
        parameters = cast(_Shapes, parameters)

        lower = betainc(parameters.alpha, parameters.beta, x)
        if not log or lower <= 0.5:
            return log_if(lower, log)
        return np.log1p(-betaincc(parameters.alpha, parameters.beta, x))

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """Percent point function, by inverting the CDF on ``[0, 1]``."""
        parameters = cast(_Shapes, parameters)

        alpha = parameters.alpha
        beta = parameters.beta
        return invert_cdf(
            lambda t: betainc(alpha, beta, t),
            p,
            lower=0.0,
            upper=1.0,
            guess=alpha / (alpha + beta),
            dtype=np.result_type(p, alpha, beta),
        )

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of beta distribution"""
        return ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=True)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_parametrizations=["shapes"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        sampling_strategy=BetaFromGammaStrategy(),
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="shapes")
    class _Shapes(Parametrization):
        """
        Shape parametrization of beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter
        beta : float
            Second shape parameter
        """

        alpha: float
        beta: float

        @constraint(description="0 < alpha < inf")
        def check_alpha_positive(self) -> bool:
            return (self.alpha > 0) & (self.alpha < np.inf)

        @constraint(description="0 < beta < inf")
        def check_beta_positive(self) -> bool:
            return (self.beta > 0) & (self.beta < np.inf)

    ParametricFamilyRegister.register(Beta)
