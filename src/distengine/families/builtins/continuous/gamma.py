"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations,
its quantile by CDF inversion and a Marsaglia–Tsang sampler.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, cast

import numpy as np
from scipy.special import gammainc, gammaincc, gammaln, xlogy

from distengine.distributions.strategies import SamplingStrategy, standard_gamma_variate
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


class MarsagliaTsangGammaStrategy(SamplingStrategy):
    """
    Gamma sampler: a standard gamma variate scaled by θ.

    Consumes a variable number of uniforms per draw (rejection sampling).
    """

    def draw(
        self,
        family: ParametricFamily,
        parameters: Parametrization,
        source: UniformSource,
    ) -> Any:
        base = family.to_base(parameters)
        return standard_gamma_variate(base.k, source) * base.theta  # type: ignore[attr-defined]


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on [0, inf) defined by a shape (k) and a scale (θ),
    or equivalently by a shape (α = k) and a rate (β = 1/θ). Sums of k
    independent exponential variables with scale θ are gamma distributed.

    Probability density function:
        f(x) = x^(k-1) * exp(-x/θ) / (Γ(k) θ^k) for x ≥ 0

    The CDF is the regularized lower incomplete gamma function P(k, x/θ); the
    quantile has no closed form and is found by a bracketed root search.
    """

    def pdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - k: float (shape parameter)
            - theta: float (scale parameter)
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
        theta = parameters.theta
        log_density = xlogy(k - 1, x) - x / theta - gammaln(k) - k * np.log(theta)
        return exp_if(log_density, not log)

    def _regularized_cdf(parameters: _ShapeScale, x: Any) -> Any:
        return gammainc(parameters.k, x / parameters.theta)

    def cdf(parameters: Parametrization, x: Any, *, log: bool = False) -> Any:
        """
        Cumulative distribution function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - k: float (shape parameter)
            - theta: float (scale parameter)
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

        lower = _regularized_cdf(parameters, x)
        if not log or lower <= 0.5:
            return log_if(lower, log)
        # Upper tail through the regularized upper incomplete gamma.
        return np.log1p(-gammaincc(parameters.k, x / parameters.theta))

    def ppf(parameters: Parametrization, p: Any) -> Any:
        """
        Percent point function for gamma distribution.

        Inverts the CDF on ``[0, inf)`` starting from the mean ``kθ``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - k: float (shape parameter)
            - theta: float (scale parameter)
        p : float
            Probability from (0, 1)

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_ShapeScale, parameters)

        dtype = np.result_type(p, parameters.k, parameters.theta)
        return invert_cdf(
            lambda t: _regularized_cdf(parameters, t),
            p,
            lower=0.0,
            upper=np.inf,
            guess=parameters.k * parameters.theta,
            dtype=dtype,
        )

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution"""
        return ContinuousSupport(left=0.0, left_closed=True)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_parametrizations=["shapeScale", "shapeRate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        sampling_strategy=MarsagliaTsangGammaStrategy(),
        support_by_parametrization=_support,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        k : float
            Shape parameter
        theta : float
            Scale parameter
        """

        k: float
        theta: float

        @constraint(description="0 < k < inf")
        def check_k_positive(self) -> bool:
            """Check that shape parameter is positive and finite."""
            return (self.k > 0) & (self.k < np.inf)

        @constraint(description="0 < theta < inf")
        def check_theta_positive(self) -> bool:
            """Check that scale parameter is positive and finite."""
            return (self.theta > 0) & (self.theta < np.inf)

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        alpha : float
            Shape parameter
        beta : float
            Rate parameter (inverse scale)
        """

        alpha: float
        beta: float

        @constraint(description="0 < alpha < inf")
        def check_alpha_positive(self) -> bool:
            """Check that shape parameter is positive and finite."""
            return (self.alpha > 0) & (self.alpha < np.inf)

        @constraint(description="0 < beta < inf")
        def check_beta_positive(self) -> bool:
            """Check that rate parameter is positive and finite."""
            return (self.beta > 0) & (self.beta < np.inf)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale parametrization instance
            """
            return _ShapeScale(k=self.alpha, theta=1 / self.beta)

    ParametricFamilyRegister.register(Gamma)
