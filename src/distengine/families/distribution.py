"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from distengine.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distengine.distributions.computation import AnalyticalComputation
    from distengine.distributions.strategies import SamplingStrategy
    from distengine.distributions.support import Support
    from distengine.families.parametric_family import ParametricFamily
    from distengine.families.parametrizations import Parametrization
    from distengine.sources import UniformSource
    from distengine.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing the family's function kinds with those values bound.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parametrization : Parametrization
        Parameter values for this distribution, possibly invalid (every
        function kind then returns NaN).
    """

    family: ParametricFamily
    parametrization: Parametrization
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @property
    def family_name(self) -> str:
        """Name of the parametric family."""
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the values are given in."""
        return self.parametrization.name

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values as a dictionary."""
        return self.parametrization.parameters

    @property
    def is_valid(self) -> bool:
        """Whether the parameters satisfy every constraint."""
        return bool(np.all(self.parametrization.is_valid()))

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def support(self) -> Support | None:
        """Support of this distribution, ``None`` when the parameters are invalid."""
        if not self.is_valid:
            return None
        return self.family.support(self.parametrization)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily built on first access and kept for the lifetime of the
        instance (parameters are immutable).
        """
        if not self._analytical:
            self._analytical.update(self.family.build_analytical_computations(self))
        return self._analytical

    def _call(self, method: str, value: Any, **options: Any) -> Any:
        return getattr(self.family, method)(
            value,
            parametrization_name=self.parametrization_name,
            **options,
            **self.parameters,
        )

    def pdf(self, x: Any, *, log: bool = False) -> Any:
        """Probability density (or log-density) at ``x``."""
        return self._call("pdf", x, log=log)

    def cdf(self, x: Any, *, log: bool = False) -> Any:
        """Cumulative distribution function (or its logarithm) at ``x``."""
        return self._call("cdf", x, log=log)

    def ppf(self, p: Any) -> Any:
        """Quantile at probability ``p``."""
        return self._call("ppf", p)

    def rvs(self, source: UniformSource, size: int | tuple[int, ...] | None = None) -> Any:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        source : UniformSource
            Uniform randomness to draw from.
        size : int or tuple of int, optional
            Number (or shape) of draws, a single scalar when omitted.

        Returns
        -------
        scalar or numpy.ndarray
            Generated samples.
        """
        return self._call("rvs", source, size=size)
