"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and the default
implementation:

- :class:`SamplingStrategy` — draws a single variate for validated
  parameters from an injected uniform source.
- :class:`InversionSamplingStrategy` — inverse transform sampling through
  the family's ``ppf``.

It also provides :func:`standard_gamma_variate`, the Marsaglia–Tsang
transform-rejection generator shared by the gamma-based families, and
:func:`log_standard_gamma_variate`, its log-scale form.

Notes
-----
- Strategies are stateless; all randomness comes from the source passed in.
- Strategies are only called with parameters that passed validation.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np
from scipy.special import ndtri

from distengine.types import CharacteristicName

if TYPE_CHECKING:
    from distengine.families.parametric_family import ParametricFamily
    from distengine.families.parametrizations import Parametrization
    from distengine.sources import UniformSource


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return one variate per call)."""

    def draw(
        self,
        family: "ParametricFamily",
        parameters: "Parametrization",
        source: "UniformSource",
    ) -> Any: ...


def _open_uniform(source: "UniformSource") -> float:
    """Uniform on ``(0, 1)``: zero is skipped so logs and ``ndtri`` stay finite."""
    u = source.next()
    while u == 0.0:
        u = source.next()
    return u


class InversionSamplingStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    Returns ``ppf(U)`` for one uniform ``U`` in ``(0, 1)``. A zero from the
    source is skipped, since ``ppf(0)`` is the left end of the support
    rather than a variate.
    """

    def draw(
        self,
        family: "ParametricFamily",
        parameters: "Parametrization",
        source: "UniformSource",
    ) -> Any:
        return family.evaluate(CharacteristicName.PPF, parameters, _open_uniform(source))


def standard_gamma_variate(shape: Any, source: "UniformSource") -> Any:
    """
    Draw from ``Gamma(shape, 1)`` with the Marsaglia–Tsang method.

    Normal variates are produced by inversion (``ndtri`` of a uniform), so
    the whole draw is a deterministic function of the uniform sequence.
    Shapes below one use the boost ``G(shape + 1) * U ** (1 / shape)``.

    Parameters
    ----------
    shape : float
        Shape parameter, ``shape > 0``.
    source : UniformSource
        Uniform source.

    Returns
    -------
    float
        Gamma variate.
    """
    if shape < 1:
        boost = _open_uniform(source) ** (1.0 / shape)
        return standard_gamma_variate(shape + 1, source) * boost

    d = shape - 1.0 / 3.0
    c = 1.0 / np.sqrt(9.0 * d)
    while True:
        z = ndtri(_open_uniform(source))
        v = 1.0 + c * z
        if v <= 0:
            continue
        v = v * v * v
        u = _open_uniform(source)
        if u < 1.0 - 0.0331 * z**4:
            return d * v
        if np.log(u) < 0.5 * z * z + d * (1.0 - v + np.log(v)):
            return d * v


def log_standard_gamma_variate(shape: Any, source: "UniformSource") -> Any:
    """
    Logarithm of a ``Gamma(shape, 1)`` draw.

    Consumes the same uniforms as :func:`standard_gamma_variate`, but the
    small-shape boost is added as ``ln(U) / shape``, so the result stays
    finite when the variate itself underflows to zero.
    """
    if shape < 1:
        log_boost = np.log(_open_uniform(source)) / shape
        return np.log(standard_gamma_variate(shape + 1, source)) + log_boost
    return np.log(standard_gamma_variate(shape, source))
