"""
Distribution Families Configuration
====================================

This module registers the built-in catalog of parametric families:

- Normal, LogNormal, Exponential, ContinuousUniform, Weibull, Cauchy,
  Laplace and Logistic — closed-form quantiles, inverse transform sampling;
- Gamma and Beta — quantiles by bounded CDF inversion, transform-rejection
  sampling.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration happens once; repeated calls return the cached register.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from distengine.families.builtins import (
    configure_beta_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_uniform_family,
    configure_weibull_family,
)
from distengine.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and sampling strategies. It is called
    lazily by the catalog, and may be called during application startup.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_lognormal_family()
    configure_exponential_family()
    configure_uniform_family()
    configure_weibull_family()
    configure_cauchy_family()
    configure_laplace_family()
    configure_logistic_family()
    configure_gamma_family()
    configure_beta_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
