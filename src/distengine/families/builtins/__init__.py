"""
Built-in distribution families for distengine.

This package contains implementations of standard statistical distribution families
that are available by default in distengine.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from distengine.families.builtins.continuous import (
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

__all__ = [
    "configure_normal_family",
    "configure_lognormal_family",
    "configure_exponential_family",
    "configure_uniform_family",
    "configure_weibull_family",
    "configure_cauchy_family",
    "configure_laplace_family",
    "configure_logistic_family",
    "configure_gamma_family",
    "configure_beta_family",
]
