"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from distengine.families.builtins.continuous.beta import configure_beta_family
from distengine.families.builtins.continuous.cauchy import configure_cauchy_family
from distengine.families.builtins.continuous.exponential import configure_exponential_family
from distengine.families.builtins.continuous.gamma import configure_gamma_family
from distengine.families.builtins.continuous.laplace import configure_laplace_family
from distengine.families.builtins.continuous.logistic import configure_logistic_family
from distengine.families.builtins.continuous.lognormal import configure_lognormal_family
from distengine.families.builtins.continuous.normal import configure_normal_family
from distengine.families.builtins.continuous.uniform import configure_uniform_family
from distengine.families.builtins.continuous.weibull import configure_weibull_family

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
