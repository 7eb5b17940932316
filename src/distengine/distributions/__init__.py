"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
distengine:

- distribution protocol (:mod:`.distribution`);
- analytical computation wrappers (:mod:`.computation`);
- supports (:mod:`.support`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .strategies import (
    InversionSamplingStrategy,
    SamplingStrategy,
    log_standard_gamma_variate,
    standard_gamma_variate,
)
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # support
    "Support",
    "ContinuousSupport",
    # strategies
    "SamplingStrategy",
    "InversionSamplingStrategy",
    "standard_gamma_variate",
    "log_standard_gamma_variate",
]
