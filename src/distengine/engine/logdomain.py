"""
Log-domain boundary helpers.

Formulas are written once, in whichever domain keeps their intermediates
finite, and converted to the requested form at the boundary.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TypeVar

import numpy as np

T = TypeVar("T")

_LN2 = float(np.log(2.0))


def log_if(value: T, want_log: bool) -> T:
    """
    Return ``ln(value)`` if ``want_log`` is set, otherwise ``value`` unchanged.

    ``ln(0)`` evaluates to ``-inf`` silently.
    """
    if not want_log:
        return value
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(value)  # type: ignore[no-any-return]


def exp_if(value: T, want_true_scale: bool) -> T:
    """
    Return ``exp(value)`` if ``want_true_scale`` is set, otherwise ``value``
    unchanged (i.e. left in log form).
    """
    if not want_true_scale:
        return value
    with np.errstate(over="ignore", under="ignore"):
        return np.exp(value)  # type: ignore[no-any-return]


def log1mexp(x: T) -> T:
    """
    ``ln(1 - exp(x))`` for ``x <= 0``.

    ``log1p(-exp(x))`` is used where ``exp(x)`` is small and
    ``ln(-expm1(x))`` where it is close to one, so the result keeps full
    precision at both ends (e.g. a log-CDF written through its survival
    function).
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        result = np.where(x < -_LN2, np.log1p(-np.exp(x)), np.log(-np.expm1(x)))
    return result[()]  # type: ignore[no-any-return]
