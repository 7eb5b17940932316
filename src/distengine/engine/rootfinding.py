"""
Bounded CDF inversion.

Families without a closed-form quantile invert their CDF with
:func:`invert_cdf`: a bracket is built from the support and a
family-provided starting guess, then refined with
:func:`scipy.optimize.brentq`.

Tolerance guarantee
-------------------
The root is located to ``xtol + rtol * |x|`` with ``rtol = 4 * eps`` (``eps`` of
the working dtype, never below float64's since the solver runs in double
precision) and ``xtol`` the smallest normal number of the dtype. Hitting the
iteration cap returns the current estimate without raising.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.optimize import brentq

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

RELATIVE_TOLERANCE_ULPS = 4
"""Relative root tolerance, in units of machine epsilon."""


def default_max_iter(dtype: np.dtype[Any]) -> int:
    """
    Iteration cap for a dtype.

    Enough steps to walk the whole exponent range and then the full
    mantissa, so the cap is only reached on pathological CDFs.
    """
    finfo = np.finfo(dtype)
    return int(finfo.maxexp - finfo.minexp + finfo.nmant + 8)


def _expand(
    cdf: Callable[[Any], Any],
    p: Any,
    start: Any,
    direction: int,
    max_expand: int,
) -> Any:
    """Walk away from ``start`` until the CDF lies on the far side of ``p``."""
    step = max(abs(start), start.dtype.type(1))
    point = start
    for _ in range(max_expand):
        point = start + direction * step
        value = cdf(point)
        if (direction < 0 and value < p) or (direction > 0 and value >= p):
            return point
        step = step * 2
    return point


def invert_cdf(
    cdf: Callable[[Any], Any],
    p: Any,
    *,
    lower: Any,
    upper: Any,
    guess: Any,
    dtype: np.dtype[Any],
    max_iter: int | None = None,
) -> Any:
    """
    Find ``x`` with ``cdf(x) ≈ p`` by Brent's method on a bracket.

    Parameters
    ----------
    cdf : Callable
        Monotone non-decreasing CDF working in ``dtype``.
    p : scalar
        Target probability, strictly inside ``(0, 1)``.
    lower, upper : scalar
        Support endpoints; either may be infinite.
    guess : scalar
        Finite starting point inside the support, used to build a finite
        bracket on unbounded sides (typically a location or the mean).
    dtype : numpy.dtype
        Working floating dtype.
    max_iter : int, optional
        Iteration cap, :func:`default_max_iter` by default.

    Returns
    -------
    scalar
        Quantile estimate in ``dtype``.
    """
    to = dtype.type
    p = to(p)
    guess = to(guess)
    max_expand = int(np.finfo(dtype).maxexp) + 1

    if np.isfinite(lower):
        lo = to(lower)
    else:
        lo = guess if cdf(guess) < p else _expand(cdf, p, guess, -1, max_expand)
    if np.isfinite(upper):
        hi = to(upper)
    else:
        hi = guess if cdf(guess) >= p else _expand(cdf, p, guess, 1, max_expand)

    def f(t: float) -> float:
        return float(cdf(to(t)) - p)

    # Bracket ends already past the target (a clipped expansion or an atom).
    if f(lo) > 0:
        return lo
    if f(hi) < 0:
        return hi

    if max_iter is None:
        max_iter = default_max_iter(dtype)
    rtol = RELATIVE_TOLERANCE_ULPS * max(np.finfo(dtype).eps, np.finfo(np.float64).eps)

    root, info = brentq(
        f,
        float(lo),
        float(hi),
        xtol=float(np.finfo(dtype).tiny),
        rtol=float(rtol),
        maxiter=max_iter,
        full_output=True,
        disp=False,
    )
    if not info.converged:
        logger.debug(
            "CDF inversion for p=%s did not converge after %d iterations on [%s, %s]",
            p,
            max_iter,
            lo,
            hi,
        )
    return to(root)
