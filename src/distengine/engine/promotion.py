"""
Numeric Type Resolution
=======================

Resolution of the single floating-point dtype an evaluation runs in.

Every call into a family passes an input value and up to three parameters,
each of which may carry its own numeric type (Python scalars, NumPy scalars,
NumPy arrays or plain sequences). :func:`promote_types` collapses them into
one floating dtype:

- Python ``float`` counts as ``float64``.
- Integral and boolean types promote to ``float64``.
- Among floating types the widest wins, so ``float32`` survives only when
  every argument is already ``float32`` (or narrower).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from typing import Any

import numpy as np

MAX_PROMOTED_ARGUMENTS = 4
"""Input value plus at most three distribution parameters."""

DEFAULT_DTYPE = np.dtype(np.float64)


def _dtype_of(arg: Any) -> np.dtype[Any]:
    """Numeric dtype carried by a single argument."""
    if isinstance(arg, np.dtype):
        return arg
    if isinstance(arg, type):
        return np.dtype(arg)
    # Python scalars are treated as their 64-bit NumPy counterparts, not as
    # "weak" scalars, so they never narrow the result.
    if isinstance(arg, bool | int):
        return np.dtype(np.int64)
    if isinstance(arg, float):
        return DEFAULT_DTYPE
    if isinstance(arg, np.ndarray | np.generic):
        return arg.dtype
    if isinstance(arg, Sequence) and not isinstance(arg, str | bytes):
        return np.asarray(arg).dtype
    dtype = getattr(arg, "dtype", None)
    if dtype is not None:
        return np.dtype(dtype)
    return np.asarray(arg).dtype


def promote_types(*args: Any) -> np.dtype[np.floating[Any]]:
    """
    Resolve the common floating dtype for a set of arguments.

    Parameters
    ----------
    *args
        Up to four values, dtypes or scalar types.

    Returns
    -------
    numpy.dtype
        Floating dtype the whole computation runs in.

    Raises
    ------
    TypeError
        If more than four arguments are given, or an argument has a
        non-real dtype (complex, object, string, ...).
    """
    if len(args) > MAX_PROMOTED_ARGUMENTS:
        raise TypeError(
            f"At most {MAX_PROMOTED_ARGUMENTS} arguments can be promoted, got {len(args)}"
        )
    if not args:
        return DEFAULT_DTYPE

    floating: list[np.dtype[Any]] = []
    integral = False
    for arg in args:
        dtype = _dtype_of(arg)
        if dtype.kind == "f":
            floating.append(dtype)
        elif dtype.kind in "biu":
            integral = True
        else:
            raise TypeError(f"Unsupported numeric type {dtype} for evaluation")

    if integral:
        floating.append(DEFAULT_DTYPE)
    return np.result_type(*floating)


def promote_many(values: Sequence[Any]) -> np.dtype[np.floating[Any]]:
    """
    Promote an arbitrary number of arguments.

    Folds :func:`promote_types` pairwise so that callers with more than four
    arguments (e.g. vectorized calls that also carry an output dtype) can
    reuse the same rules.
    """
    result = DEFAULT_DTYPE if not values else promote_types(values[0])
    for value in values[1:]:
        result = promote_types(result, value)
    return result

