"""
Elementwise Vectorizer
======================

Lifts a scalar evaluator into an operation over containers.

Arguments are given as an ordered mapping ``name -> value``. Each value is
either a scalar, broadcast to every element, or a container. The first
container fixes the output shape and container kind; every other container
must have the same shape. Shapes are checked before any element is
evaluated, so a mismatch never produces a partial result.

Element evaluations are independent of one another and are performed in
linear (C) order, which keeps random draws reproducible for a given source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from distengine.engine.containers import (
    ContainerAdapter,
    ShapeMismatchError,
    as_container,
    scalar_value,
)
from distengine.engine.promotion import promote_many

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)


def _adapter_dtype(adapter: ContainerAdapter) -> np.dtype[Any]:
    dtype = getattr(adapter, "dtype", None)
    if dtype is not None:
        return np.dtype(dtype)
    return np.asarray([adapter.read(i) for i in range(adapter.size)]).dtype


def has_container(*values: Any) -> bool:
    """Whether any of ``values`` must go through the vectorizer."""
    return any(as_container(value) is not None for value in values)


def vectorize(
    func: Callable[..., Any],
    arguments: Mapping[str, Any],
    *,
    dtype: np.dtype[Any] | None = None,
) -> Any:
    """
    Evaluate ``func`` elementwise over container arguments.

    Parameters
    ----------
    func : Callable
        Scalar evaluator called as ``func(**element_arguments)``.
    arguments : Mapping[str, Any]
        Ordered mapping of argument names to scalars or containers.
    dtype : numpy.dtype, optional
        Element type of the output. Resolved from all arguments when omitted.

    Returns
    -------
    Any
        New container of the same kind and shape as the first container
        argument.

    Raises
    ------
    ShapeMismatchError
        If container arguments disagree on shape.
    ValueError
        If no argument is a container.
    """
    adapters: dict[str, ContainerAdapter] = {}
    scalars: dict[str, Any] = {}
    for name, value in arguments.items():
        adapter = as_container(value)
        if adapter is None:
            scalars[name] = scalar_value(value)
        else:
            adapters[name] = adapter

    if not adapters:
        raise ValueError("vectorize() requires at least one container argument")

    lead_name, lead = next(iter(adapters.items()))
    for name, adapter in adapters.items():
        if adapter.shape != lead.shape:
            raise ShapeMismatchError(
                f"Argument '{name}' has shape {adapter.shape}, "
                f"expected {lead.shape} (shape of '{lead_name}')"
            )

    if dtype is None:
        dtype = promote_many(
            [*(_adapter_dtype(a) for a in adapters.values()), *scalars.values()]
        )

    logger.debug(
        "Vectorizing %s over shape %s (containers: %s, dtype: %s)",
        getattr(func, "__qualname__", func),
        lead.shape,
        list(adapters),
        dtype,
    )

    out = lead.allocate(dtype)
    element = dict(scalars)
    for i in range(lead.size):
        for name, adapter in adapters.items():
            element[name] = adapter.read(i)
        out.write(i, func(**element))
    return out.result()
