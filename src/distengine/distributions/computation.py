"""
Computation Primitives
======================

This module defines the callable wrapper through which a frozen
distribution exposes its characteristics:

- :class:`Computation` — protocol of a callable bound to one characteristic.
- :class:`AnalyticalComputation` — an analytical callable provided by a
  parametric family for fixed parameters.

Notes
-----
- Callables accept scalars or containers. Containers are evaluated
  elementwise by the vectorizer, so the result of a container call equals
  the per-element scalar results.
- ``**options`` are forwarded verbatim (e.g. ``log=True`` for ``pdf``/``cdf``).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from mypy_extensions import KwArg

from distengine.types import (
    GenericCharacteristicName,
)

In = TypeVar("In")
Out = TypeVar("Out")


@runtime_checkable
class Computation(Protocol[In, Out]):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
