"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: a distribution
with bound parameters exposing the four function kinds.

Notes
-----
- ``pdf``/``cdf``/``ppf`` accept scalars or containers and return a value of
  the resolved floating type, or a container of matching shape.
- ``rvs`` draws from an injected uniform source only.
- Invalid parameters never raise; every function kind returns NaN.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distengine.distributions.computation import AnalyticalComputation
    from distengine.distributions.support import Support
    from distengine.sources import UniformSource
    from distengine.types import GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by the catalog and by callers."""

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def support(self) -> Support | None: ...

    def pdf(self, x: Any, *, log: bool = False) -> Any: ...

    def cdf(self, x: Any, *, log: bool = False) -> Any: ...

    def ppf(self, p: Any) -> Any: ...

    def rvs(self, source: UniformSource, size: int | tuple[int, ...] | None = None) -> Any: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        try:
            return self.analytical_computations[characteristic_name]
        except KeyError as exc:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not provided by this distribution"
            ) from exc

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)
