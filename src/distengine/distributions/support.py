from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, overload, runtime_checkable

from distengine.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def is_below(self, x: Number) -> bool: ...

    def is_above(self, x: Number) -> bool: ...


class ContinuousSupport(Interval1D, Support):
    """
    Interval support of a univariate continuous distribution.

    Besides membership it answers on which side of the interval an outside
    point lies, which decides whether a CDF saturates at 0 or at 1.
    """

    def is_below(self, x: Number) -> bool:
        """Whether ``x`` lies strictly left of the support."""
        return bool(x < self.left or (x == self.left and not self.left_closed))

    def is_above(self, x: Number) -> bool:
        """Whether ``x`` lies strictly right of the support."""
        return bool(x > self.right or (x == self.right and not self.right_closed))
