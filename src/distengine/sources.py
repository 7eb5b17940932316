"""
Uniform Randomness Sources
==========================

Random draws never touch global random state. Every sampling call receives
a :class:`UniformSource`, whose only visible operation is ``next()``
returning a value in ``[0, 1)``. A source must not be shared between
threads without external synchronization: draws are reproducible only for
a fixed source and a fixed call sequence.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable


class SourceExhaustedError(RuntimeError):
    """Raised when a fixed uniform sequence has no values left."""


@runtime_checkable
class UniformSource(Protocol):
    """Source of i.i.d. ``U[0, 1)`` variates."""

    def next(self) -> float: ...


class GeneratorSource:
    """
    Uniform source backed by a :class:`numpy.random.Generator`.

    Parameters
    ----------
    rng : numpy.random.Generator
        Generator owned by this source.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    def next(self) -> float:
        return float(self._rng.random())


class SequenceSource:
    """
    Uniform source replaying a fixed sequence of values.

    Parameters
    ----------
    values : Iterable[float]
        Values in ``[0, 1)``, returned in order.

    Raises
    ------
    ValueError
        If a value lies outside ``[0, 1)``.
    """

    __slots__ = ("_values", "_position")

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        bad = [v for v in self._values if not 0.0 <= v < 1.0]
        if bad:
            raise ValueError(f"Uniform values must lie in [0, 1), got {bad[:3]}")
        self._position = 0

    def next(self) -> float:
        if self._position >= len(self._values):
            raise SourceExhaustedError(
                f"Uniform sequence exhausted after {len(self._values)} values"
            )
        value = self._values[self._position]
        self._position += 1
        return value

    @property
    def consumed(self) -> int:
        """Number of values handed out so far."""
        return self._position


def seeded_source(seed: int | None = None) -> GeneratorSource:
    """Build a :class:`GeneratorSource` over ``numpy.random.default_rng(seed)``."""
    return GeneratorSource(np.random.default_rng(seed))
