"""
Container Adapters
==================

The elementwise engine never looks inside a container directly. It talks to
a :class:`ContainerAdapter`, which exposes exactly what the vectorizer
needs:

- ``shape`` / ``size`` — shape query and element count;
- ``read(i)`` — element at linear (C-order) index ``i``;
- ``allocate(dtype)`` — a fresh :class:`OutputBuffer` of the same shape,
  written through ``write(i, value)`` and materialized by ``result()``.

Built-in adapters cover NumPy arrays of any rank, flat sequences and
rank-2 nested sequences (matrices). Anything already implementing the
protocol is used as is, which is how other matrix libraries plug in.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class ShapeMismatchError(ValueError):
    """Raised when a per-element argument does not match the input shape."""


@runtime_checkable
class OutputBuffer(Protocol):
    """Write side of a container adapter."""

    def write(self, index: int, value: Any) -> None: ...
    def result(self) -> Any: ...


@runtime_checkable
class ContainerAdapter(Protocol):
    """Read side of a container plus allocation of a matching output."""

    @property
    def shape(self) -> tuple[int, ...]: ...
    @property
    def size(self) -> int: ...
    def read(self, index: int) -> Any: ...
    def allocate(self, dtype: np.dtype[Any]) -> OutputBuffer: ...


class _ArrayBuffer:
    __slots__ = ("_out",)

    def __init__(self, shape: tuple[int, ...], dtype: np.dtype[Any]) -> None:
        self._out = np.empty(shape, dtype=dtype)

    def write(self, index: int, value: Any) -> None:
        self._out.flat[index] = value

    def result(self) -> npt.NDArray[Any]:
        return self._out


class ArrayAdapter:
    """
    Adapter over a NumPy array of any rank.

    Elements are addressed in C order; the output is a new array of the
    same shape in the requested dtype.
    """

    __slots__ = ("_data",)

    def __init__(self, data: npt.NDArray[Any]) -> None:
        self._data = data

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(n) for n in self._data.shape)

    @property
    def size(self) -> int:
        return int(self._data.size)

    def read(self, index: int) -> Any:
        return self._data.flat[index]

    def allocate(self, dtype: np.dtype[Any]) -> _ArrayBuffer:
        return _ArrayBuffer(self.shape, dtype)


class _ListBuffer:
    __slots__ = ("_out", "_dtype")

    def __init__(self, size: int, dtype: np.dtype[Any]) -> None:
        self._out: list[Any] = [None] * size
        self._dtype = dtype

    def write(self, index: int, value: Any) -> None:
        self._out[index] = self._dtype.type(value)

    def result(self) -> list[Any]:
        return self._out


class SequenceAdapter:
    """Adapter over a flat Python sequence; the output is a list."""

    __slots__ = ("_data",)

    def __init__(self, data: Sequence[Any]) -> None:
        self._data = data

    @property
    def dtype(self) -> np.dtype[Any]:
        return np.asarray(self._data).dtype if self._data else np.dtype(np.float64)

    @property
    def shape(self) -> tuple[int, ...]:
        return (len(self._data),)

    @property
    def size(self) -> int:
        return len(self._data)

    def read(self, index: int) -> Any:
        return self._data[index]

    def allocate(self, dtype: np.dtype[Any]) -> _ListBuffer:
        return _ListBuffer(self.size, dtype)


class _MatrixBuffer:
    __slots__ = ("_out", "_cols", "_dtype")

    def __init__(self, rows: int, cols: int, dtype: np.dtype[Any]) -> None:
        self._out: list[list[Any]] = [[None] * cols for _ in range(rows)]
        self._cols = cols
        self._dtype = dtype

    def write(self, index: int, value: Any) -> None:
        row, col = divmod(index, self._cols)
        self._out[row][col] = self._dtype.type(value)

    def result(self) -> list[list[Any]]:
        return self._out


class MatrixAdapter:
    """
    Adapter over a rank-2 nested sequence (a list of equal-length rows).

    Row and column counts are preserved in the output, which is a list of
    lists.

    Raises
    ------
    ValueError
        If the rows do not all have the same length.
    """

    __slots__ = ("_rows", "_cols")

    def __init__(self, rows: Sequence[Sequence[Any]]) -> None:
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise ValueError(f"Ragged matrix: rows have lengths {sorted(lengths)}")
        self._rows = rows
        self._cols = lengths.pop() if lengths else 0

    @property
    def dtype(self) -> np.dtype[Any]:
        return np.asarray(self._rows).dtype if self.size else np.dtype(np.float64)

    @property
    def shape(self) -> tuple[int, ...]:
        return (len(self._rows), self._cols)

    @property
    def size(self) -> int:
        return len(self._rows) * self._cols

    def read(self, index: int) -> Any:
        row, col = divmod(index, self._cols)
        return self._rows[row][col]

    def allocate(self, dtype: np.dtype[Any]) -> _MatrixBuffer:
        rows, cols = self.shape
        return _MatrixBuffer(rows, cols, dtype)


def as_container(obj: Any) -> ContainerAdapter | None:
    """
    Wrap ``obj`` in a container adapter.

    Returns
    -------
    ContainerAdapter or None
        ``None`` for scalars (Python numbers, NumPy scalars and 0-d arrays),
        which the vectorizer broadcasts.
    """
    if isinstance(obj, ContainerAdapter):
        return obj
    if isinstance(obj, np.ndarray):
        return None if obj.ndim == 0 else ArrayAdapter(obj)
    if isinstance(obj, str | bytes) or not isinstance(obj, Sequence):
        return None
    if obj and all(isinstance(row, Sequence) and not isinstance(row, str | bytes) for row in obj):
        return MatrixAdapter(obj)
    return SequenceAdapter(obj)


def scalar_value(obj: Any) -> Any:
    """Unwrap 0-d arrays so that scalars reach the evaluator as scalars."""
    if isinstance(obj, np.ndarray) and obj.ndim == 0:
        return obj[()]
    return obj
