"""
Evaluation engine

Family-independent machinery shared by every distribution family:

- numeric type promotion (:mod:`.promotion`);
- log-domain boundary helpers (:mod:`.logdomain`);
- container adapters and the elementwise vectorizer
  (:mod:`.containers`, :mod:`.vectorize`);
- bounded CDF inversion (:mod:`.rootfinding`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .containers import (
    ArrayAdapter,
    ContainerAdapter,
    MatrixAdapter,
    OutputBuffer,
    SequenceAdapter,
    ShapeMismatchError,
    as_container,
)
from .logdomain import exp_if, log1mexp, log_if
from .promotion import promote_many, promote_types
from .rootfinding import invert_cdf
from .vectorize import has_container, vectorize

__all__ = [
    # promotion
    "promote_types",
    "promote_many",
    # log domain
    "log_if",
    "exp_if",
    "log1mexp",
    # containers
    "ContainerAdapter",
    "OutputBuffer",
    "ArrayAdapter",
    "SequenceAdapter",
    "MatrixAdapter",
    "ShapeMismatchError",
    "as_container",
    # vectorizer
    "has_container",
    "vectorize",
    # root finding
    "invert_cdf",
]
