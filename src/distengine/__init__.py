"""
distengine
==========

Evaluation engine for univariate distribution functions: densities,
cumulative distribution functions, quantiles and random draws over scalars
and containers, with NaN results for invalid parameters, log-domain
evaluation and a catalog of built-in parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from . import catalog
from .distributions import *
from .distributions import __all__ as _distr_all
from .engine import *
from .engine import __all__ as _engine_all
from .families import *
from .families import __all__ as _family_all
from .sources import (
    GeneratorSource,
    SequenceSource,
    SourceExhaustedError,
    UniformSource,
    seeded_source,
)
from .types import *
from .types import __all__ as _types_all

__version__ = version("distengine")
__all__ = [
    "__version__",
    "catalog",
    "UniformSource",
    "GeneratorSource",
    "SequenceSource",
    "SourceExhaustedError",
    "seeded_source",
    *_distr_all,
    *_engine_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _engine_all
del _family_all
del _types_all
