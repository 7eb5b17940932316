"""
Catalog Facade
==============

Name-based access to the built-in families, for callers that do not want to
hold family objects::

    >>> from distengine import catalog
    >>> catalog.density("Normal", 0.0, mu=0.0, sigma=1.0)
    np.float64(0.3989422804014327)

Every function resolves ``name`` in the configured
:class:`~distengine.families.registry.ParametricFamilyRegister` (registering
the built-in catalog on first use) and forwards to the family. Parameters are
given in the family's base parametrization unless ``parametrization_name``
is passed.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from distengine.families.configuration import configure_families_register

if TYPE_CHECKING:
    from typing import Any

    from distengine.families.parametric_family import ParametricFamily
    from distengine.sources import UniformSource


def family(name: str) -> ParametricFamily:
    """
    Look up a built-in family by name.

    Raises
    ------
    ValueError
        If no family is registered under ``name``.
    """
    return configure_families_register().get(name)


def density(name: str, x: Any, log_form: bool = False, **params: Any) -> Any:
    """Probability density of family ``name`` at ``x`` (log-density if ``log_form``)."""
    return family(name).pdf(x, log=log_form, **params)


def distribution(name: str, x: Any, log_form: bool = False, **params: Any) -> Any:
    """Cumulative distribution function of family ``name`` at ``x``."""
    return family(name).cdf(x, log=log_form, **params)


def quantile(name: str, p: Any, **params: Any) -> Any:
    """Quantile of family ``name`` at probability ``p``."""
    return family(name).ppf(p, **params)


def random(
    name: str, source: UniformSource, count: int | None = None, **params: Any
) -> Any:
    """
    Draw from family ``name`` using ``source``.

    Parameters
    ----------
    name : str
        Family name.
    source : UniformSource
        The only randomness consumed.
    count : int, optional
        Number of draws; a single scalar when omitted.
    **params
        Parameter values, scalars or containers.
    """
    return family(name).rvs(source, size=count, **params)


__all__ = ["family", "density", "distribution", "quantile", "random"]
