"""
Parametric family definitions and evaluation dispatch.

This module contains the main class for defining parametric families of
distributions. A family bundles its parametrizations (with their validity
constraints), the scalar formulas for each characteristic, its support and
its sampling strategy, and exposes the four function kinds (``pdf``,
``cdf``, ``ppf``, ``rvs``) over scalars and containers.

Every call goes through the same layers:

1. argument types are promoted to one floating dtype;
2. the parameters are checked against the parametrization's constraints,
   invalid sets evaluate to NaN;
3. inputs outside the support are answered without running the formula;
4. the scalar formula runs;
5. container arguments repeat 1-4 elementwise through the vectorizer.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import fields, is_dataclass
from functools import partial
from math import prod
from typing import TYPE_CHECKING, dataclass_transform

import numpy as np

from distengine.distributions.computation import AnalyticalComputation
from distengine.distributions.strategies import InversionSamplingStrategy
from distengine.engine.logdomain import log_if
from distengine.engine.promotion import promote_types
from distengine.engine.vectorize import has_container, vectorize
from distengine.families.distribution import ParametricFamilyDistribution
from distengine.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from distengine.distributions.strategies import SamplingStrategy
    from distengine.distributions.support import Support
    from distengine.families.parametrizations import (
        Parametrization,
    )
    from distengine.sources import UniformSource
    from distengine.types import (
        GenericCharacteristicName,
        ParametrizationName,
    )

    ParametrizedFunction: TypeAlias = Callable[..., Any]
    SupportArg: TypeAlias = Callable[[Parametrization], Support | None] | None
    SupportResolver: TypeAlias = Callable[[Parametrization], Support | None]

logger = logging.getLogger(__name__)

_VALUE = "__value__"


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., normal, gamma)
    that can be parameterized in different ways. Manages parametrizations,
    the scalar formulas of the distribution characteristics, and evaluates
    them for given parameter values.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to scalar formulas. Single
        functions are treated as defined for the base parametrization.
        ``pdf``/``cdf`` formulas are called as ``f(parameters, x, log=...)``,
        ``ppf`` formulas as ``f(parameters, p)``.
    sampling_strategy : SamplingStrategy, optional
        Strategy for drawing variates, inverse transform sampling by default.
    support_by_parametrization : Callable or None, optional
        Function that returns the support for given base parameters.
    """

    def __init__(
        self,
        name: str,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        support_by_parametrization: SupportArg = None,
    ):
        self._name = name

        if support_by_parametrization is None:
            self._support_resolver: SupportResolver
            self._support_resolver = lambda _params: None
        else:
            self._support_resolver = support_by_parametrization

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy = (
            InversionSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.parametrization_names[0]: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # Precompute analytical plan
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        """Get the support resolver function."""
        return self._support_resolver

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName | None = None) -> type[Parametrization]:
        """
        Fetch a parametrization class by name (the base one by default).

        Raises
        ------
        KeyError
            If name is not registered.
        """
        if name is None:
            return self.base
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def support(self, parameters: Parametrization) -> Support | None:
        """Support of the distribution with the given (valid) parameters."""
        return self._support_resolver(self.to_base(parameters))

    # ------------------------------------------------------------------
    # Scalar evaluation
    # ------------------------------------------------------------------

    def _provider(
        self, characteristic: GenericCharacteristicName, parameters: Parametrization
    ) -> tuple[ParametrizedFunction, Parametrization]:
        """Formula for ``characteristic`` and the parameters it expects."""
        plan = self._analytical_plan.get(parameters.name, {})
        try:
            provider_name = plan[characteristic]
        except KeyError as exc:
            raise KeyError(
                f"Family {self.name} provides no '{characteristic}' formula"
            ) from exc
        params_obj = parameters if provider_name == parameters.name else self.to_base(parameters)
        return self.distr_characteristics[characteristic][provider_name], params_obj

    def evaluate(
        self,
        characteristic: GenericCharacteristicName,
        parameters: Parametrization,
        value: Any,
        *,
        log: bool = False,
    ) -> Any:
        """
        Evaluate one characteristic at a scalar point.

        Parameters
        ----------
        characteristic : str
            ``"pdf"``, ``"cdf"`` or ``"ppf"``.
        parameters : Parametrization
            Parameter values, in any registered parametrization.
        value : scalar
            Point ``x`` for ``pdf``/``cdf``, probability ``p`` for ``ppf``.
        log : bool, default False
            Return the natural logarithm (``pdf``/``cdf`` only).

        Returns
        -------
        numpy.floating
            Result in the dtype promoted from ``value`` and the parameters;
            NaN if the parameters are invalid.
        """
        dtype = promote_types(value, *parameters.parameters.values())
        to = dtype.type
        nan = to(np.nan)

        with np.errstate(all="ignore"):
            if not parameters.is_valid():
                logger.debug(
                    "%s parameters %s are invalid (%s); returning NaN",
                    self.name,
                    parameters.parameters,
                    ", ".join(parameters.violations()),
                )
                return nan

            value = to(value)
            if np.isnan(value):
                return nan

            support = self.support(parameters)
            if characteristic == CharacteristicName.PDF:
                if support is not None and not support.contains(value):
                    return to(log_if(to(0), log))
            elif characteristic == CharacteristicName.CDF:
                if support is not None and support.is_below(value):
                    return to(log_if(to(0), log))
                if support is not None and support.is_above(value):
                    return to(log_if(to(1), log))
            elif characteristic == CharacteristicName.PPF:
                if not 0 <= value <= 1:
                    return nan
                if value == 0:
                    return to(-np.inf if support is None else support.left)
                if value == 1:
                    return to(np.inf if support is None else support.right)
                func, params_obj = self._provider(characteristic, parameters)
                return to(func(params_obj, value))

            func, params_obj = self._provider(characteristic, parameters)
            return to(func(params_obj, value, log=log))

    def draw(self, parameters: Parametrization, source: UniformSource) -> Any:
        """
        Draw one variate for scalar parameters.

        Invalid parameters give NaN and consume no randomness.
        """
        dtype = promote_types(*parameters.parameters.values())
        if not parameters.is_valid():
            logger.debug(
                "%s parameters %s are invalid (%s); draw is NaN",
                self.name,
                parameters.parameters,
                ", ".join(parameters.violations()),
            )
            return dtype.type(np.nan)
        with np.errstate(all="ignore"):
            return dtype.type(self.sampling_strategy.draw(self, parameters, source))

    # ------------------------------------------------------------------
    # Public entry points (scalars and containers)
    # ------------------------------------------------------------------

    def _bind(self, parametrization_name: str | None, params: dict[str, Any]) -> type[Parametrization]:
        """Parametrization class for a call, checking parameter names up front."""
        parametrization_class = self.get_parametrization(parametrization_name)
        if is_dataclass(parametrization_class):
            expected = {f.name for f in fields(parametrization_class)}
            if set(params) != expected:
                missing = sorted(expected - set(params))
                unexpected = sorted(set(params) - expected)
                raise TypeError(
                    f"{self.name} parametrization '{parametrization_class.__param_name__}' "
                    f"expects parameters {sorted(expected)}; "
                    f"missing {missing}, unexpected {unexpected}"
                )
        return parametrization_class

    def _evaluate_element(
        self,
        characteristic: GenericCharacteristicName,
        parametrization_class: type[Parametrization],
        options: dict[str, Any],
        **arguments: Any,
    ) -> Any:
        value = arguments.pop(_VALUE)
        dtype = promote_types(value, *arguments.values())
        parameters = parametrization_class(**{k: dtype.type(v) for k, v in arguments.items()})
        return self.evaluate(characteristic, parameters, dtype.type(value), **options)

    def _dispatch(
        self,
        characteristic: GenericCharacteristicName,
        value: Any,
        parametrization_name: str | None,
        params: dict[str, Any],
        **options: Any,
    ) -> Any:
        parametrization_class = self._bind(parametrization_name, params)
        func = partial(self._evaluate_element, characteristic, parametrization_class, options)
        arguments = {_VALUE: value, **params}
        if has_container(*arguments.values()):
            return vectorize(func, arguments)
        return func(**arguments)

    def pdf(
        self, x: Any, *, log: bool = False, parametrization_name: str | None = None, **params: Any
    ) -> Any:
        """
        Probability density (or its logarithm) at ``x``.

        ``x`` and every parameter may be a scalar or a container; containers
        must share one shape and the result is a container of that shape.
        """
        return self._dispatch(CharacteristicName.PDF, x, parametrization_name, params, log=log)

    def cdf(
        self, x: Any, *, log: bool = False, parametrization_name: str | None = None, **params: Any
    ) -> Any:
        """Cumulative distribution function (or its logarithm) at ``x``."""
        return self._dispatch(CharacteristicName.CDF, x, parametrization_name, params, log=log)

    def ppf(self, p: Any, *, parametrization_name: str | None = None, **params: Any) -> Any:
        """
        Quantile function at ``p``.

        ``p`` outside ``[0, 1]`` gives NaN; ``0`` and ``1`` give the support
        endpoints.
        """
        return self._dispatch(CharacteristicName.PPF, p, parametrization_name, params)

    def rvs(
        self,
        source: UniformSource,
        size: int | tuple[int, ...] | None = None,
        *,
        parametrization_name: str | None = None,
        **params: Any,
    ) -> Any:
        """
        Draw random variates from ``source``.

        Parameters
        ----------
        source : UniformSource
            Uniform randomness; the only source of randomness used.
        size : int or tuple of int, optional
            Number (or shape) of draws for scalar parameters. ``None`` draws
            a single scalar.
        parametrization_name : str, optional
            Parametrization of ``params`` (base by default).
        **params
            Parameter values; containers draw one variate per element.

        Returns
        -------
        scalar, numpy.ndarray or container
            Draws in C order of the output.

        Raises
        ------
        ValueError
            If ``size`` is combined with container parameters.
        """
        parametrization_class = self._bind(parametrization_name, params)

        def _element(**arguments: Any) -> Any:
            dtype = promote_types(*arguments.values())
            parameters = parametrization_class(
                **{k: dtype.type(v) for k, v in arguments.items()}
            )
            return self.draw(parameters, source)

        if has_container(*params.values()):
            if size is not None:
                raise ValueError("size cannot be combined with container parameters")
            return vectorize(_element, params, dtype=promote_types(*params.values()))

        if size is None:
            return _element(**params)

        shape = (size,) if isinstance(size, int) else tuple(size)
        out = np.empty(prod(shape), dtype=promote_types(*params.values()))
        for i in range(out.size):
            out[i] = _element(**params)
        return out.reshape(shape)

    # ------------------------------------------------------------------
    # Frozen distributions
    # ------------------------------------------------------------------

    def build_analytical_computations(
        self, distribution: ParametricFamilyDistribution
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Build analytical computations bound to a distribution's parameters.

        Only characteristics with a formula reachable from the
        distribution's parametrization are included, plus ``rvs``.
        """
        plan = self._analytical_plan.get(distribution.parametrization_name, {})
        methods: dict[GenericCharacteristicName, Callable[..., Any]] = {
            CharacteristicName.PDF: distribution.pdf,
            CharacteristicName.CDF: distribution.cdf,
            CharacteristicName.PPF: distribution.ppf,
        }
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {
            name: AnalyticalComputation(target=name, func=method)
            for name, method in methods.items()
            if name in plan
        }
        result[CharacteristicName.RVS] = AnalyticalComputation(
            target=CharacteristicName.RVS, func=distribution.rvs
        )
        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters. Invalid
            parameters are accepted; the distribution then evaluates to NaN.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        TypeError
            If parameter names do not match the parametrization.
        """
        parametrization_class = self._bind(parametrization_name, parameters_values)
        parameters = parametrization_class(**parameters_values)
        return ParametricFamilyDistribution(self, parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        If you want to use this syntax and so that Mypy doesn't swear,
        you should mark your class as a dataclass.
        At the moment, Mypy cannot identify dataclass_transform if the decorator is a class method.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from distengine.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
