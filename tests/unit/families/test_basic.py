from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np

from distengine.distributions.support import ContinuousSupport
from distengine.families import ParametricFamily, Parametrization, constraint
from distengine.types import GenericCharacteristicName
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    PPF: GenericCharacteristicName = "ppf"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, Any] | None = None,
        support: ContinuousSupport | None = None,
    ) -> ParametricFamily:
        """
        Family on ``[0, 1]`` whose formulas echo the input shifted by ``value``.

        ``pdf``/``cdf`` return ``x + value`` (``ln`` of it when ``log`` is set),
        ``ppf`` returns ``p + value``. ``value`` must be non-negative.
        """

        def _echo(p: Parametrization, x: Any, *, log: bool = False) -> Any:
            result = x + p.value  # type: ignore[attr-defined]
            return np.log(result) if log else result

        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": _echo},
                self.CDF: {"alt": _echo, "base": _echo},
                self.PPF: {"base": lambda p, q: q + p.value},
            }
        fam = ParametricFamily(
            name="Default",
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,
            sampling_strategy=MockSamplingStrategy(),
            support_by_parametrization=lambda _: (
                ContinuousSupport(0.0, 1.0) if support is None else support
            ),
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value >= 0")
            def check_value_non_negative(self) -> bool:
                return self.value >= 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            value: float

            @constraint(description="value >= 0")
            def check_value_non_negative(self) -> bool:
                return self.value >= 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value)  # type: ignore[call-arg]

        return fam
