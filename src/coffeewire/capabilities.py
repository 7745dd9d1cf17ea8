from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HeatsWater(Protocol):
    """Anything a ``CoffeeMaker`` can use as its heater."""

    def heat_water(self) -> str: ...


@runtime_checkable
class PumpsWater(Protocol):
    """Anything a ``CoffeeMaker`` can use as its pump."""

    def pump_water(self) -> str: ...


class Heater:
    """Stateless heater capability."""

    def heat_water(self) -> str:
        return "heated water"


class Pump:
    """Stateless pump capability."""

    def pump_water(self) -> str:
        return "pumped water"
