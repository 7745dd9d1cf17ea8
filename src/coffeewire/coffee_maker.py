from __future__ import annotations

from coffeewire.capabilities import HeatsWater, PumpsWater
from coffeewire.exceptions import CoffeeWireMissingDependencyError

SEPARATOR = " & "
"""Joins the heater and pump results in ``CoffeeMaker.make_coffee``."""


class CoffeeMaker:
    """Compose a heater and a pump supplied through the constructor.

    Both dependencies are required and owned by this instance for its whole
    lifetime. They are exposed as read-only properties, so a coffee maker is
    never observed without either of them.

    Examples:
        .. code-block:: python

            coffee_maker = CoffeeMaker(heater=Heater(), pump=Pump())
            coffee_maker.make_coffee()  # "heated water & pumped water"

    """

    __slots__ = ("_heater", "_pump")

    def __init__(self, heater: HeatsWater, pump: PumpsWater) -> None:
        """Store the injected dependencies.

        Args:
            heater: Heater-capable value providing ``heat_water()``.
            pump: Pump-capable value providing ``pump_water()``.

        Raises:
            CoffeeWireMissingDependencyError: If ``heater`` or ``pump`` is
                ``None``.

        """
        if heater is None:
            raise CoffeeWireMissingDependencyError("heater")
        if pump is None:
            raise CoffeeWireMissingDependencyError("pump")

        self._heater = heater
        self._pump = pump

    @property
    def heater(self) -> HeatsWater:
        return self._heater

    @property
    def pump(self) -> PumpsWater:
        return self._pump

    def make_coffee(self) -> str:
        """Run the heater and the pump and join their results with ``SEPARATOR``."""
        return f"{self._heater.heat_water()}{SEPARATOR}{self._pump.pump_water()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(heater={self._heater!r}, pump={self._pump!r})"
