from __future__ import annotations

from coffeewire.capabilities import Heater, Pump
from coffeewire.coffee_maker import CoffeeMaker


class CoffeeMakerModule:
    """Provide the leaf dependencies of a ``CoffeeMaker``.

    Every ``provide_*`` call builds a fresh object, so coffee makers assembled
    from the same module never share a heater or a pump. Subclass and override
    a provider to swap one capability while keeping the rest of the wiring.

    Examples:
        .. code-block:: python

            class LoudPump(Pump):
                def pump_water(self) -> str:
                    return "loudly pumped water"


            class LoudModule(CoffeeMakerModule):
                def provide_pump(self) -> Pump:
                    return LoudPump()

    """

    def provide_heater(self) -> Heater:
        return Heater()

    def provide_pump(self) -> Pump:
        return Pump()

    def provide_coffee_maker(self, heater: Heater, pump: Pump) -> CoffeeMaker:
        """Inject ``heater`` and ``pump`` into a new ``CoffeeMaker``."""
        return CoffeeMaker(heater=heater, pump=pump)
