from coffeewire.capabilities import Heater, HeatsWater, Pump, PumpsWater
from coffeewire.coffee_maker import SEPARATOR, CoffeeMaker
from coffeewire.component import CoffeeMakerComponent, build_coffee_maker
from coffeewire.exceptions import CoffeeWireError, CoffeeWireMissingDependencyError
from coffeewire.module import CoffeeMakerModule

__all__ = [
    "SEPARATOR",
    "CoffeeMaker",
    "CoffeeMakerComponent",
    "CoffeeMakerModule",
    "CoffeeWireError",
    "CoffeeWireMissingDependencyError",
    "Heater",
    "HeatsWater",
    "Pump",
    "PumpsWater",
    "build_coffee_maker",
]
