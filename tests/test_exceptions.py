"""Tests for custom exception hierarchy."""

import pytest

from coffeewire.capabilities import Heater, Pump
from coffeewire.coffee_maker import CoffeeMaker
from coffeewire.component import build_coffee_maker
from coffeewire.exceptions import CoffeeWireError, CoffeeWireMissingDependencyError
from coffeewire.module import CoffeeMakerModule


class BrokenModule(CoffeeMakerModule):
    def provide_pump(self) -> Pump:
        return None  # type: ignore[return-value]


class TestCoffeeWireMissingDependencyError:
    def test_is_coffeewire_error(self) -> None:
        assert issubclass(CoffeeWireMissingDependencyError, CoffeeWireError)

    def test_raised_for_missing_heater(self) -> None:
        with pytest.raises(CoffeeWireError) as exc_info:
            CoffeeMaker(heater=None, pump=Pump())  # type: ignore[arg-type]

        assert isinstance(exc_info.value, CoffeeWireMissingDependencyError)
        assert exc_info.value.parameter == "heater"
        assert "'heater'" in str(exc_info.value)

    def test_raised_for_missing_pump(self) -> None:
        with pytest.raises(CoffeeWireMissingDependencyError) as exc_info:
            CoffeeMaker(heater=Heater(), pump=None)  # type: ignore[arg-type]

        assert exc_info.value.parameter == "pump"
        assert str(exc_info.value) == "CoffeeMaker requires a 'pump' dependency, got None"

    def test_module_returning_none_surfaces_at_construction(self) -> None:
        with pytest.raises(CoffeeWireMissingDependencyError) as exc_info:
            build_coffee_maker(BrokenModule())

        assert exc_info.value.parameter == "pump"
