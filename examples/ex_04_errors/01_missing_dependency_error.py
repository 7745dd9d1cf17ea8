"""Focused example: ``CoffeeWireMissingDependencyError``."""

from __future__ import annotations

from coffeewire import CoffeeMaker, Pump
from coffeewire.exceptions import CoffeeWireMissingDependencyError


def main() -> None:
    try:
        CoffeeMaker(heater=None, pump=Pump())  # type: ignore[arg-type]
    except CoffeeWireMissingDependencyError as error:
        error_name = type(error).__name__
        parameter = error.parameter

    print(f"missing={error_name}")  # => missing=CoffeeWireMissingDependencyError
    print(f"parameter={parameter}")  # => parameter=heater


if __name__ == "__main__":
    main()
