"""Quickstart: build a coffee maker with plain constructor injection.

``build_coffee_maker`` asks the module for a heater and a pump and hands both
to the ``CoffeeMaker`` constructor. No container is involved.
"""

from __future__ import annotations

from coffeewire import build_coffee_maker


def main() -> None:
    coffee_maker = build_coffee_maker()

    print(f"coffee={coffee_maker.make_coffee()}")  # => coffee=heated water & pumped water

    chain = (
        f"{type(coffee_maker).__name__}"
        f">{type(coffee_maker.heater).__name__}"
        f"+{type(coffee_maker.pump).__name__}"
    )
    print(f"chain={chain}")  # => chain=CoffeeMaker>Heater+Pump


if __name__ == "__main__":
    main()
