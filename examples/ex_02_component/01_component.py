"""Component: let a ``diwire`` container assemble the coffee maker.

The default component builds a new coffee maker, with its own heater and
pump, on every call. Asking for ``Lifetime.SCOPED`` caches one coffee maker for
the lifetime of the component's container.
"""

from __future__ import annotations

from diwire import Lifetime

from coffeewire import CoffeeMakerComponent


def main() -> None:
    component = CoffeeMakerComponent()
    first = component.get_coffee_maker()
    second = component.get_coffee_maker()

    print(f"coffee={first.make_coffee()}")  # => coffee=heated water & pumped water
    print(f"transient_new={first is not second}")  # => transient_new=True
    print(f"heater_not_shared={first.heater is not second.heater}")  # => heater_not_shared=True

    shared = CoffeeMakerComponent(lifetime=Lifetime.SCOPED)
    print(
        f"scoped_same={shared.get_coffee_maker() is shared.get_coffee_maker()}",
    )  # => scoped_same=True


if __name__ == "__main__":
    main()
