"""Custom module: override one provider and keep the rest of the wiring."""

from __future__ import annotations

from coffeewire import CoffeeMakerComponent, CoffeeMakerModule, Heater, build_coffee_maker


class InductionHeater(Heater):
    def heat_water(self) -> str:
        return "induction heated water"


class InductionModule(CoffeeMakerModule):
    def provide_heater(self) -> Heater:
        return InductionHeater()


def main() -> None:
    by_hand = build_coffee_maker(InductionModule())
    print(f"by_hand={by_hand.make_coffee()}")  # => by_hand=induction heated water & pumped water

    component = CoffeeMakerComponent(InductionModule())
    wired = component.get_coffee_maker()
    print(f"wired={wired.make_coffee()}")  # => wired=induction heated water & pumped water


if __name__ == "__main__":
    main()
