"""Capability doubles shared by coffeewire tests."""


class FixedHeater:
    """Heater double returning a caller-chosen string."""

    def __init__(self, result: str) -> None:
        self.result = result

    def heat_water(self) -> str:
        return self.result


class FixedPump:
    """Pump double returning a caller-chosen string."""

    def __init__(self, result: str) -> None:
        self.result = result

    def pump_water(self) -> str:
        return self.result
