class CoffeeWireError(Exception):
    """Represent a base class for all coffeewire-specific failures.

    Catch this type when you want to handle any coffeewire error path without
    matching each concrete exception class individually. Errors raised by the
    underlying ``diwire`` container are not wrapped and keep their own types.
    """


class CoffeeWireMissingDependencyError(CoffeeWireError):
    """Signal that a required constructor dependency was passed as ``None``.

    Raised by ``CoffeeMaker.__init__`` when ``heater`` or ``pump`` is absent.
    The name of the offending parameter is available as ``parameter``.

    Typical fixes include building the coffee maker through
    ``build_coffee_maker``/``CoffeeMakerComponent``, or making sure a custom
    ``CoffeeMakerModule`` provider returns an instance instead of ``None``.
    """

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"CoffeeMaker requires a {parameter!r} dependency, got None")
