from __future__ import annotations

import logging

from diwire import Container, Lifetime

from coffeewire.capabilities import Heater, Pump
from coffeewire.coffee_maker import CoffeeMaker
from coffeewire.module import CoffeeMakerModule

logger = logging.getLogger(__name__)


def build_coffee_maker(module: CoffeeMakerModule | None = None) -> CoffeeMaker:
    """Assemble a ``CoffeeMaker`` by hand, without a container.

    Calls the module providers for the heater and the pump and passes the
    results to ``provide_coffee_maker``. Each call returns an independent
    object graph.

    Args:
        module: Provider module to build from. Defaults to a fresh
            ``CoffeeMakerModule``.

    Returns:
        A fully wired ``CoffeeMaker``.

    """
    if module is None:
        module = CoffeeMakerModule()

    logger.debug("Building CoffeeMaker by hand from %s", type(module).__name__)
    return module.provide_coffee_maker(
        heater=module.provide_heater(),
        pump=module.provide_pump(),
    )


class CoffeeMakerComponent:
    """Wire a ``CoffeeMaker`` graph through a ``diwire`` container.

    The module providers are registered as transient factories for ``Heater``
    and ``Pump``, so every coffee maker gets its own capabilities. The coffee
    maker itself follows ``lifetime``: ``Lifetime.TRANSIENT`` builds a new one
    per ``get_coffee_maker`` call, ``Lifetime.SCOPED`` caches one for the
    lifetime of the component's container.

    Examples:
        .. code-block:: python

            component = CoffeeMakerComponent()
            component.get_coffee_maker().make_coffee()

            shared = CoffeeMakerComponent(lifetime=Lifetime.SCOPED)
            assert shared.get_coffee_maker() is shared.get_coffee_maker()

    """

    def __init__(
        self,
        module: CoffeeMakerModule | None = None,
        *,
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> None:
        """Create the container and register the module providers.

        Args:
            module: Provider module to register. Defaults to a fresh
                ``CoffeeMakerModule``.
            lifetime: Lifetime of the ``CoffeeMaker`` registration.

        """
        self._module = module if module is not None else CoffeeMakerModule()
        self._lifetime = lifetime
        self._container = Container()

        logger.info(
            "CoffeeMakerComponent wiring: module=%s lifetime=%s",
            type(self._module).__name__,
            lifetime.name,
        )
        self._container.add_factory(
            self._module.provide_heater,
            provides=Heater,
            lifetime=Lifetime.TRANSIENT,
        )
        self._container.add_factory(
            self._module.provide_pump,
            provides=Pump,
            lifetime=Lifetime.TRANSIENT,
        )
        self._container.add_factory(
            self._module.provide_coffee_maker,
            provides=CoffeeMaker,
            lifetime=lifetime,
        )

    @property
    def module(self) -> CoffeeMakerModule:
        return self._module

    @property
    def lifetime(self) -> Lifetime:
        return self._lifetime

    @property
    def container(self) -> Container:
        """The underlying container, for resolving ``Heater``/``Pump`` directly or for injection."""
        return self._container

    def get_coffee_maker(self) -> CoffeeMaker:
        """Resolve a fully wired ``CoffeeMaker`` from the container."""
        return self._container.resolve(CoffeeMaker)
