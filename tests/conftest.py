"""Shared pytest fixtures for coffeewire tests."""

import pytest
from diwire import Lifetime

from coffeewire.component import CoffeeMakerComponent
from coffeewire.module import CoffeeMakerModule


@pytest.fixture()
def module() -> CoffeeMakerModule:
    """Default provider module."""
    return CoffeeMakerModule()


@pytest.fixture()
def component(module: CoffeeMakerModule) -> CoffeeMakerComponent:
    """Component with the default transient coffee maker lifetime."""
    return CoffeeMakerComponent(module)


@pytest.fixture()
def component_scoped(module: CoffeeMakerModule) -> CoffeeMakerComponent:
    """Component caching one coffee maker for its container lifetime."""
    return CoffeeMakerComponent(module, lifetime=Lifetime.SCOPED)
