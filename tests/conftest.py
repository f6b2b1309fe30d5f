"""Shared test fixtures."""

import pytest

from activity_burn.config import Settings
from activity_burn.containers import AppContainer, build_container
from activity_burn.services.calculator import CalculatorService
from activity_burn.services.state_store import InMemoryCalculatorStore


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        calculator_ttl_seconds=600,
        max_calculators=10,
    )


@pytest.fixture
def store() -> InMemoryCalculatorStore:
    return InMemoryCalculatorStore(ttl_seconds=600, max_entries=10)


@pytest.fixture
def calculator_service(store: InMemoryCalculatorStore) -> CalculatorService:
    return CalculatorService(store)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
