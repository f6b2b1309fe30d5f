"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from activity_burn.config import Settings
from activity_burn.services.calculator import CalculatorService
from activity_burn.services.state_store import InMemoryCalculatorStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculator_service: CalculatorService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = InMemoryCalculatorStore(
        ttl_seconds=resolved_settings.calculator_ttl_seconds,
        max_entries=resolved_settings.max_calculators,
    )
    calculator_service = CalculatorService(store)

    async def close_resources() -> None:
        store.clear()

    return AppContainer(
        settings=resolved_settings,
        calculator_service=calculator_service,
        close_resources=close_resources,
    )
