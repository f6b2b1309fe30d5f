"""Tests for container wiring."""

import asyncio

from activity_burn.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    service = container.calculator_service
    assert service.store.ttl_seconds == settings.calculator_ttl_seconds
    assert service.store.max_entries == settings.max_calculators

    service.create()
    asyncio.run(container.close_resources())

    assert len(service.store) == 0
