"""Tests for the in-memory calculator store."""

from datetime import UTC, datetime
from uuid import uuid4

from activity_burn.domain.selections import CalculatorState
from activity_burn.services.state_store import InMemoryCalculatorStore


def _state() -> CalculatorState:
    return CalculatorState(id=uuid4(), updated_at=datetime.now(tz=UTC))


def test_save_and_get_round_trip() -> None:
    store = InMemoryCalculatorStore()
    state = _state()

    store.save(state)

    assert store.get(state.id) is state
    assert store.get(uuid4()) is None


def test_expired_state_is_dropped() -> None:
    store = InMemoryCalculatorStore(ttl_seconds=0)
    state = _state()

    store.save(state)

    assert store.get(state.id) is None
    assert len(store) == 0


def test_oldest_state_evicted_over_capacity() -> None:
    store = InMemoryCalculatorStore(max_entries=2)
    first, second, third = _state(), _state(), _state()

    store.save(first)
    store.save(second)
    store.save(first)
    store.save(third)

    assert store.get(second.id) is None
    assert store.get(first.id) is first
    assert store.get(third.id) is third


def test_clear_drops_everything() -> None:
    store = InMemoryCalculatorStore()
    store.save(_state())

    store.clear()

    assert len(store) == 0
