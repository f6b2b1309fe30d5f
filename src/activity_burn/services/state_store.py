"""In-memory storage for calculator states."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from activity_burn.domain.selections import CalculatorState

logger = logging.getLogger(__name__)


class CalculatorStateStore(Protocol):
    """Storage interface for calculator states."""

    def get(self, calculator_id: UUID) -> CalculatorState | None:
        """Return a state if present and not expired."""

    def save(self, state: CalculatorState) -> None:
        """Store a state, refreshing its expiry."""

    def clear(self) -> None:
        """Drop every stored state."""


@dataclass
class InMemoryCalculatorStore(CalculatorStateStore):
    """Process-local store that forgets idle calculators."""

    ttl_seconds: int
    max_entries: int
    _states: dict[UUID, CalculatorState]

    def __init__(self, ttl_seconds: int = 3600, max_entries: int = 1000) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._states = {}

    def get(self, calculator_id: UUID) -> CalculatorState | None:
        """Return a state if it hasn't expired."""
        state = self._states.get(calculator_id)
        if state is None:
            return None
        if datetime.now(tz=UTC) >= self._expires_at(state):
            self._states.pop(calculator_id, None)
            return None
        return state

    def save(self, state: CalculatorState) -> None:
        """Store a state and evict the oldest ones when over capacity."""
        state.updated_at = datetime.now(tz=UTC)
        self._states.pop(state.id, None)
        self._states[state.id] = state
        self._purge_expired()
        while len(self._states) > self.max_entries:
            oldest = next(iter(self._states))
            self._states.pop(oldest)
            logger.warning("Evicted calculator %s over capacity", oldest)

    def clear(self) -> None:
        """Drop every stored state."""
        self._states.clear()

    def __len__(self) -> int:
        return len(self._states)

    def _expires_at(self, state: CalculatorState) -> datetime:
        return state.updated_at + timedelta(seconds=self.ttl_seconds)

    def _purge_expired(self) -> None:
        now = datetime.now(tz=UTC)
        expired = [
            calculator_id
            for calculator_id, state in self._states.items()
            if now >= self._expires_at(state)
        ]
        for calculator_id in expired:
            self._states.pop(calculator_id)
