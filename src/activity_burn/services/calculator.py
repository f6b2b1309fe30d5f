"""Calculator state transitions with recomputation after every change."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from activity_burn.domain.activities import ACTIVITIES, Activity, get_activity
from activity_burn.domain.reference import ActivityLevel, Sex, get_reference_range
from activity_burn.domain.selections import (
    DEFAULT_LEVEL,
    DEFAULT_SEX,
    DEFAULT_WEIGHT_KG,
    CalculatorState,
    CalculatorView,
    Selection,
    default_selections,
)
from activity_burn.services.calories import (
    activity_rates,
    clamp_minutes,
    coerce_number,
    compute_totals,
)
from activity_burn.services.state_store import CalculatorStateStore

logger = logging.getLogger(__name__)


class CalculatorNotFoundError(LookupError):
    """Raised when a calculator id is unknown or expired."""

    def __init__(self, calculator_id: UUID) -> None:
        super().__init__(f"Calculator not found: {calculator_id}")
        self.calculator_id = calculator_id


@dataclass
class CalculatorService:
    """Application service owning calculator states."""

    store: CalculatorStateStore
    catalog: tuple[Activity, ...] = ACTIVITIES

    def create(self) -> CalculatorView:
        """Create a calculator with default inputs."""
        state = CalculatorState(
            id=uuid4(),
            updated_at=datetime.now(tz=UTC),
            selections=default_selections(self.catalog),
        )
        self.store.save(state)
        logger.info("Created calculator %s", state.id)
        return self._view(state)

    def view(self, calculator_id: UUID) -> CalculatorView:
        """Return the current inputs and derived totals."""
        return self._view(self._get(calculator_id))

    def toggle(self, calculator_id: UUID, activity_id: str) -> CalculatorView:
        """Flip whether an activity is checked; minutes are kept."""
        state = self._get(calculator_id)
        selection = self._selection(state, activity_id)
        selection.checked = not selection.checked
        logger.debug(
            "Toggled %s on %s to %s", activity_id, calculator_id, selection.checked
        )
        return self._save(state)

    def set_minutes(
        self, calculator_id: UUID, activity_id: str, minutes: object
    ) -> CalculatorView:
        """Store clamped minutes for an activity, checked or not."""
        state = self._get(calculator_id)
        selection = self._selection(state, activity_id)
        selection.minutes = clamp_minutes(minutes)
        logger.debug(
            "Set %s minutes on %s to %s", activity_id, calculator_id, selection.minutes
        )
        return self._save(state)

    def set_weight(self, calculator_id: UUID, weight_kg: object) -> CalculatorView:
        """Store the coerced body weight without clamping."""
        state = self._get(calculator_id)
        state.weight_kg = coerce_number(weight_kg)
        return self._save(state)

    def set_sex(self, calculator_id: UUID, sex: Sex | str) -> CalculatorView:
        state = self._get(calculator_id)
        state.sex = Sex(sex)
        return self._save(state)

    def set_level(
        self, calculator_id: UUID, level: ActivityLevel | str
    ) -> CalculatorView:
        state = self._get(calculator_id)
        state.level = ActivityLevel(level)
        return self._save(state)

    def reset_all(self, calculator_id: UUID) -> CalculatorView:
        """Restore every selection and the profile to defaults."""
        state = self._get(calculator_id)
        state.selections = default_selections(self.catalog)
        state.weight_kg = DEFAULT_WEIGHT_KG
        state.sex = DEFAULT_SEX
        state.level = DEFAULT_LEVEL
        logger.info("Reset calculator %s", calculator_id)
        return self._save(state)

    def estimate(
        self,
        weight_kg: object,
        sex: Sex | str,
        level: ActivityLevel | str,
        selections: Mapping[str, Selection],
    ) -> CalculatorView:
        """Compute a view for one-off inputs without storing anything."""
        for activity_id in selections:
            get_activity(activity_id)
        resolved = default_selections(self.catalog)
        for activity_id, selection in selections.items():
            resolved[activity_id] = Selection(
                checked=selection.checked, minutes=clamp_minutes(selection.minutes)
            )
        weight = coerce_number(weight_kg)
        return CalculatorView(
            id=None,
            weight_kg=weight,
            sex=Sex(sex),
            level=ActivityLevel(level),
            selections=resolved,
            totals=compute_totals(resolved, weight, self.catalog),
            rates=activity_rates(weight, self.catalog),
            reference=get_reference_range(sex, level),
        )

    def _get(self, calculator_id: UUID) -> CalculatorState:
        state = self.store.get(calculator_id)
        if state is None:
            logger.warning("Calculator %s not found", calculator_id)
            raise CalculatorNotFoundError(calculator_id)
        return state

    def _selection(self, state: CalculatorState, activity_id: str) -> Selection:
        get_activity(activity_id)
        return state.selections.setdefault(activity_id, Selection())

    def _save(self, state: CalculatorState) -> CalculatorView:
        self.store.save(state)
        return self._view(state)

    def _view(self, state: CalculatorState) -> CalculatorView:
        return CalculatorView(
            id=state.id,
            weight_kg=state.weight_kg,
            sex=state.sex,
            level=state.level,
            selections={
                activity_id: Selection(selection.checked, selection.minutes)
                for activity_id, selection in state.selections.items()
            },
            totals=compute_totals(state.selections, state.weight_kg, self.catalog),
            rates=activity_rates(state.weight_kg, self.catalog),
            reference=get_reference_range(state.sex, state.level),
        )
