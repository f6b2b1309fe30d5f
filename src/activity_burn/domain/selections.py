"""Domain models for activity selections and derived totals."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from activity_burn.domain.activities import ACTIVITIES, Activity
from activity_burn.domain.reference import ActivityLevel, ReferenceRange, Sex

DEFAULT_MINUTES = 60.0
MAX_MINUTES = 720.0
DEFAULT_WEIGHT_KG = 60.0
DEFAULT_SEX = Sex.WOMEN
DEFAULT_LEVEL = ActivityLevel.SEDENTARY


@dataclass
class Selection:
    """Whether an activity was performed and for how many minutes."""

    checked: bool = False
    minutes: float = DEFAULT_MINUTES


def default_selections(
    catalog: tuple[Activity, ...] = ACTIVITIES,
) -> dict[str, Selection]:
    """Return fresh selections for every activity, in catalog order."""
    return {activity.id: Selection() for activity in catalog}


@dataclass(frozen=True)
class ActivityBurn:
    """Calories contributed by one checked activity."""

    activity_id: str
    label: str
    kcal: float


@dataclass(frozen=True)
class Totals:
    """Total calories and the per-activity breakdown."""

    total_kcal: float
    per_activity: list[ActivityBurn]


@dataclass(frozen=True)
class ActivityRate:
    """Calories per hour for an activity at the current weight."""

    activity_id: str
    label: str
    kcal_per_hour: float


@dataclass
class CalculatorState:
    """In-memory state of one calculator."""

    id: UUID
    updated_at: datetime
    weight_kg: float = DEFAULT_WEIGHT_KG
    sex: Sex = DEFAULT_SEX
    level: ActivityLevel = DEFAULT_LEVEL
    selections: dict[str, Selection] = field(default_factory=default_selections)


@dataclass(frozen=True)
class CalculatorView:
    """Calculator inputs together with everything derived from them."""

    id: UUID | None
    weight_kg: float
    sex: Sex
    level: ActivityLevel
    selections: dict[str, Selection]
    totals: Totals
    rates: list[ActivityRate]
    reference: ReferenceRange
