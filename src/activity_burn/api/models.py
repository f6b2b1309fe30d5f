"""Pydantic models for calculator API payloads."""

from pydantic import BaseModel, Field

from activity_burn.domain.reference import ActivityLevel, Sex
from activity_burn.domain.selections import (
    DEFAULT_LEVEL,
    DEFAULT_MINUTES,
    DEFAULT_SEX,
    DEFAULT_WEIGHT_KG,
    Selection,
)

# Numeric inputs are coerced by the services, so any JSON scalar is accepted.
LooseNumber = int | float | str | None


class SelectionInput(BaseModel):
    """Checkbox and minutes for one activity."""

    checked: bool = False
    minutes: LooseNumber = DEFAULT_MINUTES

    def to_selection(self) -> Selection:
        """Return the raw selection; the calculator service clamps minutes."""
        return Selection(
            checked=self.checked,
            minutes=self.minutes,  # type: ignore[arg-type]
        )


class EstimateRequest(BaseModel):
    """Full calculator inputs for a one-off estimate."""

    weight_kg: LooseNumber = DEFAULT_WEIGHT_KG
    sex: Sex = DEFAULT_SEX
    level: ActivityLevel = DEFAULT_LEVEL
    selections: dict[str, SelectionInput] = Field(default_factory=dict)


class MinutesUpdate(BaseModel):
    """New minutes value for an activity."""

    minutes: LooseNumber


class ProfileUpdate(BaseModel):
    """Partial update of weight, sex and activity level."""

    weight_kg: LooseNumber = None
    sex: Sex | None = None
    level: ActivityLevel | None = None
