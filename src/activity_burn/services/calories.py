"""Calorie interpolation and aggregation over the activity catalog."""

import math
from collections.abc import Mapping

from activity_burn.domain.activities import ACTIVITIES, Activity, KcalAnchors
from activity_burn.domain.selections import (
    MAX_MINUTES,
    ActivityBurn,
    ActivityRate,
    Selection,
    Totals,
)

ANCHOR_SPAN_KG = 10


def kcal_per_hour(weight_kg: float, anchors: KcalAnchors) -> float:
    """Return kcal/hour at a body weight from the 50/60/70 kg anchors.

    Weights up to 60 kg use the 50-60 slope (extrapolating below 50), heavier
    weights use the 60-70 slope (extrapolating above 70). No validation is
    done, so extreme weights can produce negative rates.
    """
    if weight_kg <= 60:  # noqa: PLR2004
        slope = (anchors.at_60kg - anchors.at_50kg) / ANCHOR_SPAN_KG
        return anchors.at_50kg + slope * (weight_kg - 50)
    slope = (anchors.at_70kg - anchors.at_60kg) / ANCHOR_SPAN_KG
    return anchors.at_60kg + slope * (weight_kg - 60)


def compute_totals(
    selections: Mapping[str, Selection],
    weight_kg: object,
    catalog: tuple[Activity, ...] = ACTIVITIES,
) -> Totals:
    """Sum calories for checked activities in catalog order.

    The total adds the raw contributions while each breakdown entry is
    floored at zero.
    """
    weight = coerce_number(weight_kg)
    total_kcal = 0.0
    per_activity: list[ActivityBurn] = []
    for activity in catalog:
        selection = selections.get(activity.id)
        if selection is None or not selection.checked:
            continue
        rate = kcal_per_hour(weight, activity.anchors)
        kcal = rate * coerce_number(selection.minutes) / 60
        total_kcal += kcal
        per_activity.append(
            ActivityBurn(
                activity_id=activity.id, label=activity.label, kcal=max(0.0, kcal)
            )
        )
    return Totals(total_kcal=total_kcal, per_activity=per_activity)


def activity_rates(
    weight_kg: object, catalog: tuple[Activity, ...] = ACTIVITIES
) -> list[ActivityRate]:
    """Return kcal/hour for every catalog activity at a body weight."""
    weight = coerce_number(weight_kg)
    return [
        ActivityRate(
            activity_id=activity.id,
            label=activity.label,
            kcal_per_hour=kcal_per_hour(weight, activity.anchors),
        )
        for activity in catalog
    ]


def coerce_number(value: object) -> float:
    """Convert loose user input to a float, treating anything unusable as 0."""
    number = _parse_number(value)
    if not math.isfinite(number):
        return 0.0
    return number


def clamp_minutes(value: object) -> float:
    """Coerce minutes and clamp them to the allowed range.

    Infinite input clamps to the nearest bound; NaN becomes 0.
    """
    number = _parse_number(value)
    if math.isnan(number):
        return 0.0
    return min(max(number, 0.0), MAX_MINUTES)


def _parse_number(value: object) -> float:
    if value is None or isinstance(value, bool):
        return float(bool(value))
    if isinstance(value, int | float):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return 0.0
    return 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    if math.isinf(value):
        return 0
    return math.floor(value + 0.5)
