"""JSON-ready representations of calculator views."""

from activity_burn.domain.reference import ReferenceRange
from activity_burn.domain.selections import CalculatorView
from activity_burn.services.calories import round_half_up


def serialize_reference(reference: ReferenceRange) -> dict[str, object]:
    return {
        "sex": reference.sex.value,
        "level": reference.level.value,
        "daily": list(reference.daily),
        "weekly": list(reference.weekly),
    }


def serialize_view(view: CalculatorView) -> dict[str, object]:
    """Return inputs, rounded and raw totals, rates and the reference range."""
    rates = {rate.activity_id: rate for rate in view.rates}
    return {
        "id": str(view.id) if view.id else None,
        "weight_kg": view.weight_kg,
        "sex": view.sex.value,
        "level": view.level.value,
        "total_kcal": view.totals.total_kcal,
        "total_kcal_display": round_half_up(view.totals.total_kcal),
        "breakdown": [
            {
                "activity_id": entry.activity_id,
                "label": entry.label,
                "kcal": entry.kcal,
                "kcal_display": round_half_up(entry.kcal),
            }
            for entry in view.totals.per_activity
        ],
        "activities": [
            {
                "activity_id": activity_id,
                "label": rates[activity_id].label,
                "checked": selection.checked,
                "minutes": selection.minutes,
                "kcal_per_hour": rates[activity_id].kcal_per_hour,
                "kcal_per_hour_display": round_half_up(
                    rates[activity_id].kcal_per_hour
                ),
            }
            for activity_id, selection in view.selections.items()
            if activity_id in rates
        ],
        "reference": serialize_reference(view.reference),
    }
