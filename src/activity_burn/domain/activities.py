"""Domain models for the household activity catalog."""

from dataclasses import dataclass

ANCHOR_WEIGHTS_KG = (50, 60, 70)


@dataclass(frozen=True)
class KcalAnchors:
    """Calories burned per hour at the 50, 60 and 70 kg anchor weights."""

    at_50kg: float
    at_60kg: float
    at_70kg: float


@dataclass(frozen=True)
class Activity:
    """Represents a catalog activity with known calorie cost."""

    id: str
    label: str
    anchors: KcalAnchors


class UnknownActivityError(LookupError):
    """Raised when an activity identifier is not in the catalog."""

    def __init__(self, activity_id: str) -> None:
        super().__init__(f"Unknown activity: {activity_id}")
        self.activity_id = activity_id


def _activity(activity_id: str, label: str, kcal: tuple[int, int, int]) -> Activity:
    return Activity(id=activity_id, label=label, anchors=KcalAnchors(*kcal))


ACTIVITIES: tuple[Activity, ...] = (
    _activity("sweeping", "Sweeping / Mopping", (165, 198, 231)),
    _activity("vacuuming", "Vacuuming", (175, 210, 245)),
    _activity("wash_clothes", "Washing clothes by hand", (175, 210, 245)),
    _activity("wash_dishes", "Washing dishes", (115, 138, 161)),
    _activity("ironing", "Ironing clothes", (90, 108, 126)),
    _activity("cooking", "Cooking / food prep", (100, 120, 140)),
    _activity("groceries_upstairs", "Carrying groceries (upstairs)", (225, 270, 315)),
    _activity("making_beds", "Making beds / tidying rooms", (125, 150, 175)),
    _activity(
        "childcare_light", "Childcare (bathing, feeding, light)", (125, 150, 175)
    ),
    _activity("window_cleaning", "Window cleaning / heavy scrubbing", (175, 210, 245)),
    _activity("gardening_light", "Gardening (light)", (175, 210, 245)),
    _activity("gardening_vigorous", "Gardening (digging, vigorous)", (250, 300, 350)),
)

_BY_ID = {activity.id: activity for activity in ACTIVITIES}


def get_activity(activity_id: str) -> Activity:
    """Return the catalog entry for an identifier."""
    activity = _BY_ID.get(activity_id)
    if activity is None:
        raise UnknownActivityError(activity_id)
    return activity
