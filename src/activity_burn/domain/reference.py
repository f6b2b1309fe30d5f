"""Reference daily and weekly calorie burn ranges."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    WOMEN = "Women"
    MEN = "Men"


class ActivityLevel(str, Enum):
    SEDENTARY = "Sedentary"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class ReferenceRange:
    """General lifestyle energy-use band for a sex and activity level."""

    sex: Sex
    level: ActivityLevel
    daily: tuple[int, int]
    weekly: tuple[int, int]


REFERENCE_RANGES: dict[tuple[Sex, ActivityLevel], ReferenceRange] = {
    (range_.sex, range_.level): range_
    for range_ in (
        ReferenceRange(
            Sex.WOMEN, ActivityLevel.SEDENTARY, (1800, 2000), (12600, 14000)
        ),
        ReferenceRange(Sex.WOMEN, ActivityLevel.MODERATE, (2000, 2200), (14000, 15400)),
        ReferenceRange(Sex.WOMEN, ActivityLevel.HIGH, (2400, 2600), (16800, 18200)),
        ReferenceRange(Sex.MEN, ActivityLevel.SEDENTARY, (2000, 2200), (14000, 15400)),
        ReferenceRange(Sex.MEN, ActivityLevel.MODERATE, (2400, 2700), (16800, 18900)),
        ReferenceRange(Sex.MEN, ActivityLevel.HIGH, (2800, 3000), (19600, 21000)),
    )
}


def get_reference_range(sex: Sex | str, level: ActivityLevel | str) -> ReferenceRange:
    """Return the reference range for a sex and activity level."""
    return REFERENCE_RANGES[(Sex(sex), ActivityLevel(level))]
