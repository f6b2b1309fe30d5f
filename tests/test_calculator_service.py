"""Tests for calculator state transitions."""

from uuid import uuid4

import pytest

from activity_burn.api.models import SelectionInput
from activity_burn.domain.activities import UnknownActivityError
from activity_burn.domain.reference import ActivityLevel, Sex
from activity_burn.domain.selections import Selection
from activity_burn.services.calculator import (
    CalculatorNotFoundError,
    CalculatorService,
)


def test_create_uses_defaults(calculator_service: CalculatorService) -> None:
    view = calculator_service.create()

    assert view.id is not None
    assert view.weight_kg == 60
    assert view.sex is Sex.WOMEN
    assert view.level is ActivityLevel.SEDENTARY
    assert all(
        s == Selection(checked=False, minutes=60) for s in view.selections.values()
    )
    assert view.totals.total_kcal == 0
    assert view.reference.daily == (1800, 2000)


def test_toggle_flips_checked_and_recomputes(
    calculator_service: CalculatorService,
) -> None:
    calculator_id = calculator_service.create().id

    view = calculator_service.toggle(calculator_id, "sweeping")

    assert view.selections["sweeping"].checked is True
    assert view.totals.total_kcal == pytest.approx(198)

    view = calculator_service.toggle(calculator_id, "sweeping")

    assert view.selections["sweeping"].checked is False
    assert view.selections["sweeping"].minutes == 60
    assert view.totals.per_activity == []


@pytest.mark.parametrize(
    ("minutes", "expected"), [(1000, 720), (-5, 0), ("abc", 0), ("30", 30)]
)
def test_set_minutes_clamps(
    calculator_service: CalculatorService, minutes: object, expected: float
) -> None:
    calculator_id = calculator_service.create().id

    view = calculator_service.set_minutes(calculator_id, "vacuuming", minutes)

    assert view.selections["vacuuming"].minutes == expected
    assert view.selections["vacuuming"].checked is False


def test_minutes_kept_for_unchecked_activity(
    calculator_service: CalculatorService,
) -> None:
    calculator_id = calculator_service.create().id

    calculator_service.set_minutes(calculator_id, "sweeping", 30)
    view = calculator_service.set_weight(calculator_id, 55)

    assert view.totals.total_kcal == 0

    view = calculator_service.toggle(calculator_id, "sweeping")

    assert view.totals.total_kcal == pytest.approx(90.75)


def test_set_weight_coerces_without_clamping(
    calculator_service: CalculatorService,
) -> None:
    calculator_id = calculator_service.create().id

    assert calculator_service.set_weight(calculator_id, "250").weight_kg == 250
    assert calculator_service.set_weight(calculator_id, "abc").weight_kg == 0
    assert calculator_service.set_weight(calculator_id, -3).weight_kg == -3


def test_set_sex_and_level_update_reference(
    calculator_service: CalculatorService,
) -> None:
    calculator_id = calculator_service.create().id

    calculator_service.set_sex(calculator_id, "Men")
    view = calculator_service.set_level(calculator_id, ActivityLevel.HIGH)

    assert view.reference.daily == (2800, 3000)
    assert view.reference.weekly == (19600, 21000)


def test_reset_all_restores_defaults(calculator_service: CalculatorService) -> None:
    calculator_id = calculator_service.create().id
    calculator_service.toggle(calculator_id, "cooking")
    calculator_service.set_minutes(calculator_id, "ironing", 15)
    calculator_service.set_weight(calculator_id, 92)
    calculator_service.set_sex(calculator_id, Sex.MEN)
    calculator_service.set_level(calculator_id, ActivityLevel.MODERATE)

    view = calculator_service.reset_all(calculator_id)

    assert all(
        s == Selection(checked=False, minutes=60) for s in view.selections.values()
    )
    assert (view.weight_kg, view.sex, view.level) == (
        60,
        Sex.WOMEN,
        ActivityLevel.SEDENTARY,
    )
    assert view.totals.total_kcal == 0


def test_view_is_a_snapshot(calculator_service: CalculatorService) -> None:
    view = calculator_service.create()

    view.selections["sweeping"].checked = True

    assert calculator_service.view(view.id).selections["sweeping"].checked is False


def test_unknown_calculator_raises(calculator_service: CalculatorService) -> None:
    with pytest.raises(CalculatorNotFoundError):
        calculator_service.toggle(uuid4(), "sweeping")


def test_unknown_activity_raises(calculator_service: CalculatorService) -> None:
    calculator_id = calculator_service.create().id

    with pytest.raises(UnknownActivityError):
        calculator_service.set_minutes(calculator_id, "skydiving", 10)


def test_estimate_does_not_store(calculator_service: CalculatorService) -> None:
    view = calculator_service.estimate(
        weight_kg=80,
        sex=Sex.MEN,
        level=ActivityLevel.HIGH,
        selections={"gardening_vigorous": Selection(checked=True, minutes=60)},
    )

    assert view.id is None
    assert view.totals.total_kcal == pytest.approx(400)
    assert view.selections["gardening_vigorous"].checked is True
    assert view.selections["sweeping"].checked is False
    assert len(calculator_service.store) == 0


def test_estimate_clamps_raw_minutes(calculator_service: CalculatorService) -> None:
    view = calculator_service.estimate(
        weight_kg=60,
        sex=Sex.WOMEN,
        level=ActivityLevel.SEDENTARY,
        selections={
            "cooking": Selection(True, "1000"),  # type: ignore[arg-type]
        },
    )

    assert view.selections["cooking"].minutes == 720
    assert view.totals.total_kcal == pytest.approx(120 * 12)


def test_selection_input_keeps_raw_minutes() -> None:
    selection = SelectionInput(checked=True, minutes="1000").to_selection()

    assert selection.minutes == "1000"
