"""Calculator endpoints backed by in-memory state."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from activity_burn.api.models import MinutesUpdate, ProfileUpdate
from activity_burn.api.serializers import serialize_view
from activity_burn.services.report import format_summary

if TYPE_CHECKING:
    from activity_burn.services.calculator import CalculatorService

router = APIRouter(prefix="/calculators", tags=["calculators"])


def _service(request: Request) -> CalculatorService:
    return request.app.state.container.calculator_service


@contextmanager
def _not_found_on_lookup_error() -> Iterator[None]:
    try:
        yield
    except LookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_calculator(request: Request) -> dict[str, object]:
    """Create a calculator with default inputs."""
    return serialize_view(_service(request).create())


@router.get("/{calculator_id}")
async def get_calculator(calculator_id: UUID, request: Request) -> dict[str, object]:
    """Return calculator inputs, totals and reference range."""
    with _not_found_on_lookup_error():
        view = _service(request).view(calculator_id)
    return serialize_view(view)


@router.get("/{calculator_id}/summary", response_class=PlainTextResponse)
async def get_summary(calculator_id: UUID, request: Request) -> str:
    """Return a plain-text summary of the calculator."""
    with _not_found_on_lookup_error():
        view = _service(request).view(calculator_id)
    return format_summary(view)


@router.post("/{calculator_id}/activities/{activity_id}/toggle")
async def toggle_activity(
    calculator_id: UUID, activity_id: str, request: Request
) -> dict[str, object]:
    """Check or uncheck an activity."""
    with _not_found_on_lookup_error():
        view = _service(request).toggle(calculator_id, activity_id)
    return serialize_view(view)


@router.put("/{calculator_id}/activities/{activity_id}/minutes")
async def set_minutes(
    calculator_id: UUID, activity_id: str, update: MinutesUpdate, request: Request
) -> dict[str, object]:
    """Set minutes for an activity, clamped to 0-720."""
    with _not_found_on_lookup_error():
        view = _service(request).set_minutes(
            calculator_id, activity_id, update.minutes
        )
    return serialize_view(view)


@router.put("/{calculator_id}/profile")
async def update_profile(
    calculator_id: UUID, update: ProfileUpdate, request: Request
) -> dict[str, object]:
    """Update any of weight, sex and activity level."""
    service = _service(request)
    with _not_found_on_lookup_error():
        view = service.view(calculator_id)
        if "weight_kg" in update.model_fields_set:
            view = service.set_weight(calculator_id, update.weight_kg)
        if update.sex is not None:
            view = service.set_sex(calculator_id, update.sex)
        if update.level is not None:
            view = service.set_level(calculator_id, update.level)
    return serialize_view(view)


@router.post("/{calculator_id}/reset")
async def reset_calculator(calculator_id: UUID, request: Request) -> dict[str, object]:
    """Restore every input to its default."""
    with _not_found_on_lookup_error():
        view = _service(request).reset_all(calculator_id)
    return serialize_view(view)
