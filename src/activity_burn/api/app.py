"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from activity_burn.api.calculators import router as calculators_router
from activity_burn.api.models import EstimateRequest
from activity_burn.api.serializers import serialize_reference, serialize_view
from activity_burn.api.ui import render_page
from activity_burn.app_logging import configure_logging
from activity_burn.containers import AppContainer
from activity_burn.domain.activities import UnknownActivityError
from activity_burn.domain.reference import (
    REFERENCE_RANGES,
    ActivityLevel,
    Sex,
    get_reference_range,
)
from activity_burn.domain.selections import DEFAULT_WEIGHT_KG
from activity_burn.services.calories import (
    activity_rates,
    coerce_number,
    round_half_up,
)
from activity_burn.services.report import ABOUT


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting activity burn calculator (%s)", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(calculators_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Calculator page that drives the calculator API."""
        return HTMLResponse(render_page())

    @app.get("/about")
    async def about() -> dict[str, object]:
        """Return how the calculator works, references and disclaimer."""
        return {
            "how_it_works": list(ABOUT.how_it_works),
            "reference_note": ABOUT.reference_note,
            "references": list(ABOUT.references),
            "disclaimer": ABOUT.disclaimer,
        }

    @app.get("/activities")
    async def list_activities(weight_kg: str | None = None) -> dict[str, object]:
        """Return the activity catalog with kcal/hour at a body weight."""
        weight = DEFAULT_WEIGHT_KG if weight_kg is None else coerce_number(weight_kg)
        return {
            "weight_kg": weight,
            "activities": [
                {
                    "activity_id": rate.activity_id,
                    "label": rate.label,
                    "kcal_per_hour": rate.kcal_per_hour,
                    "kcal_per_hour_display": round_half_up(rate.kcal_per_hour),
                }
                for rate in activity_rates(weight)
            ],
        }

    @app.get("/reference-ranges")
    async def list_reference_ranges() -> dict[str, object]:
        """Return every reference range."""
        return {
            "ranges": [
                serialize_reference(reference)
                for reference in REFERENCE_RANGES.values()
            ]
        }

    @app.get("/reference-ranges/{sex}/{level}")
    async def reference_range(sex: Sex, level: ActivityLevel) -> dict[str, object]:
        """Return the reference range for a sex and activity level."""
        return serialize_reference(get_reference_range(sex, level))

    @app.post("/estimate")
    async def estimate(payload: EstimateRequest, request: Request) -> dict[str, object]:
        """Compute totals for one-off inputs without keeping state."""
        state_container: AppContainer = request.app.state.container
        try:
            view = state_container.calculator_service.estimate(
                weight_kg=payload.weight_kg,
                sex=payload.sex,
                level=payload.level,
                selections={
                    activity_id: selection.to_selection()
                    for activity_id, selection in payload.selections.items()
                },
            )
        except UnknownActivityError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return serialize_view(view)

    return app
