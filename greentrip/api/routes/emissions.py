"""Emissions calculation and reporting endpoints."""

from __future__ import annotations

import time
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from greentrip.api.auth import UserClaims
from greentrip.api.deps import (
    get_current_claims,
    get_current_user,
    get_flight_service,
    get_reporting_service,
)
from greentrip.contracts.emissions import DateRange, EmissionCalculationRequest
from greentrip.contracts.enums import PeriodGranularity
from greentrip.contracts.result import ServiceResult
from greentrip.persistence.errors import CacheStoreError
from greentrip.services.emissions.model import CLASS_MULTIPLIERS
from greentrip.services.emissions.reporting import EmissionsReportingService
from greentrip.services.errors import InputValidationError, NotFoundError
from greentrip.services.flight_service import FlightService

router = APIRouter(prefix="/emissions", tags=["emissions"])


@router.post("/calculate")
async def calculate(
    body: EmissionCalculationRequest,
    user_id: str = Depends(get_current_user),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    """Distance and CO2 for a trip between two IATA airports."""
    try:
        estimate = service.estimate_emissions(
            body.from_, body.to, body.travel_class, body.passengers
        )
    except NotFoundError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": exc.message, "from": body.from_, "to": body.to},
        ) from exc
    except InputValidationError as exc:
        raise HTTPException(
            status_code=422, detail={"message": exc.message, **exc.details}
        ) from exc

    return {"from": body.from_, "to": body.to, **estimate.to_firestore()}


@router.get("/classes")
async def list_classes(user_id: str = Depends(get_current_user)) -> list[dict]:
    return [
        {"class": cls.value, "multiplier": multiplier}
        for cls, multiplier in CLASS_MULTIPLIERS.items()
    ]


# ------------------------------------------------------------------
# Reporting
# ------------------------------------------------------------------


@router.get("/summary")
async def get_summary(
    period: PeriodGranularity = PeriodGranularity.MONTHLY,
    start_date: date | None = Query(default=None, description="YYYY-MM-DD"),
    end_date: date | None = Query(default=None, description="YYYY-MM-DD"),
    claims: UserClaims = Depends(get_current_claims),
    service: EmissionsReportingService = Depends(get_reporting_service),
) -> dict:
    """A user's emissions grouped by period, optionally within a date range.

    The date range applies only when both ``start_date`` and ``end_date``
    are given.
    """
    date_range = None
    if start_date is not None and end_date is not None:
        date_range = DateRange(start=start_date, end=end_date)

    started = time.perf_counter()
    try:
        summary = await service.get_summary(claims.uid, claims.name, period, date_range)
    except InputValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=ServiceResult.fail("validation_failed", exc.message, **exc.details).model_dump(
                mode="json", exclude_none=True
            ),
        ) from exc
    duration_ms = (time.perf_counter() - started) * 1000
    return ServiceResult.ok(summary.to_firestore(), duration_ms=duration_ms).model_dump(
        mode="json", exclude_none=True
    )


@router.delete("/summary/cache")
async def clear_cache(
    user_id: str = Depends(get_current_user),
    service: EmissionsReportingService = Depends(get_reporting_service),
) -> dict:
    try:
        service.clear_user_cache(user_id)
    except CacheStoreError as exc:
        raise HTTPException(status_code=503, detail="Report cache unavailable") from exc
    return ServiceResult.ok(message="Cache cleared successfully").model_dump(
        mode="json", exclude_none=True
    )
