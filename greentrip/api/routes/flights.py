"""Flight search, airport list and booking endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from greentrip.api.deps import get_current_user, get_flight_service
from greentrip.contracts.booking import BookingRequest
from greentrip.contracts.flight import FlightSearchRequest
from greentrip.services.errors import InputValidationError, NotFoundError
from greentrip.services.flight_service import FlightService

router = APIRouter(prefix="/flights", tags=["flights"])


@router.post("/search")
async def search_flights(
    criteria: FlightSearchRequest,
    user_id: str = Depends(get_current_user),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    return service.search_flights(criteria).to_firestore()


@router.post("/book", status_code=201)
async def book_flight(
    request: BookingRequest,
    user_id: str = Depends(get_current_user),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    try:
        booking = await service.book_flight(user_id, request)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    except InputValidationError as exc:
        raise HTTPException(
            status_code=422, detail={"message": exc.message, **exc.details}
        ) from exc
    return booking.to_firestore()


@router.get("/airports")
async def list_airports(
    user_id: str = Depends(get_current_user),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    airports = service.get_airports()
    return {"data": [a.to_firestore() for a in airports], "count": len(airports)}


@router.get("/{flight_id}")
async def get_flight(
    flight_id: str,
    user_id: str = Depends(get_current_user),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    flight = service.get_flight(flight_id)
    if flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight.to_firestore()
