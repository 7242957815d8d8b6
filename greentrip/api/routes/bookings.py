"""Booking list / detail / cancellation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from greentrip.api.deps import get_booking_repo, get_current_user, get_flight_service
from greentrip.persistence.errors import DocumentNotFoundError
from greentrip.persistence.repositories.booking_repo import BookingRepository
from greentrip.services.flight_service import FlightService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("")
async def list_bookings(
    user_id: str = Depends(get_current_user),
    repo: BookingRepository = Depends(get_booking_repo),
) -> list[dict]:
    """Active bookings, newest first. Cancelled bookings are hidden."""
    return [b.to_firestore() for b in await repo.list_active(user_id)]


@router.get("/{booking_id}")
async def get_booking(
    booking_id: str,
    user_id: str = Depends(get_current_user),
    repo: BookingRepository = Depends(get_booking_repo),
) -> dict:
    booking = await repo.get_active(user_id, booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking.to_firestore()


@router.delete("/{booking_id}")
async def cancel_booking(
    booking_id: str,
    user_id: str = Depends(get_current_user),
    service: FlightService = Depends(get_flight_service),
) -> dict:
    try:
        booking = await service.cancel_booking(user_id, booking_id)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Booking not found") from exc
    return {"message": "Booking cancelled successfully", "id": booking.id, "status": booking.status}
