"""Repository for bookings, and the booking history feed for emissions reports."""

from __future__ import annotations

from datetime import datetime, timezone

from greentrip.contracts.booking import Booking
from greentrip.contracts.emissions import BookingEmissionEntry, DateRange, RouteInfo
from greentrip.contracts.enums import BookingStatus
from greentrip.persistence.errors import DocumentNotFoundError
from greentrip.persistence.repositories.base import BaseRepository


def to_emission_entry(user_id: str, booking: Booking) -> BookingEmissionEntry:
    """Project a booking onto the fields the emissions aggregator reads."""
    return BookingEmissionEntry(
        booking_id=booking.id,
        user_id=user_id,
        emissions_kg=booking.emissions_kg,
        status=booking.status,
        created_at=booking.created_at,
        route=RouteInfo(
            from_=booking.flight.from_,
            to=booking.flight.to,
            airline=booking.flight.airline,
            departure_date=booking.flight.departure_date,
        ),
    )


class BookingRepository(BaseRepository[Booking]):
    def __init__(self):
        super().__init__(Booking, "bookings")

    async def list_active(self, user_id: str) -> list[Booking]:
        """Bookings that have not been cancelled, newest first."""
        bookings = [b for b in await self.list_all(user_id) if not b.is_cancelled]
        return sorted(bookings, key=lambda b: b.created_at, reverse=True)

    async def get_active(self, user_id: str, booking_id: str) -> Booking | None:
        booking = await self.get(user_id, booking_id)
        if booking is None or booking.is_cancelled:
            return None
        return booking

    async def cancel(self, user_id: str, booking_id: str) -> Booking:
        """Soft-delete a booking: mark it cancelled and stamp ``deleted_at``.

        The document stays in place so emissions reports keep counting it.
        """
        booking = await self.get_active(user_id, booking_id)
        if booking is None:
            raise DocumentNotFoundError(self._collection_name, booking_id)

        now = datetime.now(timezone.utc)
        cancelled = booking.model_copy(
            update={"status": BookingStatus.CANCELLED, "updated_at": now, "deleted_at": now}
        )
        await self.update(user_id, booking_id, cancelled)
        return cancelled

    # ------------------------------------------------------------------
    # Booking history for emissions reporting
    # ------------------------------------------------------------------

    async def load_entries(
        self, user_id: str, date_range: DateRange | None = None
    ) -> list[BookingEmissionEntry]:
        """All of a user's bookings as emission entries, cancelled ones included."""
        entries = [to_emission_entry(user_id, b) for b in await self.list_all(user_id)]
        if date_range is not None:
            entries = [e for e in entries if date_range.contains(e.created_at)]
        return entries
