"""Random demo bookings for local development and report demos.

Bookings go through ``FlightService.book_flight`` so that distance and
emissions are frozen exactly as for a real booking. A share of them is then
cancelled, which keeps them in emissions reports but out of booking lists.
"""

from __future__ import annotations

import logging
import random
from datetime import date, datetime, timedelta, timezone

from greentrip.contracts.booking import Booking, BookingRequest, Passenger
from greentrip.services.flight_provider import FLIGHTS
from greentrip.services.flight_service import FlightService

logger = logging.getLogger(__name__)

DEMO_CLASSES = ("economy", "business", "first")

FIRST_NAMES = ("Ada", "Alan", "Grace", "Katherine", "Linus", "Margaret", "Tim", "Radia")
LAST_NAMES = ("Lovelace", "Turing", "Hopper", "Johnson", "Torvalds", "Hamilton", "Berners-Lee", "Perlman")


def random_passenger(rng: random.Random, today: date) -> Passenger:
    """An adult passenger with a ``PASS``-prefixed passport number."""
    age_days = rng.randint(18 * 365, 80 * 365)
    letters = "".join(rng.choice("ABCDEFGHIJKLMNOPQRSTUVWXYZ") for _ in range(6))
    return Passenger(
        first_name=rng.choice(FIRST_NAMES),
        last_name=rng.choice(LAST_NAMES),
        date_of_birth=today - timedelta(days=age_days),
        passport_number=f"PASS{letters}",
    )


def random_booking_request(rng: random.Random, today: date | None = None) -> BookingRequest:
    today = today or datetime.now(tz=timezone.utc).date()
    passengers = rng.randint(1, 3)
    details = [random_passenger(rng, today) for _ in range(passengers)]
    return BookingRequest(
        flight_id=rng.choice(sorted(FLIGHTS)),
        departure_date=today + timedelta(days=rng.randint(1, 30)),
        travel_class=rng.choice(DEMO_CLASSES),
        passengers=passengers,
        passenger_details=details,
        contact_email=f"{details[0].first_name.lower()}@example.com",
    )


async def seed_demo_bookings(
    service: FlightService,
    user_ids: list[str],
    rng: random.Random,
    bookings_per_user: tuple[int, int] = (1, 4),
    cancel_ratio: float = 0.2,
) -> list[Booking]:
    """Book between *bookings_per_user* flights for each user, then cancel
    ``cancel_ratio`` of all created bookings (rounded half up).

    Returns every booking in its final state.
    """
    if not 0.0 <= cancel_ratio <= 1.0:
        raise ValueError(f"cancel_ratio must be between 0 and 1, got {cancel_ratio}")

    created: list[tuple[str, Booking]] = []
    for user_id in user_ids:
        for _ in range(rng.randint(*bookings_per_user)):
            booking = await service.book_flight(user_id, random_booking_request(rng))
            created.append((user_id, booking))
    logger.info("Created %d demo bookings for %d users", len(created), len(user_ids))

    to_cancel = int(len(created) * cancel_ratio + 0.5)
    cancel_idx = set(rng.sample(range(len(created)), to_cancel))
    results: list[Booking] = []
    for i, (user_id, booking) in enumerate(created):
        if i in cancel_idx:
            booking = await service.cancel_booking(user_id, booking.id)
        results.append(booking)
    logger.info("Cancelled %d demo bookings", to_cancel)
    return results
