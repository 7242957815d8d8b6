"""CLI entry point for seeding demo bookings.

Usage:
    python -m greentrip.seed.cli --users 20 --seed 42
    python -m greentrip.seed.cli --user-id <firebase-uid> --user-id <other-uid>

Writes to the Firestore project of the ambient credentials; set
``FIRESTORE_EMULATOR_HOST`` to seed a local emulator instead.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random

from dotenv import load_dotenv

from greentrip.persistence.cache_store import DiskCacheStore
from greentrip.persistence.errors import CacheStoreError
from greentrip.persistence.repositories.booking_repo import BookingRepository
from greentrip.seed.demo_bookings import seed_demo_bookings
from greentrip.services.emissions.reporting import EmissionsReportingService
from greentrip.services.flight_provider import StaticFlightProvider
from greentrip.services.flight_service import FlightService

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="GreenTrip demo booking seeder")
    parser.add_argument(
        "--user-id", action="append", dest="user_ids", help="Seed this user (repeatable)"
    )
    parser.add_argument(
        "--users", type=int, default=20, help="Number of demo-user-NN ids when no --user-id is given"
    )
    parser.add_argument("--cancel-ratio", type=float, default=0.2, help="Share of bookings to cancel")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    user_ids = args.user_ids or [f"demo-user-{i:02d}" for i in range(1, args.users + 1)]

    cache = DiskCacheStore()
    try:
        cache.open()
    except CacheStoreError as exc:
        logger.warning("Report cache unavailable, cached reports will expire on TTL: %s", exc)

    repo = BookingRepository()
    service = FlightService(
        provider=StaticFlightProvider(),
        bookings=repo,
        reports=EmissionsReportingService(history=repo, cache=cache),
    )
    try:
        bookings = await seed_demo_bookings(
            service, user_ids, random.Random(args.seed), cancel_ratio=args.cancel_ratio
        )
    finally:
        cache.close()

    total_kg = sum(b.emissions_kg for b in bookings)
    logger.info("Seeded %d bookings, %.2f kg CO2 in total", len(bookings), total_kg)
    return len(bookings)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    asyncio.run(run(args))


if __name__ == "__main__":
    main()
