"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, Request

from greentrip.api.auth import UserClaims, verify_firebase_token
from greentrip.persistence.cache_store import CacheStore
from greentrip.persistence.repositories.booking_repo import BookingRepository
from greentrip.services.emissions.reporting import EmissionsReportingService
from greentrip.services.flight_provider import FlightProvider
from greentrip.services.flight_service import FlightService


# ------------------------------------------------------------------
# Current user
# ------------------------------------------------------------------


def get_current_claims(
    claims: UserClaims = Depends(verify_firebase_token),
) -> UserClaims:
    """Return the authenticated user's claims (uid, email, display name)."""
    return claims


def get_current_user(
    claims: UserClaims = Depends(verify_firebase_token),
) -> str:
    """Return the authenticated user ID."""
    return claims.uid


# ------------------------------------------------------------------
# Repositories (stateless, one instance per request)
# ------------------------------------------------------------------


def get_booking_repo() -> BookingRepository:
    return BookingRepository()


# ------------------------------------------------------------------
# Process singletons (from app.state)
# ------------------------------------------------------------------


def get_cache_store(request: Request) -> CacheStore:
    return request.app.state.report_cache


def get_flight_provider(request: Request) -> FlightProvider:
    return request.app.state.flight_provider


# ------------------------------------------------------------------
# Services
# ------------------------------------------------------------------


def get_reporting_service(
    repo: BookingRepository = Depends(get_booking_repo),
    cache: CacheStore = Depends(get_cache_store),
) -> EmissionsReportingService:
    return EmissionsReportingService(history=repo, cache=cache)


def get_flight_service(
    provider: FlightProvider = Depends(get_flight_provider),
    repo: BookingRepository = Depends(get_booking_repo),
    reports: EmissionsReportingService = Depends(get_reporting_service),
) -> FlightService:
    return FlightService(provider=provider, bookings=repo, reports=reports)
