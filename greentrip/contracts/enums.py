"""Enumerations shared across all GreenTrip contracts."""

from enum import Enum


class TravelClass(str, Enum):
    """Cabin class of a booking, in canonical display order."""
    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium_economy"
    BUSINESS = "business"
    FIRST = "first"


class PeriodGranularity(str, Enum):
    """Time bucket used to group bookings in emissions reports."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class BookingStatus(str, Enum):
    """Lifecycle of a booking. Cancelled bookings are soft-deleted."""
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
