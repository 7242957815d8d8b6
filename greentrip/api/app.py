"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from greentrip.api.routes import bookings, emissions, flights  # noqa: E402
from greentrip.persistence.cache_store import DiskCacheStore  # noqa: E402
from greentrip.persistence.errors import CacheStoreError  # noqa: E402
from greentrip.services.flight_provider import StaticFlightProvider  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize Firebase Admin, the report cache and the flight provider."""
    try:
        import firebase_admin
        firebase_admin.initialize_app()
        logger.info("Firebase Admin SDK initialized")
    except ValueError:
        # Already initialized
        logger.info("Firebase Admin SDK already initialized")
    except Exception as exc:
        logger.warning("Firebase Admin SDK init failed: %s", exc)

    cache = DiskCacheStore()
    try:
        cache.open()
    except CacheStoreError as exc:
        # Reports still work uncached; every read falls through to computation
        logger.warning("Report cache unavailable at %s: %s", cache.directory, exc)

    app.state.report_cache = cache
    app.state.flight_provider = StaticFlightProvider()
    yield
    cache.close()


app = FastAPI(
    title="GreenTrip API",
    description="Flight booking with carbon emissions tracking",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(emissions.router, prefix="/api")
app.include_router(flights.router, prefix="/api")
app.include_router(bookings.router, prefix="/api")


@app.get("/api/health")
async def health():
    cache = app.state.report_cache
    return {
        "status": "ok",
        "report_cache_ready": cache.is_ready,
    }
