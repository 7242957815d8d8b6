"""Tests for /api/flights endpoints."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from tests.api.conftest import TEST_USER_ID

TRAVEL_DATE = (date.today() + timedelta(days=30)).isoformat()


def _booking_payload(**overrides) -> dict:
    data = {
        "flight_id": "FL003",
        "date": TRAVEL_DATE,
        "class": "premium_economy",
        "passengers": 2,
        "passenger_details": [
            {
                "first_name": "Katherine",
                "last_name": "Johnson",
                "date_of_birth": "1975-08-26",
                "passport_number": "KJ001",
            },
            {
                "first_name": "Dorothy",
                "last_name": "Vaughan",
                "date_of_birth": "1978-09-20",
                "passport_number": "DV002",
            },
        ],
        "contact_email": "katherine@example.com",
        "contact_phone": "+1 555 0100",
    }
    data.update(overrides)
    return data


class TestSearch:
    async def test_search(self, client):
        resp = await client.post(
            "/api/flights/search",
            json={"from": "JFK", "to": "LAX", "date": TRAVEL_DATE, "passengers": 2},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_count"] == 1
        flight = body["flights"][0]
        assert flight["id"] == "FL001"
        assert flight["from"] == "JFK"
        assert flight["date"] == TRAVEL_DATE
        assert flight["total_price"] == 599.98
        assert body["search_criteria"]["passengers"] == 2

    async def test_no_matches(self, client):
        resp = await client.post(
            "/api/flights/search", json={"from": "MIA", "to": "SEA", "date": TRAVEL_DATE}
        )
        assert resp.json()["flights"] == []

    async def test_past_date(self, client):
        resp = await client.post(
            "/api/flights/search", json={"from": "JFK", "to": "LAX", "date": "2001-01-01"}
        )
        assert resp.status_code == 422


class TestReference:
    async def test_airports(self, client):
        body = (await client.get("/api/flights/airports")).json()
        assert body["count"] == len(body["data"]) == 8
        jfk = next(a for a in body["data"] if a["code"] == "JFK")
        assert jfk["city"] == "New York"
        assert jfk["latitude"] == pytest.approx(40.6413)

    async def test_get_flight(self, client):
        resp = await client.get("/api/flights/FL004")
        assert resp.status_code == 200
        assert resp.json()["flight_number"] == "GA404"

    async def test_get_unknown_flight(self, client):
        resp = await client.get("/api/flights/FL999")
        assert resp.status_code == 404


class TestBook:
    async def test_book(self, client, fake_client):
        resp = await client.post("/api/flights/book", json=_booking_payload())
        assert resp.status_code == 201
        body = resp.json()
        assert body["booking_reference"].startswith("GT")
        assert body["status"] == "confirmed"
        assert body["class"] == "premium_economy"
        assert body["total_price"] == 399.98
        assert body["flight"]["from"] == "ORD"
        assert body["flight"]["date"] == TRAVEL_DATE
        assert body["distance_km"] > 1500
        assert body["emissions_kg"] == pytest.approx(
            body["distance_km"] * 0.180 * 1.2 * 2, abs=0.01
        )
        assert f"users/{TEST_USER_ID}/bookings/{body['id']}" in fake_client.store

    async def test_emissions_match_calculator(self, client):
        booking = (await client.post("/api/flights/book", json=_booking_payload())).json()
        estimate = (
            await client.post(
                "/api/emissions/calculate",
                json={"from": "ORD", "to": "SFO", "class": "premium_economy", "passengers": 2},
            )
        ).json()
        assert booking["emissions_kg"] == estimate["emissions_kg"]
        assert booking["distance_km"] == estimate["distance_km"]

    async def test_booking_shows_in_summary(self, client):
        before = (await client.get("/api/emissions/summary")).json()["data"]
        assert before["total_bookings"] == 0

        booking = (await client.post("/api/flights/book", json=_booking_payload())).json()
        after = (await client.get("/api/emissions/summary")).json()["data"]
        assert after["total_bookings"] == 1
        assert after["total_emissions"] == booking["emissions_kg"]

    async def test_unknown_flight(self, client):
        resp = await client.post("/api/flights/book", json=_booking_payload(flight_id="FL999"))
        assert resp.status_code == 404

    async def test_too_many_passengers_for_seats(self, client, test_app):
        provider = test_app.state.flight_provider
        provider._flights["FL003"] = provider.get_flight("FL003").model_copy(
            update={"seats_available": 1}
        )
        resp = await client.post("/api/flights/book", json=_booking_payload())
        assert resp.status_code == 422
        assert resp.json()["detail"]["seats_available"] == 1

    async def test_passenger_mismatch(self, client):
        resp = await client.post("/api/flights/book", json=_booking_payload(passengers=3))
        assert resp.status_code == 422

    async def test_bad_email(self, client):
        resp = await client.post(
            "/api/flights/book", json=_booking_payload(contact_email="nobody")
        )
        assert resp.status_code == 422
