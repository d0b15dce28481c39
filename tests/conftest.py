"""
pytest configuration and shared fixtures for the Heritage Dashboard tests.

Key concern: tests must not require a live catalog API. We achieve this by:
  1. Forcing CATALOG_MOCK_MODE=true before the app is imported.
  2. Driving the controller with FakeCatalog, an in-memory CatalogSource
     whose payloads, failures and latency are set per test.
  3. Overriding the get_controller dependency so routes use the test's
     controller (httpx's ASGITransport does not run the app lifespan).
"""

import asyncio
import os
import random

import pytest
from httpx import ASGITransport, AsyncClient

# Set env vars BEFORE importing the app so Settings picks them up correctly
os.environ.setdefault("CATALOG_MOCK_MODE", "true")
os.environ.setdefault("ENVIRONMENT", "test")


class FakeCatalog:
    """
    In-memory CatalogSource.

    Collections are wrapped in the catalog envelope ({"event": {"data": [...]}})
    unless envelope=False. Any collection named in `fail` raises RuntimeError.
    `delay` (seconds) is awaited inside every call so tests can observe
    overlapping requests.
    """

    def __init__(
        self,
        events=None,
        provinces=None,
        cultures=None,
        *,
        fail=(),
        delay=0.0,
        envelope=True,
    ):
        self.events = list(events or [])
        self.provinces = list(provinces or [])
        self.cultures = list(cultures or [])
        self.fail = set(fail)
        self.delay = delay
        self.envelope = envelope
        self.calls = {"events": 0, "provinces": 0, "cultures": 0}
        self.in_flight = 0
        self.max_in_flight = 0

    async def _serve(self, name, key, records):
        self.calls[name] += 1
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if name in self.fail:
                raise RuntimeError(f"{name} endpoint unavailable")
            return {key: {"data": list(records)}} if self.envelope else list(records)
        finally:
            self.in_flight -= 1

    async def get_events(self):
        return await self._serve("events", "event", self.events)

    async def get_provinces(self):
        return await self._serve("provinces", "provinsi", self.provinces)

    async def get_cultures(self):
        return await self._serve("cultures", "budaya", self.cultures)


def event_record(id, date, **extra):
    record = {
        "id": id,
        "nama": f"Event {id}",
        "gambar": f"/img/event-{id}.jpg",
        "tanggal": date,
        "lokasi": f"Kota {id}",
        "daerah": {"nama": f"Daerah {id}"},
    }
    record.update(extra)
    return record


def culture_record(id, **extra):
    record = {
        "id": id,
        "nama": f"Budaya {id}",
        "gambar": f"/img/budaya-{id}.jpg",
        "tipe": "Tarian",
        "daerah": {"nama": f"Daerah {id}"},
        "provinsi": {"nama": f"Provinsi {id}"},
    }
    record.update(extra)
    return record


@pytest.fixture()
def fake_catalog_cls():
    return FakeCatalog


@pytest.fixture()
def make_event():
    return event_record


@pytest.fixture()
def make_culture():
    return culture_record


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def catalog():
    """A healthy catalog: 5 events, 3 provinces, 6 cultures."""
    return FakeCatalog(
        events=[
            event_record(1, "2024-05-01"),
            event_record(2, "2024-01-10"),
            event_record(3, "2024-03-20"),
            event_record(4, "2024-12-31"),
            event_record(5, "2024-02-14"),
        ],
        provinces=[{"id": i, "nama": f"Provinsi {i}"} for i in range(1, 4)],
        cultures=[culture_record(i) for i in range(1, 7)],
    )


@pytest.fixture()
def controller(catalog, rng):
    from heritage_dashboard.services.dashboard import DashboardController

    return DashboardController(catalog, rng=rng)


@pytest.fixture()
async def client(controller):
    """
    HTTPX async test client wired to the FastAPI app, with the dashboard
    controller replaced by the test's controller.

    The limiter's in-memory storage is reset so refresh calls from earlier
    tests don't count against the limit.
    """
    from heritage_dashboard.core.rate_limit import limiter
    from heritage_dashboard.main import app
    from heritage_dashboard.routes.dashboard import get_controller

    limiter.reset()
    app.dependency_overrides[get_controller] = lambda: controller
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
