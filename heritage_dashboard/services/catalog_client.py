"""
catalog_client.py — Data-access collaborators for the cultural-heritage catalog.

Two implementations of the same CatalogSource interface:

  HttpCatalogSource  — async httpx calls against the real catalog API.
  SeedCatalogSource  — in-memory seed catalog for local dev and tests
                       (selected when CATALOG_MOCK_MODE=true, the default).

Both return the raw JSON payload exactly as the catalog sends it, e.g.

    {"event": {"data": [ {...}, {...} ]}}

Unwrapping the envelope is the fetcher's job (see fetcher.extract_collection).

Error policy: unlike the optional search adapters elsewhere, a catalog call
that fails must NOT be swallowed here. Any httpx error (network, timeout,
non-2xx) propagates so the fetcher can fail the whole cycle.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from heritage_dashboard.core.config import Settings, settings
from heritage_dashboard.models.catalog import (
    RawCultureRecord,
    RawEventRecord,
    RawProvinceRecord,
    RegionRef,
)

logger = logging.getLogger(__name__)


class CatalogSource(Protocol):
    """The three retrieval operations the dashboard depends on."""

    async def get_events(self) -> Any: ...

    async def get_provinces(self) -> Any: ...

    async def get_cultures(self) -> Any: ...


class HttpCatalogSource:
    """
    Thin async wrapper around the catalog REST API.

    The AsyncClient is owned by the caller (created once in the app lifespan
    and closed on shutdown) so connection pooling survives across cycles.
    """

    def __init__(self, client: httpx.AsyncClient, config: Settings = settings) -> None:
        self.client = client
        self.config = config

    async def _get(self, path: str) -> Any:
        logger.debug("GET %s%s", self.client.base_url, path)
        response = await self.client.get(path)
        response.raise_for_status()
        return response.json()

    async def get_events(self) -> Any:
        return await self._get(self.config.events_path)

    async def get_provinces(self) -> Any:
        return await self._get(self.config.provinces_path)

    async def get_cultures(self) -> Any:
        return await self._get(self.config.cultures_path)


def build_http_client(config: Settings = settings) -> httpx.AsyncClient:
    """Create the shared AsyncClient for the catalog API."""
    headers = {"Accept": "application/json"}
    if config.catalog_api_token:
        headers["Authorization"] = f"Bearer {config.catalog_api_token}"
    return httpx.AsyncClient(
        base_url=config.catalog_api_url,
        headers=headers,
        timeout=config.catalog_timeout_seconds,
    )


# ── Seed catalog ──────────────────────────────────────────────────────────────
#
# Representative placeholder records, in the same shape the catalog API
# returns. One culture deliberately lacks region/province references and one
# event lacks an image so the defaults are visible in local dev.

_SEED_EVENTS: list[RawEventRecord] = [
    RawEventRecord(id=1, nama="Festival Danau Toba",   gambar="/img/toba.jpg",     tanggal="2024-08-17", lokasi="Parapat",    daerah=RegionRef(id=11, nama="Simalungun")),
    RawEventRecord(id=2, nama="Bali Arts Festival",    gambar="/img/pkb.jpg",      tanggal="2024-06-15", lokasi="Denpasar",   daerah=RegionRef(id=21, nama="Denpasar")),
    RawEventRecord(id=3, nama="Jember Fashion Carnaval", gambar=None,              tanggal="2024-08-04", lokasi="Jember",     daerah=RegionRef(id=35, nama="Jember")),
    RawEventRecord(id=4, nama="Festival Tabuik",       gambar="/img/tabuik.jpg",   tanggal="2024-07-16", lokasi="Pariaman",   daerah=None),
    RawEventRecord(id=5, nama="Sekaten",               gambar="/img/sekaten.jpg",  tanggal="2024-09-08", lokasi="Yogyakarta", daerah=RegionRef(id=34, nama="Kota Yogyakarta")),
    RawEventRecord(id=6, nama="Pasola",                gambar="/img/pasola.jpg",   tanggal="2024-02-20", lokasi="Sumba Barat", daerah=RegionRef(id=53, nama="Sumba Barat")),
]

_SEED_PROVINCES: list[RawProvinceRecord] = [
    RawProvinceRecord(id=11, nama="Aceh"),
    RawProvinceRecord(id=12, nama="Sumatera Utara"),
    RawProvinceRecord(id=13, nama="Sumatera Barat"),
    RawProvinceRecord(id=34, nama="DI Yogyakarta"),
    RawProvinceRecord(id=35, nama="Jawa Timur"),
    RawProvinceRecord(id=51, nama="Bali"),
    RawProvinceRecord(id=53, nama="Nusa Tenggara Timur"),
]

_SEED_CULTURES: list[RawCultureRecord] = [
    RawCultureRecord(id=1, nama="Tari Saman",   gambar="/img/saman.jpg",  tipe="Tarian",  daerah=RegionRef(nama="Gayo Lues"),  provinsi=RegionRef(nama="Aceh")),
    RawCultureRecord(id=2, nama="Rendang",      gambar="/img/rendang.jpg", tipe="Kuliner", daerah=RegionRef(nama="Padang"),     provinsi=RegionRef(nama="Sumatera Barat")),
    RawCultureRecord(id=3, nama="Ngaben",       gambar="/img/ngaben.jpg", tipe="Upacara", daerah=RegionRef(nama="Gianyar"),    provinsi=RegionRef(nama="Bali")),
    RawCultureRecord(id=4, nama="Reog Ponorogo", gambar="/img/reog.jpg",  tipe="Tarian",  daerah=RegionRef(nama="Ponorogo"),   provinsi=RegionRef(nama="Jawa Timur")),
    RawCultureRecord(id=5, nama="Ulos",         gambar=None,              tipe="Kain",    daerah=None,                         provinsi=None),
]


class SeedCatalogSource:
    """CatalogSource backed by the in-memory seed records."""

    def __init__(self, config: Settings = settings) -> None:
        self.config = config

    @staticmethod
    def _envelope(key: str, records: list) -> dict:
        return {key: {"data": [r.model_dump(exclude_none=False) for r in records]}}

    async def get_events(self) -> Any:
        return self._envelope(self.config.events_key, _SEED_EVENTS)

    async def get_provinces(self) -> Any:
        return self._envelope(self.config.provinces_key, _SEED_PROVINCES)

    async def get_cultures(self) -> Any:
        return self._envelope(self.config.cultures_key, _SEED_CULTURES)
