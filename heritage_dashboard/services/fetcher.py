"""
fetcher.py — Retrieve the three catalog collections for one dashboard cycle.

All three calls run in parallel via asyncio.gather and the cycle waits for
every one of them. There is no partial mode: if any call fails, the whole
fetch fails with FetchFailure and no collection is handed downstream.

Payload shapes vary between catalog deployments, so extract_collection()
unwraps the expected envelope defensively and falls back to an empty list
instead of raising when a path is missing.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from heritage_dashboard.core.config import Settings, settings
from heritage_dashboard.services.catalog_client import CatalogSource

logger = logging.getLogger(__name__)


class FetchFailure(Exception):
    """One or more catalog retrievals failed; the cycle cannot be built."""


@dataclass
class CatalogCollections:
    events: list[Any] = field(default_factory=list)
    provinces: list[Any] = field(default_factory=list)
    cultures: list[Any] = field(default_factory=list)


def extract_collection(payload: Any, key: str) -> list[Any]:
    """
    Unwrap a catalog response into its list of records.

    Accepted shapes (first match wins):
      {key: {"data": [...]}}
      {"data": {key: {"data": [...]}}}
      {"data": [...]}
      [...]
    Anything else → [].
    """
    if isinstance(payload, list):
        return list(payload)
    if not isinstance(payload, dict):
        return []

    candidates = [payload.get(key)]
    inner = payload.get("data")
    if isinstance(inner, dict):
        candidates.append(inner.get(key))
    for candidate in candidates:
        if isinstance(candidate, dict) and isinstance(candidate.get("data"), list):
            return list(candidate["data"])

    if isinstance(inner, list):
        return list(inner)
    return []


async def fetch_all(source: CatalogSource, config: Settings = settings) -> CatalogCollections:
    """
    Fetch events, provinces and cultures concurrently.

    Raises FetchFailure (chained to the first underlying error) if any of
    the three retrievals fails.
    """
    names = ("events", "provinces", "cultures")
    results = await asyncio.gather(
        source.get_events(),
        source.get_provinces(),
        source.get_cultures(),
        return_exceptions=True,
    )

    failures = [(n, r) for n, r in zip(names, results) if isinstance(r, BaseException)]
    for name, exc in failures:
        logger.warning("Catalog retrieval failed for %s: %r", name, exc)
    if failures:
        failed = ", ".join(n for n, _ in failures)
        raise FetchFailure(f"Failed to load dashboard data ({failed})") from failures[0][1]

    events_raw, provinces_raw, cultures_raw = results
    collections = CatalogCollections(
        events=extract_collection(events_raw, config.events_key),
        provinces=extract_collection(provinces_raw, config.provinces_key),
        cultures=extract_collection(cultures_raw, config.cultures_key),
    )
    logger.info(
        "Fetched catalog: events=%d provinces=%d cultures=%d",
        len(collections.events),
        len(collections.provinces),
        len(collections.cultures),
    )
    return collections
