"""
derivation.py — Build a DashboardSnapshot from normalised collections.

Derived views
─────────────
  featured     earliest-dated event (None when there are no events)
  upcoming     first `limit` events in chronological order
  popular      random sample of `limit` cultural items
  recommended  random sample of `limit` items from events + cultures mixed
  totals       full collection sizes, never the slice sizes

"Popular" and "recommended" are uniform random samples, not a ranking.
Sampling uses random.Random.shuffle (Fisher–Yates) on a copy, so every
permutation is equally likely and the input lists are never mutated.

Chronological ordering is a stable sort on the parsed date. Events whose
date cannot be parsed keep their relative order and go after every dated
event.

USAGE
─────
    snapshot = derive(events, cultures, total_provinces=34, rng=random.Random(7))
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Optional, Sequence, TypeVar

from heritage_dashboard.models.dashboard import DashboardSnapshot, DisplayItem

T = TypeVar("T")

DEFAULT_SLICE_LIMIT = 4


def parse_event_date(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 date/datetime; naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _chronological_key(item: DisplayItem) -> tuple[int, datetime]:
    # Items without a usable date sort after every dated one.
    parsed = parse_event_date(getattr(item, "date", ""))
    if parsed is None:
        return (1, datetime.min.replace(tzinfo=timezone.utc))
    return (0, parsed)


def sort_chronologically(events: Sequence[DisplayItem]) -> list[DisplayItem]:
    """Return a new list of *events* sorted ascending by date (stable)."""
    return sorted(events, key=_chronological_key)


def sample(items: Sequence[T], limit: int, rng: Optional[random.Random] = None) -> list[T]:
    """Uniformly shuffle a copy of *items* and keep the first *limit*."""
    pool = list(items)
    (rng or random).shuffle(pool)
    return pool[:limit]


def derive(
    events: Sequence[DisplayItem],
    cultures: Sequence[DisplayItem],
    *,
    total_provinces: int = 0,
    rng: Optional[random.Random] = None,
    limit: int = DEFAULT_SLICE_LIMIT,
) -> DashboardSnapshot:
    """Compute every dashboard field from the normalised collections."""
    ordered = sort_chronologically(events)
    mixed: list[DisplayItem] = [*events, *cultures]

    return DashboardSnapshot(
        total_events=len(events),
        total_provinces=total_provinces,
        total_cultures=len(cultures),
        featured=ordered[0] if ordered else None,
        upcoming=tuple(ordered[:limit]),
        popular=tuple(sample(cultures, limit, rng)),
        recommended=tuple(sample(mixed, limit, rng)),
        generated_at=datetime.now(timezone.utc),
    )
