"""
normalizer.py — Map raw catalog records onto the DisplayItem union.

The catalog does not tag its records. Events and cultural items are told
apart by shape: a record that carries a location key (`lokasi`, or
`location` in the older English shape) is an event, everything else is a
cultural item. The key only has to be present; `{"lokasi": null}` is still
an event.

The normaliser never raises. Missing or malformed fields fall back to
defaults so a single bad record shows up as an incomplete card rather than
breaking the whole dashboard.

USAGE
─────
    from heritage_dashboard.services.normalizer import normalize

    item = normalize({"id": 1, "nama": "Tari Saman", "tipe": "Tarian"})
    # item.kind     → "culture"
    # item.region   → "N/A"
"""

from __future__ import annotations

from typing import Any, Iterable

from heritage_dashboard.core.config import settings
from heritage_dashboard.models.dashboard import (
    NOT_AVAILABLE,
    CultureItem,
    DisplayItem,
    EventItem,
)

_LOCATION_KEYS = ("lokasi", "location")


def is_event_record(raw: Any) -> bool:
    """True when *raw* carries a location key (value may be null)."""
    if not isinstance(raw, dict):
        return False
    return any(key in raw for key in _LOCATION_KEYS)


def _field(raw: dict, *keys: str) -> Any:
    """Return the first non-None value among *keys*."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _ref_name(value: Any) -> str:
    """Resolve a nested {"nama": ...} reference (or bare string) to a label."""
    if isinstance(value, dict):
        value = _field(value, "nama", "name")
    name = _text(value)
    return name or NOT_AVAILABLE


def normalize(raw: Any, placeholder_image: str | None = None) -> DisplayItem:
    """Normalise one raw record into an EventItem or CultureItem."""
    if placeholder_image is None:
        placeholder_image = settings.placeholder_image
    record = raw if isinstance(raw, dict) else {}

    item_id = _text(record.get("id"))
    name = _text(_field(record, "nama", "name"))
    image = _text(_field(record, "gambar", "image")) or placeholder_image
    region = _ref_name(_field(record, "daerah", "region"))

    if is_event_record(record):
        return EventItem(
            id=item_id,
            name=name,
            image=image,
            date=_text(_field(record, "tanggal", "date")),
            location=_text(_field(record, *_LOCATION_KEYS)),
            region=region,
        )

    return CultureItem(
        id=item_id,
        name=name,
        image=image,
        type=_text(_field(record, "tipe", "type")),
        region=region,
        province=_ref_name(_field(record, "provinsi", "province")),
        date=_text(_field(record, "tanggal", "date")),
    )


def normalize_many(
    records: Iterable[Any], placeholder_image: str | None = None
) -> list[DisplayItem]:
    """Normalise a whole collection, preserving order."""
    return [normalize(raw, placeholder_image) for raw in records]
