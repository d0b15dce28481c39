"""
dashboard.py — Pydantic models for the landing dashboard.

DisplayItem
───────────
Every raw catalog record is normalised into one of two frozen variants,
discriminated by `kind`:

  EventItem    kind="event"    id, name, image, date, location, region
  CultureItem  kind="culture"  id, name, image, type, region, province, date

Downstream code (derivation, navigation, routes) only ever switches on
`kind`; it never looks at the raw record again.

DashboardSnapshot
─────────────────
The immutable result of one fetch cycle. A new snapshot is built on every
cycle and replaces the previous one wholesale.

Slices hold DisplayItem rather than a fixed variant: discrimination is per
record, so a location-less record in the events feed still renders as a
culture card. It keeps its `date`, so it is still ordered by it.

DashboardState
──────────────
What the presentation layer reads: the lifecycle status plus the current
snapshot (only when status == "ready") or an error message (only when
status == "error").
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Shown when a record has no region / province reference.
NOT_AVAILABLE = "N/A"


class EventItem(BaseModel):
    """A normalised catalog event."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["event"] = "event"
    id: str
    name: str
    image: str
    date: str                    # raw ISO string as sent by the catalog
    location: str
    region: str = NOT_AVAILABLE


class CultureItem(BaseModel):
    """A normalised cultural item (dance, cuisine, ceremony, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["culture"] = "culture"
    id: str
    name: str
    image: str
    type: str = ""
    region: str = NOT_AVAILABLE
    province: str = NOT_AVAILABLE
    date: str = ""               # only set when the source record carries one


DisplayItem = Annotated[Union[EventItem, CultureItem], Field(discriminator="kind")]


class DashboardStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class DashboardSnapshot(BaseModel):
    """Published result of a single fetch cycle."""

    model_config = ConfigDict(frozen=True)

    total_events: int
    total_provinces: int
    total_cultures: int
    featured: Optional[DisplayItem] = None
    upcoming: tuple[DisplayItem, ...] = ()
    popular: tuple[DisplayItem, ...] = ()
    recommended: tuple[DisplayItem, ...] = ()
    generated_at: datetime


class DashboardState(BaseModel):
    """Read contract for the presentation layer."""

    model_config = ConfigDict(frozen=True)

    status: DashboardStatus = DashboardStatus.IDLE
    snapshot: Optional[DashboardSnapshot] = None
    error: Optional[str] = None


# ── Navigation ────────────────────────────────────────────────────────────────

NavigationSection = Literal[
    "featured",
    "events",
    "provinces",
    "cultures",
    "upcoming",
    "popular",
    "recommended",
]


class NavigationRequest(BaseModel):
    """
    A user selection on the dashboard.

      {"section": "featured"}                    — the featured event banner
      {"section": "events"}                      — a category total card
      {"section": "popular", "index": 2}         — the third card in a slice
    """

    section: NavigationSection
    index: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _index_required_for_slices(self) -> "NavigationRequest":
        if self.section in ("upcoming", "popular", "recommended") and self.index is None:
            raise ValueError(f"index is required when section is '{self.section}'")
        return self


class NavigationTarget(BaseModel):
    """Opaque navigation intent handed back to the front-end router."""

    model_config = ConfigDict(frozen=True)

    destination: Literal["events", "provinces", "cultures"]
    item_id: Optional[str] = None
    path: str
