"""
navigation.py — Turn dashboard selections into navigation intents.

The dashboard never navigates by itself. When the user clicks the featured
banner, a category total or a card in one of the slices, the front-end asks
for a NavigationTarget and hands its `path` to its own router.

  featured                    → /events/<id>
  item in a slice             → /events/<id>  or  /cultures/<id>
  category total              → /user/events | /user/provinces | /user/cultures
"""

from __future__ import annotations

from typing import Optional

from heritage_dashboard.models.dashboard import (
    DashboardSnapshot,
    DisplayItem,
    NavigationRequest,
    NavigationTarget,
)

CATEGORY_SECTIONS = frozenset({"events", "provinces", "cultures"})
SLICE_SECTIONS = frozenset({"upcoming", "popular", "recommended"})

_KIND_DESTINATION = {"event": "events", "culture": "cultures"}


def item_target(
    item: DisplayItem, destination: Optional[str] = None
) -> Optional[NavigationTarget]:
    """Target for one item; None when the item has no id to open."""
    if not item.id:
        return None
    destination = destination or _KIND_DESTINATION[item.kind]
    return NavigationTarget(
        destination=destination,
        item_id=item.id,
        path=f"/{destination}/{item.id}",
    )


def category_target(category: str) -> NavigationTarget:
    return NavigationTarget(destination=category, path=f"/user/{category}")


def resolve_navigation(
    snapshot: Optional[DashboardSnapshot], request: NavigationRequest
) -> Optional[NavigationTarget]:
    """
    Resolve *request* against *snapshot*.

    Category totals resolve without a snapshot. Featured and slice items
    return None when there is no snapshot, no featured event, an item
    without an id, or the index is out of range. The featured banner is
    picked from the events feed, so it always opens the events page.
    """
    if request.section in CATEGORY_SECTIONS:
        return category_target(request.section)

    if snapshot is None:
        return None

    if request.section == "featured":
        return item_target(snapshot.featured, "events") if snapshot.featured else None

    items = getattr(snapshot, request.section)
    if request.index is None or request.index >= len(items):
        return None
    return item_target(items[request.index])
