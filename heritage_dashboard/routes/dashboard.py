"""
dashboard.py — Landing dashboard routes.

Routes:
  GET  /api/v1/dashboard           — current state (runs the first cycle if idle)
  POST /api/v1/dashboard/refresh   — start a new cycle (or join the running one)
  POST /api/v1/dashboard/navigate  — resolve a click into a navigation target

HOW THE DATA FLOWS
──────────────────
1. The front-end calls GET /api/v1/dashboard when the page mounts. If no
   cycle has run yet, the controller runs one before answering.
2. The response is a DashboardState: status + snapshot (when ready) or an
   error message (when the catalog could not be loaded). A failed cycle is
   still HTTP 200: the error lives in the state, not in the transport.
3. The "retry" button calls POST /refresh.
4. Clicks on the featured banner, the total cards and the slice cards go
   through POST /navigate; the front-end routes to the returned `path`.

TESTING
───────
  pytest tests/test_dashboard_routes.py -v

  curl http://localhost:8000/api/v1/dashboard
  curl -X POST http://localhost:8000/api/v1/dashboard/refresh
  curl -X POST http://localhost:8000/api/v1/dashboard/navigate \\
       -H 'Content-Type: application/json' -d '{"section": "featured"}'
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from heritage_dashboard.core.config import settings
from heritage_dashboard.core.rate_limit import limiter
from heritage_dashboard.models.dashboard import (
    DashboardState,
    DashboardStatus,
    NavigationRequest,
    NavigationTarget,
)
from heritage_dashboard.services.dashboard import DashboardController
from heritage_dashboard.services.navigation import CATEGORY_SECTIONS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


def get_controller(request: Request) -> DashboardController:
    """FastAPI dependency — the controller created in the app lifespan."""
    controller = getattr(request.app.state, "dashboard", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Dashboard unavailable")
    return controller


@router.get("", response_model=DashboardState)
async def get_dashboard(controller: DashboardController = Depends(get_controller)):
    """Return the current dashboard state, loading it first on first visit."""
    if controller.status == DashboardStatus.IDLE:
        return await controller.refresh()
    return controller.state


@router.post("/refresh", response_model=DashboardState)
@limiter.limit(settings.refresh_rate_limit)
async def refresh_dashboard(
    request: Request,
    controller: DashboardController = Depends(get_controller),
):
    """Run a new fetch cycle. Concurrent calls share the in-flight cycle."""
    return await controller.refresh()


@router.post("/navigate", response_model=NavigationTarget)
async def navigate(
    payload: NavigationRequest,
    controller: DashboardController = Depends(get_controller),
):
    """Resolve a dashboard selection into a navigation target."""
    if payload.section not in CATEGORY_SECTIONS and controller.state.snapshot is None:
        raise HTTPException(status_code=409, detail="Dashboard is not ready")

    target = controller.navigate(payload)
    if target is None:
        raise HTTPException(status_code=404, detail=f"Nothing to open in '{payload.section}'")
    return target
