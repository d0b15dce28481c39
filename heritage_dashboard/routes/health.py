"""
Health check endpoint.

Used by:
  - Docker HEALTHCHECK instruction
  - Load balancers / orchestrators
  - Front-end to check API connectivity

Returns liveness plus the dashboard status so callers can distinguish
between "API down" and "API up but the catalog could not be loaded".
"""

import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel

from heritage_dashboard.core.config import settings

logger = logging.getLogger(__name__)
router = APIRouter()

VERSION = "0.1.0"


class HealthResponse(BaseModel):
    status: str  # Always "ok" if the API process is alive
    version: str
    dashboard: str  # idle | loading | ready | error
    catalog: str  # "seed" | "http"
    environment: str


@router.get("", response_model=HealthResponse, summary="API health check")
async def health_check(request: Request) -> HealthResponse:
    """
    Returns the liveness status of the API and the dashboard lifecycle.

    The API is considered healthy (HTTP 200) even when the last dashboard
    cycle failed. The catalog being down is reported, not raised.
    """
    controller = getattr(request.app.state, "dashboard", None)
    dashboard_status = controller.status.value if controller is not None else "idle"

    return HealthResponse(
        status="ok",
        version=VERSION,
        dashboard=dashboard_status,
        catalog="seed" if settings.catalog_mock_mode else "http",
        environment=settings.environment,
    )
