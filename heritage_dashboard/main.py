"""
Heritage Dashboard API — Application entry point.

Bootstraps FastAPI, wires up middleware, registers route groups,
and manages the catalog client lifecycle.

Extension points:
  - Add new route groups with app.include_router() below
  - Add new middleware in the middleware block
  - Change startup behaviour in the lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from heritage_dashboard.core.config import settings
from heritage_dashboard.core.rate_limit import limiter
from heritage_dashboard.routes.dashboard import router as dashboard_router
from heritage_dashboard.routes.health import VERSION
from heritage_dashboard.routes.health import router as health_router
from heritage_dashboard.services.catalog_client import (
    HttpCatalogSource,
    SeedCatalogSource,
    build_http_client,
)
from heritage_dashboard.services.dashboard import DashboardController

# ─── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ─── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the catalog source + dashboard controller on startup and close
    the shared HTTP client on shutdown.

    The first fetch cycle is not run here: it is triggered by the first
    GET /api/v1/dashboard (the page mount).
    """
    logger.info("Starting Heritage Dashboard API (env: %s)", settings.environment)
    http_client = None
    if settings.catalog_mock_mode:
        logger.info("CATALOG_MOCK_MODE=true — serving the seed catalog")
        source = SeedCatalogSource()
    else:
        http_client = build_http_client()
        source = HttpCatalogSource(http_client)
        logger.info("Catalog API: %s", settings.catalog_api_url)

    app.state.dashboard = DashboardController(source)
    yield
    logger.info("Shutting down Heritage Dashboard API")
    if http_client is not None:
        await http_client.aclose()


# ─── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="Heritage Dashboard API",
    description=(
        "Landing dashboard for the cultural-heritage catalog: totals, the "
        "featured event, upcoming events, popular cultures and recommendations."
    ),
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
)


# ─── Rate limiting ─────────────────────────────────────────────────────────────
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ─── Middleware ─────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── Routes ────────────────────────────────────────────────────────────────────
app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(dashboard_router)


@app.get("/", tags=["root"])
async def root():
    """API root — basic metadata."""
    return {
        "name": "Heritage Dashboard API",
        "version": VERSION,
        "status": "running",
        "environment": settings.environment,
        "docs": "/docs",
    }
