#!/usr/bin/env python3
"""
dashboard_snapshot.py — Run one dashboard cycle and print the result as JSON.

Handy for checking a catalog deployment without starting the API.

Usage (from the repo root):
    # Seed catalog (no network)
    python scripts/dashboard_snapshot.py

    # Real catalog API (reads CATALOG_API_URL / CATALOG_API_TOKEN from .env)
    python scripts/dashboard_snapshot.py --live

    # Reproducible popular/recommended picks
    python scripts/dashboard_snapshot.py --seed 42

Exit code is 0 when the cycle ends in "ready", 1 when it ends in "error".
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv
load_dotenv(ROOT / ".env")

from heritage_dashboard.core.config import settings
from heritage_dashboard.models.dashboard import DashboardStatus
from heritage_dashboard.services.catalog_client import (
    HttpCatalogSource,
    SeedCatalogSource,
    build_http_client,
)
from heritage_dashboard.services.dashboard import DashboardController


async def run(live: bool, seed: int | None) -> int:
    rng = random.Random(seed) if seed is not None else None

    if not live:
        controller = DashboardController(SeedCatalogSource(), rng=rng)
        state = await controller.refresh()
    else:
        print(f"Catalog API: {settings.catalog_api_url}", file=sys.stderr)
        async with build_http_client() as client:
            controller = DashboardController(HttpCatalogSource(client), rng=rng)
            state = await controller.refresh()

    print(state.model_dump_json(indent=2))
    return 0 if state.status == DashboardStatus.READY else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print a dashboard snapshot as JSON")
    parser.add_argument(
        "--live",
        action="store_true",
        help="Query the real catalog API instead of the seed catalog",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the popular/recommended random sampling",
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.live, args.seed)))
