"""
dashboard.py — Dashboard state controller.

Owns the lifecycle of the landing dashboard as an explicit state machine:

    idle ──refresh──▶ loading ──▶ ready
                         │
                         └──────▶ error

Every refresh re-enters `loading`; `ready` and `error` are per-cycle, so a
later refresh is always accepted. Entering `loading` drops the previous
snapshot; the controller never falls back to stale data.

Single flight
─────────────
Only one cycle runs at a time. A refresh() that arrives while a cycle is in
flight does not start another one; it awaits the running cycle and gets the
same resulting state. This keeps two cycles from racing to publish.

Errors
──────
FetchFailure is caught here, at the cycle boundary, and turned into the
`error` state. Nothing raised by the pipeline escapes refresh().
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Optional

from heritage_dashboard.core.config import Settings, settings
from heritage_dashboard.models.dashboard import (
    DashboardState,
    DashboardStatus,
    NavigationRequest,
    NavigationTarget,
)
from heritage_dashboard.services.catalog_client import CatalogSource
from heritage_dashboard.services.derivation import derive
from heritage_dashboard.services.fetcher import FetchFailure, fetch_all
from heritage_dashboard.services.navigation import resolve_navigation
from heritage_dashboard.services.normalizer import normalize_many

logger = logging.getLogger(__name__)


class DashboardController:
    """
    Runs fetch → normalise → derive cycles and publishes the result.

    The data-access collaborator and the random source are injected so
    tests can drive the controller without a live catalog API.
    """

    def __init__(
        self,
        source: CatalogSource,
        *,
        config: Settings = settings,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.source = source
        self.config = config
        self.rng = rng
        self._state = DashboardState()
        self._inflight: Optional[asyncio.Task[DashboardState]] = None

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def status(self) -> DashboardStatus:
        return self._state.status

    @property
    def is_loading(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def refresh(self) -> DashboardState:
        """Run a fetch cycle, or join the one already in flight."""
        if self.is_loading:
            logger.info("Dashboard refresh requested while loading, joining in-flight cycle")
            return await asyncio.shield(self._inflight)

        self._state = DashboardState(status=DashboardStatus.LOADING)
        self._inflight = asyncio.create_task(self._run_cycle())
        return await asyncio.shield(self._inflight)

    async def _run_cycle(self) -> DashboardState:
        logger.info("Dashboard cycle started")
        try:
            collections = await fetch_all(self.source, self.config)
            placeholder = self.config.placeholder_image
            snapshot = derive(
                normalize_many(collections.events, placeholder),
                normalize_many(collections.cultures, placeholder),
                total_provinces=len(collections.provinces),
                rng=self.rng,
                limit=self.config.slice_limit,
            )
        except FetchFailure as exc:
            logger.error("Dashboard cycle failed: %s", exc)
            self._state = DashboardState(status=DashboardStatus.ERROR, error=str(exc))
        except Exception as exc:
            logger.exception("Dashboard cycle crashed while deriving the snapshot")
            self._state = DashboardState(
                status=DashboardStatus.ERROR,
                error=f"Failed to build dashboard: {exc}",
            )
        else:
            logger.info(
                "Dashboard cycle ready: events=%d provinces=%d cultures=%d",
                snapshot.total_events,
                snapshot.total_provinces,
                snapshot.total_cultures,
            )
            self._state = DashboardState(status=DashboardStatus.READY, snapshot=snapshot)
        return self._state

    def navigate(self, request: NavigationRequest) -> Optional[NavigationTarget]:
        """Resolve a dashboard selection against the current snapshot."""
        return resolve_navigation(self._state.snapshot, request)
