"""
rate_limit.py — Global rate limiter instance.

Uses slowapi (a Starlette-compatible wrapper around the `limits` library).
Requests are keyed by client IP address.

Only the refresh endpoint is limited: every refresh fans out three catalog
API calls, so an unthrottled client could hammer the upstream catalog.

Usage in routes:
    from fastapi import Request
    from heritage_dashboard.core.rate_limit import limiter

    @router.post("/refresh")
    @limiter.limit(settings.refresh_rate_limit)
    async def refresh(request: Request):
        ...
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
