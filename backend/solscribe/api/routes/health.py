"""Health Probes — plain-text greeting at / and a JSON liveness probe.

Invariants:
    - GET / always returns 200 text/plain if the process is up
    - GET /health always returns 200 JSON; there are no dependencies to check

Design Decisions:
    - Greeting text from settings: deployments can brand it without code changes
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from solscribe import __version__
from solscribe.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def greeting(settings: Settings = Depends(get_settings)):
    """Liveness check in plain text."""
    return settings.greeting


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": __version__,
    }
