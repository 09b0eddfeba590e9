"""Manual and scheduled trigger for a full provider fetch."""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from bridgeindex.api.deps import get_orchestrator, get_settings
from bridgeindex.api.schemas.admin import FetchTriggerResponse
from bridgeindex.config import Settings
from bridgeindex.ingestion.orchestrator import FetchOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def require_admin(
    x_admin_secret: Optional[str] = Header(None),
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """Authorize via ``x-admin-secret`` (manual) or ``Authorization: Bearer`` (scheduler). Returns the trigger source."""
    if not settings.admin_secret and not settings.cron_secret:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Admin secret not configured")

    if settings.admin_secret and x_admin_secret and secrets.compare_digest(x_admin_secret, settings.admin_secret):
        return "manual"
    if settings.cron_secret and authorization and secrets.compare_digest(authorization, f"Bearer {settings.cron_secret}"):
        return "cron"

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


@router.api_route("/fetch", methods=["GET", "POST"], response_model=FetchTriggerResponse)
async def trigger_fetch(
    triggered_by: str = Depends(require_admin),
    orchestrator: FetchOrchestrator = Depends(get_orchestrator),
) -> FetchTriggerResponse:
    logger.info("Fetch triggered (%s)", triggered_by)
    summary = await orchestrator.run_full_fetch()
    return FetchTriggerResponse(**summary.model_dump(), triggered_by=triggered_by)
