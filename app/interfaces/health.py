"""
Liveness probe for the customer onboarding service.

Answers without touching the customer store or the zip code API, so a
store outage shows up as 503 on POST /customers, not as a failed probe.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.customers.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Reports that the service process is up, with its version.",
)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.version)
