"""Health check endpoints."""

from fastapi import APIRouter, Depends

from ddr_report.api.deps import get_app_settings
from ddr_report.core.config import Settings
from ddr_report.schemas import HealthResponse

router = APIRouter()


@router.get("/health", tags=["system"], response_model=HealthResponse)
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(status="ok", app=settings.app_name)
