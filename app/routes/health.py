"""Health, readiness and liveness probes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.models import HealthResponse

router = APIRouter(prefix="/api/health")


def _probe(request: Request, status: str, with_version: bool = False) -> HealthResponse:
    settings = request.app.state.settings
    return HealthResponse(
        status=status,
        service=settings.service_name,
        timestamp=datetime.now(timezone.utc),
        version=settings.service_version if with_version else None,
    )


@router.get("", response_model=HealthResponse, response_model_exclude_none=True)
async def health(request: Request) -> HealthResponse:
    return _probe(request, "UP", with_version=True)


@router.get("/ready", response_model=HealthResponse, response_model_exclude_none=True)
async def ready(request: Request) -> HealthResponse:
    return _probe(request, "READY")


@router.get("/live", response_model=HealthResponse, response_model_exclude_none=True)
async def live(request: Request) -> HealthResponse:
    return _probe(request, "ALIVE")
