"""Operational endpoints."""

from fastapi import APIRouter

from app.core.config import settings
from app.schemas.health import ApiInfoResponse, HealthResponse

router: APIRouter = APIRouter()


@router.get("/healthz", response_model=HealthResponse, summary="Liveness probe")
def healthz() -> HealthResponse:
    return HealthResponse(status="ok", service=settings.app_name)


@router.get("/api", response_model=ApiInfoResponse, summary="API metadata")
def api_root() -> ApiInfoResponse:
    """Describe the running API and where its docs live."""
    return ApiInfoResponse(name=settings.app_name, version=settings.app_version, docs="/docs")
