"""Schema exports."""

from app.schemas.health import ApiInfoResponse, HealthResponse
from app.schemas.user import UserRead

__all__ = [
    "ApiInfoResponse",
    "HealthResponse",
    "UserRead",
]
