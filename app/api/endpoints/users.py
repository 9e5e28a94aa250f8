"""User endpoints."""

import logging

from fastapi import APIRouter

from app.schemas.user import UserRead
from app.services.user_service import list_users as list_all_users

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[UserRead], summary="List users")
def list_users() -> list[UserRead]:
    """Return the fixed user directory in id order."""
    users = [UserRead.model_validate(user) for user in list_all_users()]
    logger.debug("[USERS] Returning %s users", len(users))
    return users
