import logging
from typing import Optional

from fastapi import Depends, Header

from videotube.api.dependencies import get_supabase_client
from videotube.domain.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def get_current_user(
    authorization: Optional[str] = Header(None),
    supabase=Depends(get_supabase_client),
):
    """
    Validates the Supabase JWT token and returns the user object.
    Expected format: Bearer <token>
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError("Unauthorized request")

    token = authorization.split(" ", 1)[1].strip()
    try:
        # res is a UserResponse object in recent versions
        res = supabase.auth.get_user(token)
    except Exception as e:
        logger.info("Token rejected by Supabase: %s: %s", type(e).__name__, e)
        raise UnauthorizedError("Invalid or expired token")

    if not res or not res.user:
        raise UnauthorizedError("Invalid or expired token")
    return res.user
