"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from typing import Optional

from app.core.exceptions import UnauthorizedError
from app.core.security import decode_token
from app.schemas.user import TokenUser

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>); anonymous callers allowed
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[TokenUser]:
    """
    Extract the caller from the JWT in the Authorization header.

    Returns None when no token is sent or the token does not verify, so
    public endpoints keep working for anonymous callers. Endpoints that need
    a role check it with ensure_admin.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        logger.info("Ignoring invalid bearer token")
        return None

    username = payload.get("sub")
    if username is None:
        return None

    return TokenUser(username=username, is_admin=bool(payload.get("is_admin", False)))


async def ensure_admin(
    user: Optional[TokenUser] = Depends(get_current_user),
) -> TokenUser:
    """
    Require an authenticated admin.

    Runs before the endpoint touches storage; fails closed.

    Raises:
        UnauthorizedError: If the caller is anonymous or not an admin
    """
    if user is None or not user.is_admin:
        raise UnauthorizedError()

    return user
