"""Shared access token authentication.

Every client presents the same configured token, either as a bearer token
or as a ``token`` query parameter (used by inline document links).
"""

import hmac
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from supplier_api.config import get_settings

security = HTTPBearer(auto_error=False)


def is_valid_token(token: str | None) -> bool:
    """Compare a presented token with the configured one in constant time."""
    if not token:
        return False
    expected = get_settings().auth_token
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))


async def require_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token: Annotated[str | None, Query(max_length=512)] = None,
) -> None:
    """Require a valid access token.

    Args:
        credentials: Bearer credentials from the Authorization header
        token: Token from the query string

    Raises:
        HTTPException: 401 if neither carries a valid token
    """
    presented = credentials.credentials if credentials is not None else token
    if not is_valid_token(presented):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
