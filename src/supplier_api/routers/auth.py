"""Authentication router."""

from fastapi import APIRouter, HTTPException, Request, status

from supplier_api.models.dto.auth import TokenVerifyRequest, TokenVerifyResponse
from supplier_api.security.auth import is_valid_token
from supplier_api.security.rate_limit import AUTH_VERIFY_LIMIT, limiter

router = APIRouter()


@router.post("/verify", response_model=TokenVerifyResponse)
@limiter.limit(AUTH_VERIFY_LIMIT)
async def verify_token(request: Request, body: TokenVerifyRequest) -> TokenVerifyResponse:
    """Check whether a token grants access to the API."""
    if not is_valid_token(body.token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    return TokenVerifyResponse(success=True, message="Token is valid")
