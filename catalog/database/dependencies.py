from typing import Optional
from fastapi import Depends

from fastapi.security import APIKeyHeader

from catalog.config import SECRET, TOKEN_TTL_MS
from catalog.exceptions import Unauthorized
from catalog.utils.tokens import REASONS, TokenIssuer, TokenStatus


authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

_token_issuer = TokenIssuer(SECRET, TOKEN_TTL_MS)


def get_token_issuer() -> TokenIssuer:
    return _token_issuer


def require_session(
    auth_header: Optional[str] = Depends(authorization_header),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> None:
    """Reject the request unless it carries a valid, unexpired bearer token."""
    status = issuer.validate(auth_header)
    if status is not TokenStatus.VALID:
        raise Unauthorized(REASONS[status])
