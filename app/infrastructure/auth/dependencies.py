"""FastAPI authentication dependencies (Bearer header or access_token cookie)."""
from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.infrastructure.auth.jwt_handler import verify_token

_security = HTTPBearer(auto_error=False)


def get_current_player(
    credentials: HTTPAuthorizationCredentials = Depends(_security),
    access_token: str | None = Cookie(default=None),
) -> dict:
    """Extract and validate the player's JWT.

    The Authorization header wins over the ``access_token`` cookie. Returns
    the decoded payload with ``sub`` (player id) plus the raw ``token``,
    which is forwarded to the Overworld backend. Raises 401 on missing or
    invalid tokens.
    """
    token = credentials.credentials if credentials else access_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = verify_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {**payload, "token": token}
