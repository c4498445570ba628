"""
Authentication for FastAPI.

AuthMiddleware verifies the bearer JWT once per request and stores the
subject on request.state; get_current_user hands it to routes.

Config needed (from community_os.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
"""

from dataclasses import dataclass

import jwt
from fastapi import HTTPException, Request, status

from community_os.config.settings import Config


@dataclass
class AuthUser:
    user_id: str

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("AuthUser must have a user_id defined.")


class AuthenticationError(Exception):
    """Bearer token missing, invalid or without a subject."""


def authenticate_header(authorization: str) -> str:
    """Return the token subject (user id) for an Authorization header value."""
    if not authorization.startswith("Bearer "):
        raise AuthenticationError("Missing bearer token")
    token = authorization.split(" ", 1)[1].strip()

    try:
        claims = jwt.decode(
            token,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}")

    user_id = claims.get("sub")
    if not user_id:
        raise AuthenticationError("Missing required claims in token")
    return user_id


async def get_current_user(request: Request) -> AuthUser:
    """Authenticated user for the request. Raises HTTPException 401 when absent."""
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return AuthUser(user_id=user_id)
