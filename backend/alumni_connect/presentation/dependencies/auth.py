"""
Authentication Dependency for FastAPI.

- Extracts and validates the JWT issued by the external auth provider
- The `sub` claim is the user id; this service never authenticates users itself
- Raises HTTPException 401 if unauthorized
"""

import jwt
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from alumni_connect.domain.exceptions import NotAuthenticatedError
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.config.settings import Config


@dataclass
class AuthUser:
    id: UserId


security = HTTPBearer(auto_error=False)


def decode_user(token: str) -> AuthUser:
    """
    Validate a bearer token and return the user it belongs to.

    Raises:
        NotAuthenticatedError if the token is invalid, expired, or has no subject
    """
    try:
        claims = jwt.decode(
            token,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise NotAuthenticatedError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise NotAuthenticatedError(f"Invalid token: {str(e)}") from e

    subject = claims.get("sub")
    if not subject or not str(subject).strip():
        raise NotAuthenticatedError("Missing required claims in token")
    return AuthUser(id=UserId(str(subject)))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return decode_user(credentials.credentials)
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
