"""Signed session tokens (PyJWT)."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from gram.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    handle: str
    exp: datetime


class JWTError(Exception):
    """The token is missing claims, badly signed or expired."""

    pass


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Sign a session token valid for settings.jwt_expiry_days.

    The auth provider mints these in production; local tooling and tests
    use this function to sign in as a user.
    """
    claims = {
        "user_id": user_id,
        "handle": handle,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of token and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token is missing claims") from e
