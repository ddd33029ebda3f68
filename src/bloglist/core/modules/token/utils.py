from datetime import timedelta
from typing import Any

import jwt

from bloglist.core.modules.token.models import AuthToken, TokenClaims
from bloglist.errors import AuthenticationError
from bloglist.utils import now


def encode_token(claims: TokenClaims, secret: str, algorithm: str, expires_in: timedelta) -> AuthToken:
    """Sign the claims together with issued-at and expiry timestamps."""
    issued_at = now()
    payload: dict[str, Any] = {
        "username": claims.username,
        "id": str(claims.id),
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return AuthToken(jwt.encode(payload, secret, algorithm=algorithm))


def decode_token(token: str, secret: str, algorithm: str) -> TokenClaims:
    """Verify signature and expiry, return the embedded identity.

    Raises:
        AuthenticationError: If the token is malformed, tampered with, expired or lacks identity claims
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm], options={"require": ["exp", "iat"]})
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("token expired") from None
    except jwt.PyJWTError:
        raise AuthenticationError from None

    try:
        return TokenClaims(id=payload["id"], username=payload["username"])
    except (KeyError, ValueError):
        raise AuthenticationError from None
