from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bloglist.app import App
from bloglist.core.modules.token.models import AuthToken
from bloglist.errors import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_optional_auth_token(
    app: Annotated[App, Depends(get_app)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> AuthToken | None:
    """Get auth token from Authorization Bearer header. A present but invalid token is rejected."""
    if credentials is None:
        return None

    if credentials.scheme.lower() != "bearer":
        raise AuthenticationError

    # Only the signature and expiry are checked here; App methods load the user
    auth_token = AuthToken(credentials.credentials)
    app.verify_auth_token(auth_token)
    return auth_token


async def get_auth_token(auth_token: Annotated[AuthToken | None, Depends(get_optional_auth_token)]) -> AuthToken:
    """Get and validate auth token from Authorization Bearer header."""
    if auth_token is None:
        raise AuthenticationError
    return auth_token


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
OptionalAuthTokenDep = Annotated[AuthToken | None, Depends(get_optional_auth_token)]
