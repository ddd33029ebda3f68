from fastapi import APIRouter
from pydantic import BaseModel, Field

from bloglist.web.deps import AppDep
from bloglist.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    username: str = Field(..., description="Username for authentication")
    password: str = Field(..., description="Password for authentication")


class LoginResponse(BaseModel):
    """Authentication response."""

    token: str = Field(..., description="Bearer token for subsequent requests")
    username: str = Field(..., description="Username of the authenticated user")
    name: str | None = Field(None, description="Display name of the authenticated user")


@router.post(
    "/login",
    summary="Authenticate user",
    description="Authenticate with username and password to receive a signed bearer token.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    result = await app.login(login_data.username, login_data.password)
    return LoginResponse(token=result.token, username=result.username, name=result.name)
