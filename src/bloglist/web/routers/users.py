from fastapi import APIRouter
from pydantic import BaseModel, Field

from bloglist.core.modules.user.models import UserView
from bloglist.web.deps import AppDep
from bloglist.web.openapi import ErrorResponse

router = APIRouter(tags=["users"])


class CreateUserRequest(BaseModel):
    """Request to register a new user.

    Fields are loosely typed here so that missing values reach the registration
    rules and get their specific error messages.
    """

    username: str | None = Field(None, description="Unique username, at least 3 characters")
    name: str | None = Field(None, description="Display name")
    password: str | None = Field(None, description="Password, at least 3 characters")


@router.get(
    "/users",
    summary="List all users",
    description="Get all users with a summary of the blogs each one created.",
    operation_id="listUsers",
    responses={200: {"description": "List of all users"}},
)
async def list_users(app: AppDep) -> list[UserView]:
    return await app.get_all_users()


@router.post(
    "/users",
    summary="Register user",
    description="Create a new user account. The password is stored only as a bcrypt hash.",
    operation_id="createUser",
    responses={
        201: {"description": "User created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid password or username"},
    },
    status_code=201,
)
async def create_user(create_data: CreateUserRequest, app: AppDep) -> UserView:
    return await app.create_user(create_data.username, create_data.name, create_data.password)
