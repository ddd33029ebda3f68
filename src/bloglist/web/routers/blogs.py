from fastapi import APIRouter
from pydantic import BaseModel, Field

from bloglist.core.db import parse_id
from bloglist.core.modules.blog.models import BlogView
from bloglist.web.deps import AppDep, AuthTokenDep, OptionalAuthTokenDep
from bloglist.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["blogs"])


class CreateBlogRequest(BaseModel):
    """Request to create a new blog."""

    title: str = Field(..., min_length=1, description="Blog title")
    author: str | None = Field(None, description="Blog author")
    url: str = Field(..., min_length=1, description="Blog URL")
    likes: int | None = Field(None, ge=0, description="Initial number of likes, defaults to 0")


class UpdateBlogRequest(BaseModel):
    """Request to update blog fields (partial update)."""

    title: str | None = Field(None, min_length=1, description="New title (owner only)")
    author: str | None = Field(None, description="New author (owner only)")
    url: str | None = Field(None, min_length=1, description="New URL (owner only)")
    likes: int | None = Field(None, ge=0, description="New number of likes")

    model_config = {"json_schema_extra": {"examples": [{"likes": 5}]}}


@router.get(
    "/blogs",
    summary="List all blogs",
    description="Get all blogs with their creator populated.",
    operation_id="listBlogs",
    responses={200: {"description": "List of all blogs"}},
)
async def list_blogs(app: AppDep) -> list[BlogView]:
    return await app.get_all_blogs()


@router.get(
    "/blogs/{blog_id}",
    summary="Get blog",
    description="Get a single blog with its creator populated.",
    operation_id="getBlog",
    responses={
        200: {"description": "Blog details"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def get_blog(blog_id: str, app: AppDep) -> BlogView:
    return await app.get_blog(parse_id(blog_id, "Blog"))


@router.post(
    "/blogs",
    summary="Create blog",
    description="Create a new blog owned by the authenticated user.",
    operation_id="createBlog",
    status_code=201,
    responses={
        201: {"description": "Blog created successfully"},
        400: {"model": ErrorResponse, "description": "Missing title or url"},
        401: {"model": ErrorResponse, "description": "Token missing or invalid"},
    },
)
async def create_blog(request: CreateBlogRequest, app: AppDep, auth_token: AuthTokenDep) -> BlogView:
    return await app.create_blog(auth_token, request.title, request.url, request.author, request.likes)


@router.put(
    "/blogs/{blog_id}",
    summary="Update blog",
    description=(
        "Partially update a blog. Anyone may change `likes`; changing `title`, `author` or `url` "
        "requires the creator's token."
    ),
    operation_id="updateBlog",
    responses={
        200: {"description": "Blog updated successfully"},
        400: {"model": ErrorResponse, "description": "Invalid field data"},
        401: {"model": ErrorResponse, "description": "Token missing or invalid"},
        403: {"model": ErrorResponse, "description": "Not the creator of the blog"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def update_blog(
    blog_id: str, request: UpdateBlogRequest, app: AppDep, auth_token: OptionalAuthTokenDep
) -> BlogView:
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    return await app.update_blog(auth_token, parse_id(blog_id, "Blog"), changes)


@router.delete(
    "/blogs/{blog_id}",
    summary="Delete blog",
    description="Delete a blog. Only its creator may delete it.",
    operation_id="deleteBlog",
    status_code=204,
    responses={
        204: {"description": "Blog deleted successfully"},
        401: {"model": ErrorResponse, "description": "Token missing or invalid"},
        403: {"model": ErrorResponse, "description": "Not the creator of the blog"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def delete_blog(blog_id: str, app: AppDep, auth_token: AuthTokenDep) -> None:
    await app.delete_blog(auth_token, parse_id(blog_id, "Blog"))
