from uuid import UUID

from pydantic import BaseModel, Field

from bloglist.core.db import MongoModel


class User(MongoModel):
    """User domain model with credentials and owned blog references."""

    username: str
    name: str | None = None
    password_hash: str  # bcrypt hash
    blogs: list[UUID] = []  # Ids of owned blogs, in creation order


class UserSummary(BaseModel):
    """Owner fields embedded into blog representations."""

    id: UUID = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    name: str | None = Field(None, description="Display name")

    @classmethod
    def from_domain(cls, user: User) -> "UserSummary":
        return cls(id=user.id, username=user.username, name=user.name)


class BlogSummary(BaseModel):
    """Blog fields embedded into user representations."""

    id: UUID = Field(..., description="Blog ID")
    title: str = Field(..., description="Blog title")
    author: str | None = Field(None, description="Blog author")
    url: str = Field(..., description="Blog URL")
    likes: int = Field(..., description="Number of likes")


class UserView(BaseModel):
    """User account information (API representation), never exposes the password hash."""

    id: UUID = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    name: str | None = Field(None, description="Display name")
    blogs: list[BlogSummary] = Field(default_factory=list, description="Blogs owned by the user")

    @classmethod
    def from_domain(cls, user: User, blogs: list[BlogSummary] | None = None) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, username=user.username, name=user.name, blogs=blogs or [])
