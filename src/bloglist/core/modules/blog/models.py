from uuid import UUID

from pydantic import BaseModel, Field

from bloglist.core.db import MongoModel
from bloglist.core.modules.user.models import UserSummary


class Blog(MongoModel):
    """Blog post domain model. Indexed on user_id."""

    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user_id: UUID | None = None  # Owner, set once at creation


class BlogView(BaseModel):
    """Blog post (API representation) with its owner populated."""

    id: UUID = Field(..., description="Blog ID")
    title: str = Field(..., description="Blog title")
    author: str | None = Field(None, description="Blog author")
    url: str = Field(..., description="Blog URL")
    likes: int = Field(..., description="Number of likes")
    user: UserSummary | None = Field(None, description="Owner of the blog, null for ownerless blogs")

    @classmethod
    def from_domain(cls, blog: Blog, owner: UserSummary | None) -> "BlogView":
        """Create view model from domain model."""
        return cls(id=blog.id, title=blog.title, author=blog.author, url=blog.url, likes=blog.likes, user=owner)
