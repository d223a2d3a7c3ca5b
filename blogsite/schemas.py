from datetime import datetime

from pydantic import BaseModel

from blogsite.models import PostCategory
from blogsite.pagination import PaginationInfo


# --- Post ---

class PostBase(BaseModel):
    id: int
    title: str
    author: str
    category: PostCategory
    broadcast: bool
    created_at: datetime
    published_at: datetime | None = None


class PostSummary(PostBase):
    excerpt: str


class PostDetail(PostBase):
    content: str


class AdminPostSummary(PostSummary):
    draft: bool


class AdminPostDetail(PostDetail):
    draft: bool


# --- Listings ---

class PostListResponse(BaseModel):
    posts: list[PostSummary]
    pagination: PaginationInfo


class AdminPostListResponse(BaseModel):
    posts: list[AdminPostSummary]
    pagination: PaginationInfo
