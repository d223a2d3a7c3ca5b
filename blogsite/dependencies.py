from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from blogsite.database import get_db
from blogsite.pagination import PageRequest
from blogsite.services.blog_service import BlogService
from blogsite.store import SqlAlchemyPostStore


class BlogPageParams:
    """
    Reusable FastAPI dependency that parses the paging query parameters
    of the blog listing routes.

    Usage in a router::

        @router.get("/blog")
        async def list_posts(params: BlogPageParams = Depends()):
            page_request = params.to_page_request()

    Attributes
    ----------
    page:
        1-based page number (minimum 1), as shown to readers.
    page_size:
        Posts per page.  ``None`` means ``settings.POSTS_PAGE_SIZE``; the
        value is clamped to ``settings.MAX_PAGE_SIZE`` by ``PageRequest``.
    """

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number (1-based)."),
        page_size: int | None = Query(
            None,
            ge=1,
            le=100,
            description="Number of posts returned per page (max 100).",
        ),
    ) -> None:
        self.page = page
        self.page_size = page_size

    def to_page_request(self) -> PageRequest:
        """Convert to the 0-based ``PageRequest`` the service expects."""
        return PageRequest.for_blog_page(self.page, self.page_size)


def get_blog_service(db: AsyncSession = Depends(get_db)) -> BlogService:
    """Build a ``BlogService`` over the request-scoped session."""
    return BlogService(SqlAlchemyPostStore(db))
