"""
Post storage port and its SQLAlchemy implementation.

``BlogService`` only ever talks to a ``PostStore``.  Every visibility rule
is expressed here as a query predicate (``WHERE draft IS false``) rather
than by filtering rows after they are loaded, so a draft can never leak
through a published lookup.
"""
import logging
from abc import ABC, abstractmethod

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blogsite.models import Post, PostCategory
from blogsite.pagination import PageRequest, PageResult

logger = logging.getLogger(__name__)


class PostStore(ABC):
    @abstractmethod
    async def find_by_id(self, post_id: int) -> Post | None:
        pass

    @abstractmethod
    async def find_published_by_id(self, post_id: int) -> Post | None:
        pass

    @abstractmethod
    async def find_by_draft_false(self, page_request: PageRequest) -> PageResult[Post]:
        pass

    @abstractmethod
    async def find_by_category_and_draft_false(
        self, category: PostCategory, page_request: PageRequest
    ) -> PageResult[Post]:
        pass

    @abstractmethod
    async def find_by_broadcast_and_draft_false(
        self, broadcast: bool, page_request: PageRequest
    ) -> PageResult[Post]:
        pass

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> PageResult[Post]:
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored posts, drafts included."""


class SqlAlchemyPostStore(PostStore):
    """
    ``PostStore`` backed by an ``AsyncSession``.

    The session (and therefore the transaction) is owned by the caller,
    normally the ``get_db`` dependency.  Database errors are not caught
    here; they propagate to the service and on to the router unchanged.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Single-row lookups
    # ------------------------------------------------------------------

    async def find_by_id(self, post_id: int) -> Post | None:
        result = await self._session.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def find_published_by_id(self, post_id: int) -> Post | None:
        q = select(Post).where(Post.id == post_id, Post.draft.is_(False))
        result = await self._session.execute(q)
        return result.scalar_one_or_none()

    # ------------------------------------------------------------------
    # Paged listings
    # ------------------------------------------------------------------

    async def find_by_draft_false(self, page_request: PageRequest) -> PageResult[Post]:
        return await self._page(page_request, Post.draft.is_(False))

    async def find_by_category_and_draft_false(
        self, category: PostCategory, page_request: PageRequest
    ) -> PageResult[Post]:
        return await self._page(page_request, Post.category == category, Post.draft.is_(False))

    async def find_by_broadcast_and_draft_false(
        self, broadcast: bool, page_request: PageRequest
    ) -> PageResult[Post]:
        return await self._page(
            page_request, Post.broadcast.is_(broadcast), Post.draft.is_(False)
        )

    async def find_all(self, page_request: PageRequest) -> PageResult[Post]:
        return await self._page(page_request)

    async def count(self) -> int:
        return (await self._session.execute(select(func.count()).select_from(Post))).scalar_one()

    async def _page(self, page_request: PageRequest, *criteria) -> PageResult[Post]:
        """
        Issue the two statements behind every listing:

        1. COUNT of rows matching *criteria*.
        2. SELECT of one window, most recent first.
        """
        count_q = select(func.count()).select_from(Post).where(*criteria)
        total: int = (await self._session.execute(count_q)).scalar_one()

        posts_q = (
            select(Post)
            .where(*criteria)
            .order_by(desc(Post.created_at), desc(Post.id))
            .offset(page_request.offset)
            .limit(page_request.page_size)
        )
        result = await self._session.execute(posts_q)
        posts = list(result.scalars().all())
        logger.debug(
            "Loaded %d of %d post(s) for page=%d size=%d",
            len(posts), total, page_request.page_number, page_request.page_size,
        )
        return PageResult(items=posts, total=total)
