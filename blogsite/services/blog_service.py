"""
Blog service: read-side queries for blog posts.

Design notes
------------
- ``BlogService`` is constructed with a ``PostStore``; it never opens
  sessions or builds SQL itself.  Each method is a single awaited round
  trip to the store.
- Visibility is decided by *which* store query runs, never by filtering
  results afterwards: ``get_published_post`` calls
  ``find_published_by_id`` rather than checking ``post.draft``.
- Id lookups that miss raise ``NoSuchBlogPostError``.  Store errors are
  not caught and reach the caller unchanged.
- Nothing is cached or memoised here; caching of rendered payloads
  lives in the router layer.
"""
import logging

from blogsite.exceptions import NoSuchBlogPostError
from blogsite.models import Post, PostCategory
from blogsite.pagination import PageRequest, PaginationInfo
from blogsite.services.excerpt import extract_first_paragraph
from blogsite.store import PostStore

logger = logging.getLogger(__name__)


class BlogService:
    def __init__(self, store: PostStore) -> None:
        self._store = store

    # ------------------------------------------------------------------
    # Single posts
    # ------------------------------------------------------------------

    async def get_post(self, post_id: int) -> Post:
        """Return the post with *post_id*, drafts included."""
        logger.debug("Looking up post id=%s", post_id)
        post = await self._store.find_by_id(post_id)
        if post is None:
            logger.info("Post id=%s not found", post_id)
            raise NoSuchBlogPostError(post_id)
        return post

    async def get_published_post(self, post_id: int) -> Post:
        """Return the post with *post_id* only if it is not a draft."""
        logger.debug("Looking up published post id=%s", post_id)
        post = await self._store.find_published_by_id(post_id)
        if post is None:
            logger.info("Published post id=%s not found", post_id)
            raise NoSuchBlogPostError(post_id)
        return post

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    async def most_recent_posts(
        self,
        page_request: PageRequest,
        category: PostCategory | None = None,
    ) -> list[Post]:
        """
        Return one page of published posts, newest first, optionally
        restricted to *category*.
        """
        if category is None:
            page = await self._store.find_by_draft_false(page_request)
        else:
            page = await self._store.find_by_category_and_draft_false(category, page_request)
        return list(page.items)

    async def most_recent_broadcast_posts(self, page_request: PageRequest) -> list[Post]:
        page = await self._store.find_by_broadcast_and_draft_false(True, page_request)
        return list(page.items)

    async def all_posts(self, page_request: PageRequest) -> list[Post]:
        """Return one page of every post, drafts included (admin listing)."""
        page = await self._store.find_all(page_request)
        return list(page.items)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    async def pagination_info(self, page_request: PageRequest) -> PaginationInfo:
        """
        Build display pagination for *page_request*.

        The total comes from a fresh ``count()`` against the store, which
        counts every post regardless of draft state.
        """
        total = await self._store.count()
        return PaginationInfo.from_total(page_request, total)

    def extract_first_paragraph(self, text: str, max_length: int) -> str:
        return extract_first_paragraph(text, max_length)
