"""
BlogService tests against a mocked PostStore.

The store is an ``AsyncMock`` specced on ``PostStore``, so each test pins
down exactly which store query the service chose and that results pass
through untouched.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from blogsite.exceptions import NoSuchBlogPostError
from blogsite.models import Post, PostCategory
from blogsite.pagination import PageRequest, PageResult
from blogsite.services.blog_service import BlogService
from blogsite.store import PostStore

FIRST_TEN_POSTS = PageRequest.for_blog_page(1)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _post(post_id: int = 123, **overrides) -> Post:
    fields = {
        "id": post_id,
        "title": "Post title",
        "author": "Author",
        "category": PostCategory.ENGINEERING,
        "draft": False,
        "broadcast": False,
        "raw_content": "Body",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Post(**fields)


@pytest.fixture
def store() -> AsyncMock:
    return AsyncMock(spec=PostStore)


@pytest.fixture
def service(store: AsyncMock) -> BlogService:
    return BlogService(store)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_post_is_retrievable(service: BlogService, store: AsyncMock):
    post = _post()
    store.find_by_id.return_value = post

    assert await service.get_post(post.id) is post
    store.find_by_id.assert_awaited_once_with(post.id)


@pytest.mark.asyncio
async def test_published_post_is_retrievable(service: BlogService, store: AsyncMock):
    post = _post()
    store.find_published_by_id.return_value = post

    assert await service.get_published_post(post.id) is post
    store.find_published_by_id.assert_awaited_once_with(post.id)
    store.find_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_non_existent_post(service: BlogService, store: AsyncMock):
    store.find_by_id.return_value = None

    with pytest.raises(NoSuchBlogPostError) as exc_info:
        await service.get_post(999)
    assert exc_info.value.post_id == 999


@pytest.mark.asyncio
async def test_non_existent_published_post(service: BlogService, store: AsyncMock):
    store.find_published_by_id.return_value = None

    with pytest.raises(NoSuchBlogPostError):
        await service.get_published_post(999)


@pytest.mark.asyncio
async def test_draft_is_found_by_id_but_not_as_published(service: BlogService, store: AsyncMock):
    draft = _post(draft=True)
    store.find_by_id.return_value = draft
    # The published query excludes drafts, so the store reports a miss.
    store.find_published_by_id.return_value = None

    assert await service.get_post(draft.id) is draft
    with pytest.raises(NoSuchBlogPostError):
        await service.get_published_post(draft.id)


@pytest.mark.asyncio
async def test_store_failure_propagates_unchanged(service: BlogService, store: AsyncMock):
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
    store.find_by_id.side_effect = failure

    with pytest.raises(OperationalError) as exc_info:
        await service.get_post(1)
    assert exc_info.value is failure


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_posts(service: BlogService, store: AsyncMock):
    posts = [_post(1), _post(2)]
    store.find_by_draft_false.return_value = PageResult(items=posts, total=2)

    assert await service.most_recent_posts(FIRST_TEN_POSTS) == posts
    store.find_by_draft_false.assert_awaited_once_with(FIRST_TEN_POSTS)
    store.find_by_category_and_draft_false.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_posts_keeps_store_order(service: BlogService, store: AsyncMock):
    posts = [_post(3), _post(1), _post(2)]
    store.find_by_draft_false.return_value = PageResult(items=posts, total=3)

    result = await service.most_recent_posts(FIRST_TEN_POSTS)
    assert [p.id for p in result] == [3, 1, 2]


@pytest.mark.asyncio
async def test_list_posts_for_category(service: BlogService, store: AsyncMock):
    posts = [_post(category=PostCategory.ENGINEERING)]
    store.find_by_category_and_draft_false.return_value = PageResult(items=posts, total=1)

    result = await service.most_recent_posts(FIRST_TEN_POSTS, category=PostCategory.ENGINEERING)

    assert result == posts
    store.find_by_category_and_draft_false.assert_awaited_once_with(
        PostCategory.ENGINEERING, FIRST_TEN_POSTS
    )
    store.find_by_draft_false.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_broadcasts(service: BlogService, store: AsyncMock):
    posts = [_post(broadcast=True)]
    store.find_by_broadcast_and_draft_false.return_value = PageResult(items=posts, total=1)

    assert await service.most_recent_broadcast_posts(FIRST_TEN_POSTS) == posts
    store.find_by_broadcast_and_draft_false.assert_awaited_once_with(True, FIRST_TEN_POSTS)


@pytest.mark.asyncio
async def test_all_posts_includes_drafts(service: BlogService, store: AsyncMock):
    posts = [_post(1, draft=True), _post(2)]
    store.find_all.return_value = PageResult(items=posts, total=2)

    result = await service.all_posts(FIRST_TEN_POSTS)

    assert result == posts
    assert [p.draft for p in result] == [True, False]
    store.find_all.assert_awaited_once_with(FIRST_TEN_POSTS)


@pytest.mark.asyncio
async def test_empty_listing(service: BlogService, store: AsyncMock):
    store.find_by_draft_false.return_value = PageResult()
    assert await service.most_recent_posts(FIRST_TEN_POSTS) == []


# ---------------------------------------------------------------------------
# Pagination info
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_given_one_page_pagination_info(service: BlogService, store: AsyncMock):
    store.count.return_value = 1

    info = await service.pagination_info(PageRequest(page_number=0, page_size=10))

    assert info.current_page == 1
    assert info.total_pages == 1


@pytest.mark.asyncio
async def test_given_many_pages_pagination_info(service: BlogService, store: AsyncMock):
    store.count.return_value = 101

    info = await service.pagination_info(PageRequest(page_number=0, page_size=10))

    assert info.current_page == 1
    assert info.total_pages == 11


@pytest.mark.asyncio
async def test_pagination_info_counts_on_every_call(service: BlogService, store: AsyncMock):
    store.count.side_effect = [10, 30]
    page_request = PageRequest(page_number=2, page_size=10)

    first = await service.pagination_info(page_request)
    second = await service.pagination_info(page_request)

    assert (first.current_page, first.total_pages) == (3, 1)
    assert (second.current_page, second.total_pages) == (3, 3)
    assert store.count.await_count == 2


# ---------------------------------------------------------------------------
# Excerpts
# ---------------------------------------------------------------------------

def test_extract_first_paragraph(service: BlogService):
    assert service.extract_first_paragraph("xxxxx", 2) == "xx"
    assert service.extract_first_paragraph("xx\n\nxxx", 20) == "xx"
    assert service.extract_first_paragraph("xx xx\n\nxxx", 4) == "xx"
