"""
Public blog routes.

Only published posts are reachable here.  Listing and detail payloads go
through the cache-aside pattern; cache keys encode every input that
shapes the response.
"""
from fastapi import APIRouter, Depends, HTTPException

from blogsite.cache import cache
from blogsite.config import settings
from blogsite.dependencies import BlogPageParams, get_blog_service
from blogsite.exceptions import NoSuchBlogPostError
from blogsite.models import PostCategory
from blogsite.schemas import PostDetail, PostListResponse
from blogsite.serializers import post_detail_to_dict, post_list_to_dict
from blogsite.services.blog_service import BlogService

router = APIRouter(prefix="/api/v1/blog", tags=["blog"])


@router.get("", response_model=PostListResponse)
async def list_posts(
    params: BlogPageParams = Depends(),
    service: BlogService = Depends(get_blog_service),
):
    page_request = params.to_page_request()
    cache_key = f"posts:list:all:{page_request.page_number}:{page_request.page_size}"
    cached = await cache.get(cache_key)
    if cached:
        return cached

    posts = await service.most_recent_posts(page_request)
    data = post_list_to_dict(service, posts, await service.pagination_info(page_request))
    await cache.set(cache_key, data, ttl=settings.CACHE_TTL_LIST)
    return data


@router.get("/broadcasts", response_model=PostListResponse)
async def list_broadcasts(
    params: BlogPageParams = Depends(),
    service: BlogService = Depends(get_blog_service),
):
    page_request = params.to_page_request()
    cache_key = f"posts:list:broadcasts:{page_request.page_number}:{page_request.page_size}"
    cached = await cache.get(cache_key)
    if cached:
        return cached

    posts = await service.most_recent_broadcast_posts(page_request)
    data = post_list_to_dict(service, posts, await service.pagination_info(page_request))
    await cache.set(cache_key, data, ttl=settings.CACHE_TTL_LIST)
    return data


@router.get("/category/{category}", response_model=PostListResponse)
async def list_category(
    category: PostCategory,
    params: BlogPageParams = Depends(),
    service: BlogService = Depends(get_blog_service),
):
    page_request = params.to_page_request()
    cache_key = f"posts:list:{category.value}:{page_request.page_number}:{page_request.page_size}"
    cached = await cache.get(cache_key)
    if cached:
        return cached

    posts = await service.most_recent_posts(page_request, category=category)
    data = post_list_to_dict(service, posts, await service.pagination_info(page_request))
    await cache.set(cache_key, data, ttl=settings.CACHE_TTL_LIST)
    return data


@router.get("/{post_id}", response_model=PostDetail)
async def get_post(post_id: int, service: BlogService = Depends(get_blog_service)):
    cache_key = f"posts:detail:{post_id}"
    cached = await cache.get(cache_key)
    if cached:
        return cached

    try:
        post = await service.get_published_post(post_id)
    except NoSuchBlogPostError:
        raise HTTPException(status_code=404, detail="Post not found")

    data = post_detail_to_dict(post)
    await cache.set(cache_key, data, ttl=settings.CACHE_TTL_DETAIL)
    return data
