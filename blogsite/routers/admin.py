from fastapi import APIRouter, Depends, HTTPException

from blogsite.dependencies import BlogPageParams, get_blog_service
from blogsite.exceptions import NoSuchBlogPostError
from blogsite.schemas import AdminPostDetail, AdminPostListResponse
from blogsite.serializers import post_detail_to_dict, post_list_to_dict
from blogsite.services.blog_service import BlogService

# Drafts are visible on these routes, so nothing here is cached.
router = APIRouter(prefix="/api/v1/admin/blog", tags=["admin"])


@router.get("", response_model=AdminPostListResponse)
async def list_all_posts(
    params: BlogPageParams = Depends(),
    service: BlogService = Depends(get_blog_service),
):
    page_request = params.to_page_request()
    posts = await service.all_posts(page_request)
    return post_list_to_dict(
        service, posts, await service.pagination_info(page_request), include_draft=True
    )


@router.get("/{post_id}", response_model=AdminPostDetail)
async def get_any_post(post_id: int, service: BlogService = Depends(get_blog_service)):
    try:
        post = await service.get_post(post_id)
    except NoSuchBlogPostError:
        raise HTTPException(status_code=404, detail="Post not found")
    return post_detail_to_dict(post, include_draft=True)
