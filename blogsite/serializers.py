"""
Plain-dict serialisation of ``Post`` rows for HTTP responses and the
Redis cache.  Timestamps are rendered as ISO-8601 strings so the dicts
survive a JSON round trip unchanged.
"""
from blogsite.config import settings
from blogsite.models import Post
from blogsite.pagination import PaginationInfo
from blogsite.services.blog_service import BlogService


def _post_base(post: Post) -> dict:
    return {
        "id": post.id,
        "title": post.title,
        "author": post.author,
        "category": post.category.value,
        "broadcast": post.broadcast,
        "created_at": post.created_at.isoformat() if post.created_at else None,
        "published_at": post.published_at.isoformat() if post.published_at else None,
    }


def post_summary_to_dict(service: BlogService, post: Post, include_draft: bool = False) -> dict:
    """Serialise *post* for a list view, with its first-paragraph excerpt."""
    data = _post_base(post)
    data["excerpt"] = service.extract_first_paragraph(post.raw_content, settings.EXCERPT_LENGTH)
    if include_draft:
        data["draft"] = post.draft
    return data


def post_detail_to_dict(post: Post, include_draft: bool = False) -> dict:
    """Serialise *post* for a detail view, with its full body."""
    data = _post_base(post)
    data["content"] = post.raw_content
    if include_draft:
        data["draft"] = post.draft
    return data


def post_list_to_dict(
    service: BlogService,
    posts: list[Post],
    pagination: PaginationInfo,
    include_draft: bool = False,
) -> dict:
    return {
        "posts": [post_summary_to_dict(service, p, include_draft) for p in posts],
        "pagination": pagination.model_dump(mode="json"),
    }
