class BlogError(Exception):
    """Base class for errors raised by the blog service layer."""


class NoSuchBlogPostError(BlogError):
    """Raised when an id lookup finds no (visible) post."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"No blog post with id {post_id}")
        self.post_id = post_id
