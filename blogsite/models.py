from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from blogsite.database import Base


# ---------------------------------------------------------------------------
# PostCategory
# ---------------------------------------------------------------------------
class PostCategory(str, enum.Enum):
    """Closed set of blog categories; the value doubles as the URL slug."""

    ENGINEERING = "engineering"
    RELEASES = "releases"
    NEWS_AND_EVENTS = "news"

    @property
    def display_name(self) -> str:
        return _CATEGORY_DISPLAY_NAMES[self]


_CATEGORY_DISPLAY_NAMES = {
    PostCategory.ENGINEERING: "Engineering",
    PostCategory.RELEASES: "Releases",
    PostCategory.NEWS_AND_EVENTS: "News and Events",
}


# ---------------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------------
class Post(Base):
    __tablename__ = "posts"

    __table_args__ = (
        # Public feed (homepage, RSS)
        Index("ix_posts_draft_created_at", "draft", "created_at"),
        # Category feeds
        Index("ix_posts_category_draft_created_at", "category", "draft", "created_at"),
        # Broadcast feed
        Index("ix_posts_broadcast_draft_created_at", "broadcast", "draft", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[str] = mapped_column(String(150), nullable=False, default="")
    category: Mapped[PostCategory] = mapped_column(
        Enum(PostCategory, name="post_category"), nullable=False
    )
    draft: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    broadcast: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    raw_content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    published_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r} draft={self.draft}>"
