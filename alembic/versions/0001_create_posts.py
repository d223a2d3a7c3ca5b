"""Create the posts table.

Revision ID: 0001_create_posts
Revises: None
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "0001_create_posts"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None

post_category = sa.Enum("ENGINEERING", "RELEASES", "NEWS_AND_EVENTS", name="post_category")


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("author", sa.String(150), nullable=False),
        sa.Column("category", post_category, nullable=False),
        sa.Column("draft", sa.Boolean, nullable=False),
        sa.Column("broadcast", sa.Boolean, nullable=False),
        sa.Column("raw_content", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_posts_draft_created_at", "posts", ["draft", "created_at"])
    op.create_index(
        "ix_posts_category_draft_created_at", "posts", ["category", "draft", "created_at"]
    )
    op.create_index(
        "ix_posts_broadcast_draft_created_at", "posts", ["broadcast", "draft", "created_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_posts_broadcast_draft_created_at", table_name="posts")
    op.drop_index("ix_posts_category_draft_created_at", table_name="posts")
    op.drop_index("ix_posts_draft_created_at", table_name="posts")
    op.drop_table("posts")
    post_category.drop(op.get_bind(), checkfirst=True)
