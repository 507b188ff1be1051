"""create posts and hash_tags

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("writer", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("ix_post_created_id", "posts", ["created_at", "id"])
    op.create_index("ix_post_writer", "posts", ["writer"])

    op.create_table(
        "hash_tags",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("tag_name", sa.String(length=50), nullable=False),
        sa.Column("post_id", sa.Integer(), sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_hash_tags_id", "hash_tags", ["id"])
    op.create_index("ix_hash_tags_post_id", "hash_tags", ["post_id"])


def downgrade() -> None:
    op.drop_index("ix_hash_tags_post_id", table_name="hash_tags")
    op.drop_index("ix_hash_tags_id", table_name="hash_tags")
    op.drop_table("hash_tags")
    op.drop_index("ix_post_writer", table_name="posts")
    op.drop_index("ix_post_created_id", table_name="posts")
    op.drop_index("ix_posts_id", table_name="posts")
    op.drop_table("posts")
