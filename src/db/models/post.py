from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Index,
)
from sqlalchemy.orm import relationship

from ..database import Base

WRITER_MAX_LENGTH = 20
TITLE_MAX_LENGTH = 100

POST_INDEXES = (
    # Newest-first listings
    Index("ix_post_created_id", "created_at", "id"),
    # Lookups by writer
    Index("ix_post_writer", "writer"),
)


class Post(Base):
    """SQLAlchemy model representing a post.

    Attributes:
        id (int): Unique post identifier, never reassigned.
        writer (str): Name of the writer, max 20 characters.
        title (str): Post title, max 100 characters.
        content (str): Full post content.
        created_at (datetime): Creation timestamp (UTC).
        updated_at (datetime): Last modification timestamp (UTC).
        hash_tags (list[HashTag]): Tags attached to the post, removed with it.
    """

    __tablename__ = "posts"
    __table_args__ = POST_INDEXES

    id = Column(
        Integer,
        primary_key=True,
        index=True,
        doc="Unique post identifier",
    )
    writer = Column(
        String(WRITER_MAX_LENGTH),
        nullable=False,
        doc="Writer name with maximum 20 characters",
    )
    title = Column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
        doc="Post title with maximum 100 characters",
    )
    content = Column(
        Text,
        nullable=False,
        doc="Full post content",
    )
    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        doc="Post creation timestamp",
    )
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
        doc="Last modification timestamp",
    )
    hash_tags = relationship(
        "HashTag",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="HashTag.id",
        lazy="selectin",
        doc="Hash-tags attached to this post",
    )

    def __repr__(self) -> str:
        """Return the formal string representation for debugging."""
        title_value = getattr(self, "title", None)
        if isinstance(title_value, str) and title_value:
            title_repr = title_value[:30] + "..." if len(title_value) > 30 else title_value
        else:
            title_repr = ""
        return f"<Post(id={self.id}, title={title_repr!r}, writer={self.writer!r})>"

    @property
    def tag_names(self) -> list[str]:
        """Return the hash-tag names in insertion order."""
        return [tag.tag_name for tag in self.hash_tags or []]
