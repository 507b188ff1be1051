from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
)
from sqlalchemy.orm import relationship

from ..database import Base

TAG_NAME_MAX_LENGTH = 50


class HashTag(Base):
    """
    Hash-tag attached to a post.

    Fields:
        id: PK
        tag_name: Tag text without the leading '#'
        post_id: FK to posts.id (CASCADE on delete)
    """

    __tablename__ = "hash_tags"

    id = Column(Integer, primary_key=True, index=True, doc="Hash-tag primary key")

    tag_name = Column(
        String(TAG_NAME_MAX_LENGTH),
        nullable=False,
        doc="Tag text",
    )

    post_id = Column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Owning post id",
    )

    post = relationship("Post", back_populates="hash_tags")

    def __repr__(self) -> str:
        return f"<HashTag(id={self.id}, tag_name={self.tag_name!r}, post_id={self.post_id})>"
