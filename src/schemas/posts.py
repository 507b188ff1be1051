from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from db.models.hash_tag import TAG_NAME_MAX_LENGTH
from db.models.post import TITLE_MAX_LENGTH, WRITER_MAX_LENGTH
from .pages import PageInfo


def not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(not_blank)]


def normalize_tags(tags: list[str]) -> list[str]:
    """Strip whitespace and a leading '#', drop blanks and repeats, keep order."""
    seen: dict[str, None] = {}
    for tag in tags:
        name = tag.strip().lstrip("#").strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PostCreateRequest(CamelModel):
    writer: NonBlankStr = Field(..., max_length=WRITER_MAX_LENGTH, description="Writer name")
    title: NonBlankStr = Field(..., max_length=TITLE_MAX_LENGTH, description="Post title")
    content: NonBlankStr = Field(..., description="Post content")
    hash_tags: list[str] | None = Field(None, description="Optional hash-tags")

    @field_validator("hash_tags")
    @classmethod
    def validate_hash_tags(cls, tags: list[str] | None) -> list[str] | None:
        if tags is None:
            return None
        tags = normalize_tags(tags)
        too_long = [tag for tag in tags if len(tag) > TAG_NAME_MAX_LENGTH]
        if too_long:
            raise ValueError(f"hash-tags must be at most {TAG_NAME_MAX_LENGTH} characters")
        return tags


class PostModifyRequest(CamelModel):
    post_id: int = Field(..., gt=0, description="Identifier of the post to modify")
    title: NonBlankStr = Field(..., max_length=TITLE_MAX_LENGTH, description="New post title")
    content: str | None = Field(None, description="New post content, kept as is when omitted")


class PostDetailResponse(CamelModel):
    post_no: int = Field(..., description="Post ID")
    writer: str = Field(..., description="Writer name")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post content")
    hash_tags: list[str] = Field(default_factory=list, description="Hash-tags")
    reg_date: datetime = Field(..., description="Creation timestamp")
    mod_date: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, post) -> "PostDetailResponse":
        return cls(
            post_no=post.id,
            writer=post.writer,
            title=post.title,
            content=post.content,
            hash_tags=post.tag_names,
            reg_date=post.created_at,
            mod_date=post.updated_at,
        )


class PostListResponse(CamelModel):
    count: int = Field(..., ge=0, description="Number of posts on this page")
    page_info: PageInfo = Field(..., description="Pagination metadata")
    posts: list[PostDetailResponse] = Field(default_factory=list, description="Posts, newest first")
