import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.config_models import PaginationConfig
from core.exceptions import NotFoundError, ValidationError
from db.repositories import post_repository
from schemas.pages import PageInfo, PageQuery
from schemas.posts import PostCreateRequest, PostDetailResponse, PostListResponse, PostModifyRequest

logger = logging.getLogger(__name__)


class PostService:
    """Post use cases over a single request-scoped session.

    Every write commits before returning; a failing write leaves the
    rollback to the session owner.
    """

    def __init__(self, db: AsyncSession, pagination: PaginationConfig | None = None) -> None:
        self.db = db
        self.pagination = pagination or settings.pagination

    async def get_posts(self, page_query: PageQuery) -> PostListResponse:
        posts = await post_repository.get_posts_paginated(self.db, offset=page_query.offset, limit=page_query.size)
        total = await post_repository.count_posts(self.db)

        items = [PostDetailResponse.from_entity(p) for p in posts]
        return PostListResponse(
            count=len(items),
            page_info=PageInfo.build(page_query, total, self.pagination.page_window),
            posts=items,
        )

    async def get_detail(self, post_id: int) -> PostDetailResponse:
        post = await post_repository.get_post_by_id(self.db, post_id)
        if not post:
            raise NotFoundError(f"Post with id {post_id} not found")
        return PostDetailResponse.from_entity(post)

    async def insert(self, request: PostCreateRequest) -> PostDetailResponse:
        try:
            post = await post_repository.create_post(
                self.db,
                writer=request.writer,
                title=request.title,
                content=request.content,
                hash_tags=request.hash_tags,
            )
        except IntegrityError as e:
            raise ValidationError("Failed to create post") from e

        await self.db.commit()
        logger.debug("Post %s committed with %d hash-tags", post.id, len(post.hash_tags))
        return PostDetailResponse.from_entity(post)

    async def modify(self, request: PostModifyRequest) -> PostDetailResponse:
        post = await post_repository.update_post(
            self.db,
            request.post_id,
            title=request.title,
            content=request.content,
        )
        if not post:
            raise NotFoundError(f"Post with id {request.post_id} not found")

        await self.db.commit()
        return PostDetailResponse.from_entity(post)

    async def delete(self, post_id: int) -> None:
        deleted = await post_repository.delete_post_by_id(self.db, post_id)
        if not deleted:
            raise NotFoundError(f"Post with id {post_id} not found")
        await self.db.commit()
