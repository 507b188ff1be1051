import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.exceptions import ValidationError
from db.models.hash_tag import HashTag
from db.models.post import Post
from db.repositories.decorators import handle_db_errors, with_retry

logger = logging.getLogger(__name__)

DEFAULT_MAX_LIMIT: int = 100


@handle_db_errors("post")
async def create_post(
    db: AsyncSession,
    writer: str,
    title: str,
    content: str,
    hash_tags: list[str] | None = None,
) -> Post:
    new_post = Post(
        writer=writer,
        title=title,
        content=content,
        hash_tags=[HashTag(tag_name=tag) for tag in hash_tags or []],
    )
    db.add(new_post)
    await db.flush()
    logger.info("Created new post with id %s", new_post.id)
    return new_post


@with_retry(log_prefix="counting posts")
async def count_posts(db: AsyncSession) -> int:
    stmt = select(func.count(Post.id))
    res = await db.execute(stmt)
    return int(res.scalar_one())


@with_retry(log_prefix="fetching post")
async def get_post_by_id(db: AsyncSession, post_id: int) -> Post | None:
    if post_id <= 0:
        logger.warning("Invalid post_id: %s (must be > 0)", post_id)
        return None

    stmt = select(Post).options(selectinload(Post.hash_tags)).where(Post.id == post_id)
    res = await db.execute(stmt)
    post = res.scalars().first()
    if not post:
        logger.info("Post with id %s not found", post_id)
    return post


@with_retry(log_prefix="fetching paginated posts")
async def get_posts_paginated(db: AsyncSession, offset: int, limit: int) -> list[Post]:
    if offset < 0:
        raise ValidationError("offset must be an integer >= 0")
    if limit <= 0 or limit > DEFAULT_MAX_LIMIT:
        raise ValidationError(f"limit must be in 1..{DEFAULT_MAX_LIMIT}")

    stmt = (
        select(Post)
        .options(selectinload(Post.hash_tags))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(offset)
        .limit(limit)
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


@handle_db_errors("post")
async def update_post(
    db: AsyncSession,
    post_id: int,
    *,
    title: str,
    content: str | None = None,
) -> Post | None:
    post = await get_post_by_id(db, post_id)
    if not post:
        logger.info("Skip update: post %s not found", post_id)
        return None

    post.title = title
    if content is not None:
        post.content = content

    await db.flush()
    logger.info("Updated post %s", post_id)
    return post


@handle_db_errors("post")
async def delete_post_by_id(db: AsyncSession, post_id: int) -> bool:
    post = await get_post_by_id(db, post_id)
    if not post:
        logger.info("Skip delete: post %s not found", post_id)
        return False

    await db.delete(post)
    await db.flush()
    logger.info("Deleted post with id %s", post_id)
    return True
