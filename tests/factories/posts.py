from sqlalchemy.ext.asyncio import AsyncSession

from db.models.hash_tag import HashTag
from db.models.post import Post


async def create_post(
    db: AsyncSession,
    *,
    writer: str = "kim",
    title: str = "first post",
    content: str = "hello world",
    hash_tags: list[str] | None = None,
) -> Post:
    post = Post(
        writer=writer,
        title=title,
        content=content,
        hash_tags=[HashTag(tag_name=tag) for tag in hash_tags or []],
    )
    db.add(post)
    await db.commit()
    return post


async def create_posts(db: AsyncSession, count: int, *, writer: str = "kim") -> list[Post]:
    return [await create_post(db, writer=writer, title=f"post {i}") for i in range(1, count + 1)]
