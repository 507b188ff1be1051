from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from db.database import get_db
from schemas.pages import PageQuery
from services.post_service import PostService


def get_post_service(db: Annotated[AsyncSession, Depends(get_db)]) -> PostService:
    """Build the request-scoped PostService on top of the request session."""
    return PostService(db, settings.pagination)


def get_page_query(
    page: int | None = Query(None, description="Page number starting from 1"),
    size: int | None = Query(None, description="Page size"),
) -> PageQuery:
    """Bind list query parameters, falling back to configured defaults."""
    return PageQuery.of(
        page,
        size,
        default_size=settings.pagination.default_size,
        max_size=settings.pagination.max_size,
        max_page=settings.pagination.max_page,
    )
