from math import ceil
import sys

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_PAGE = 1
DEFAULT_MAX_PAGE = 1_000_000


class PageQuery(BaseModel):
    """Page/size pair taken from the list query string.

    Missing or non-positive values fall back to the defaults. An oversized
    ``size`` is capped, and ``page`` is clamped to ``max_page`` so the row
    offset stays inside the database integer range.
    """

    page: int = Field(DEFAULT_PAGE, description="Page number starting from 1")
    size: int = Field(..., description="Number of posts per page")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(
        cls,
        page: int | None,
        size: int | None,
        *,
        default_size: int,
        max_size: int,
        max_page: int = DEFAULT_MAX_PAGE,
    ) -> "PageQuery":
        if page is None or page < 1:
            page = DEFAULT_PAGE
        if size is None or size < 1:
            size = default_size
        size = min(size, max_size)
        return cls(page=min(page, max_page, sys.maxsize // size), size=size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class PageInfo(BaseModel):
    """Pagination metadata with a window of page links around the current page."""

    current_page: int = Field(..., ge=1, description="Current page number")
    size: int = Field(..., ge=1, description="Items per page")
    total_count: int = Field(..., ge=0, description="Total number of posts")
    total_pages: int = Field(..., ge=1, description="Total number of pages")
    start_page: int = Field(..., ge=1, description="First page link of the current window")
    end_page: int = Field(..., ge=1, description="Last page link of the current window")
    prev: bool = Field(..., description="Whether an earlier window exists")
    next: bool = Field(..., description="Whether a later window exists")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @classmethod
    def build(cls, query: PageQuery, total_count: int, window: int) -> "PageInfo":
        total_pages = max(1, ceil(total_count / query.size))
        end_page = ceil(query.page / window) * window
        start_page = end_page - window + 1
        return cls(
            current_page=query.page,
            size=query.size,
            total_count=total_count,
            total_pages=total_pages,
            start_page=start_page,
            end_page=min(end_page, max(total_pages, start_page)),
            prev=start_page > 1,
            next=end_page < total_pages,
        )
