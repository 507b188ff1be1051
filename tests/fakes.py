from datetime import datetime

from core.exceptions import NotFoundError
from schemas.pages import PageInfo, PageQuery
from schemas.posts import PostCreateRequest, PostDetailResponse, PostListResponse, PostModifyRequest


class FakePostService:
    """In-memory stand-in for PostService that records every call.

    Setting one of the ``*_error`` attributes makes the matching operation
    raise that exception instead.
    """

    def __init__(self) -> None:
        self.posts: dict[int, PostDetailResponse] = {}
        self.calls: list[tuple[str, object]] = []
        self.get_posts_error: Exception | None = None
        self.get_detail_error: Exception | None = None
        self.insert_error: Exception | None = None
        self.modify_error: Exception | None = None
        self.delete_error: Exception | None = None
        self._next_id = 1

    def called(self, name: str) -> bool:
        return any(call == name for call, _ in self.calls)

    def add(self, writer: str = "kim", title: str = "hello", content: str = "first post", hash_tags=None):
        now = datetime(2026, 1, 1, 12, 0, 0)
        post = PostDetailResponse(
            post_no=self._next_id,
            writer=writer,
            title=title,
            content=content,
            hash_tags=list(hash_tags or []),
            reg_date=now,
            mod_date=now,
        )
        self.posts[post.post_no] = post
        self._next_id += 1
        return post

    async def get_posts(self, page_query: PageQuery) -> PostListResponse:
        self.calls.append(("get_posts", page_query))
        if self.get_posts_error:
            raise self.get_posts_error
        items = list(self.posts.values())[page_query.offset : page_query.offset + page_query.size]
        return PostListResponse(
            count=len(items),
            page_info=PageInfo.build(page_query, len(self.posts), 5),
            posts=items,
        )

    async def get_detail(self, post_id: int) -> PostDetailResponse:
        self.calls.append(("get_detail", post_id))
        if self.get_detail_error:
            raise self.get_detail_error
        if post_id not in self.posts:
            raise NotFoundError(f"Post with id {post_id} not found")
        return self.posts[post_id]

    async def insert(self, request: PostCreateRequest) -> PostDetailResponse:
        self.calls.append(("insert", request))
        if self.insert_error:
            raise self.insert_error
        return self.add(request.writer, request.title, request.content, request.hash_tags)

    async def modify(self, request: PostModifyRequest) -> PostDetailResponse:
        self.calls.append(("modify", request))
        if self.modify_error:
            raise self.modify_error
        if request.post_id not in self.posts:
            raise NotFoundError(f"Post with id {request.post_id} not found")
        current = self.posts[request.post_id]
        updated = current.model_copy(
            update={"title": request.title, "content": request.content if request.content is not None else current.content}
        )
        self.posts[request.post_id] = updated
        return updated

    async def delete(self, post_id: int) -> None:
        self.calls.append(("delete", post_id))
        if self.delete_error:
            raise self.delete_error
        if post_id not in self.posts:
            raise NotFoundError(f"Post with id {post_id} not found")
        del self.posts[post_id]
