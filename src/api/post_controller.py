# api/post_controller.py
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from api.utils.binding import bind, validated_result
from core.deps import get_page_query, get_post_service
from schemas.pages import PageQuery
from schemas.posts import PostCreateRequest, PostModifyRequest
from services.post_service import PostService

logger = logging.getLogger(__name__)

BASE_PATH = "/api/v1/posts"
MISSING_PAYLOAD_MESSAGE = "Please provide the post to register."
SERVER_ERROR_PREFIX = "Server error, cause: "
DELETE_SUCCESS_MESSAGE = "DEL SUCCESS!"

posts_router = APIRouter(prefix="/posts", tags=["Posts"])


def _ok(body: Any) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(body, by_alias=True))


class PostApiController:
    """Maps post requests onto a PostService and its results onto responses.

    Service failures are handled per operation: detail answers 400, create
    and delete answer 500, update lets them propagate.
    """

    def __init__(self, service: PostService) -> None:
        self.service = service

    async def list(self, page_query: PageQuery) -> Response:
        logger.info("%s?page=%s&size=%s", BASE_PATH, page_query.page, page_query.size)

        dto = await self.service.get_posts(page_query)
        return _ok(dto)

    async def detail(self, post_id: int) -> Response:
        logger.info("%s/%s GET", BASE_PATH, post_id)

        try:
            dto = await self.service.get_detail(post_id)
            return _ok(dto)
        except Exception as e:
            return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)

    async def create(self, payload: Any) -> Response:
        logger.info("%s POST - payload: %s", BASE_PATH, payload)
        if payload is None:
            return PlainTextResponse(MISSING_PAYLOAD_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

        dto, result = bind(PostCreateRequest, payload)
        field_errors = validated_result(result)
        if field_errors is not None:
            return field_errors

        try:
            response_dto = await self.service.insert(dto)
            return _ok(response_dto)
        except Exception as e:
            return PlainTextResponse(SERVER_ERROR_PREFIX + str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    async def update(self, payload: Any, method: str) -> Response:
        logger.info("%s %s - payload: %s", BASE_PATH, method, payload)

        # an absent body binds as an empty object so every required field is reported
        dto, result = bind(PostModifyRequest, {} if payload is None else payload)
        field_errors = validated_result(result)
        if field_errors is not None:
            return field_errors

        response_dto = await self.service.modify(dto)
        return _ok(response_dto)

    async def delete(self, post_id: int) -> Response:
        logger.info("%s/%s DELETE!", BASE_PATH, post_id)

        try:
            await self.service.delete(post_id)
            return PlainTextResponse(DELETE_SUCCESS_MESSAGE, status_code=status.HTTP_200_OK)
        except Exception as e:
            logger.exception("Failed to delete post %s", post_id)
            return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def get_post_controller(service: Annotated[PostService, Depends(get_post_service)]) -> PostApiController:
    return PostApiController(service)


Controller = Annotated[PostApiController, Depends(get_post_controller)]


@posts_router.get(
    "",
    summary="List posts",
    description="Get a page of posts, newest first, with page-window metadata.",
)
async def list_posts(controller: Controller, page_query: Annotated[PageQuery, Depends(get_page_query)]) -> Response:
    return await controller.list(page_query)


@posts_router.get(
    "/{post_id}",
    summary="Get post by ID",
    description="Fetch a single post with its hash-tags. Any failure answers 400 with the error message.",
)
async def get_post(post_id: int, controller: Controller) -> Response:
    return await controller.detail(post_id)


@posts_router.post(
    "",
    summary="Create post",
    description="Create a post with writer, title, content and optional hash-tags.",
)
async def create_post(controller: Controller, payload: Annotated[Any, Body()] = None) -> Response:
    return await controller.create(payload)


@posts_router.api_route(
    "",
    methods=["PUT", "PATCH"],
    summary="Modify post",
    description="Overwrite title and content of the post named by postId. PUT and PATCH behave the same.",
)
async def update_post(request: Request, controller: Controller, payload: Annotated[Any, Body()] = None) -> Response:
    return await controller.update(payload, request.method)


@posts_router.delete(
    "/{post_id}",
    summary="Delete post",
    description="Delete a post by ID. Returns a confirmation message.",
)
async def delete_post(post_id: int, controller: Controller) -> Response:
    return await controller.delete(post_id)
