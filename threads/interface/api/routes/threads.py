"""Thread routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from threads.application.usecase.thread import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListFeedRequest,
    ListFeedResponse,
    ListFeedUseCase,
)
from threads.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    text: str = Field(min_length=1, max_length=10000)
    author_id: UUID
    community_id: str | None = None  # External community id
    path: str = "/"  # Page to revalidate


class AddCommentAPIRequest(BaseModel):
    """API request for replying to a thread."""

    text: str = Field(min_length=1, max_length=10000)
    author_id: UUID
    path: str


@router.post(
    "", response_model=CreateThreadResponse, status_code=status.HTTP_201_CREATED
)
async def create_thread(
    request: CreateThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> CreateThreadResponse:
    """Post a new top-level thread."""
    try:
        return await create_thread_use_case.execute(
            CreateThreadRequest(
                text=request.text,
                author_id=str(request.author_id),
                community_id=request.community_id,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create thread") from e


@router.get("", response_model=ListFeedResponse)
async def list_feed(
    list_feed_use_case: FromDishka[ListFeedUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> ListFeedResponse:
    """List top-level threads, newest first."""
    try:
        return await list_feed_use_case.execute(
            ListFeedRequest(page=page, page_size=page_size)
        )
    except Exception as e:
        raise to_http_exception(e, "list threads") from e


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Get a thread with two levels of replies."""
    try:
        result = await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get thread") from e

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Thread not found: {thread_id}",
        )
    return result


@router.delete("/{thread_id}", response_model=DeleteThreadResponse)
async def delete_thread(
    thread_id: UUID,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    path: str = Query(default="/"),
) -> DeleteThreadResponse:
    """Delete a thread and every reply below it."""
    try:
        return await delete_thread_use_case.execute(
            DeleteThreadRequest(thread_id=str(thread_id), path=path)
        )
    except Exception as e:
        raise to_http_exception(e, "delete thread") from e


@router.post(
    "/{thread_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    thread_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Reply to a thread."""
    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                thread_id=str(thread_id),
                text=request.text,
                author_id=str(request.author_id),
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "add comment") from e
