"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from threads.application.usecase.user import (
    GetUserPostsRequest,
    GetUserPostsResponse,
    GetUserPostsUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from threads.domain.value import SortOrder
from threads.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for creating or updating a profile."""

    username: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    bio: str | None = None
    image: str | None = None
    path: str  # Page the edit came from


@router.get("", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    requesting_user_id: str = Query(min_length=1),
    search: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    sort: SortOrder = Query(default=SortOrder.DESC),
) -> SearchUsersResponse:
    """List users other than the requester, optionally filtered."""
    try:
        return await search_users_use_case.execute(
            SearchUsersRequest(
                requesting_user_id=requesting_user_id,
                search=search,
                page=page,
                page_size=page_size,
                sort=sort,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list users") from e


@router.get("/{external_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    external_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's profile with their communities."""
    try:
        result = await get_user_profile_use_case.execute(
            GetUserProfileRequest(external_id=external_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get user") from e

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {external_id}",
        )
    return result


@router.put("/{external_id}", response_model=UpdateUserProfileResponse)
async def update_user_profile(
    external_id: str,
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
) -> UpdateUserProfileResponse:
    """Create or update a user's profile."""
    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                external_id=external_id,
                username=request.username,
                name=request.name,
                bio=request.bio,
                image=request.image,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update user") from e


@router.get("/{external_id}/threads", response_model=GetUserPostsResponse)
async def get_user_posts(
    external_id: str,
    get_user_posts_use_case: FromDishka[GetUserPostsUseCase],
) -> GetUserPostsResponse:
    """Get the threads a user authored."""
    try:
        result = await get_user_posts_use_case.execute(
            GetUserPostsRequest(external_id=external_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get user posts") from e

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {external_id}",
        )
    return result
