"""Activity routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from threads.application.usecase.user import (
    GetActivityRequest,
    GetActivityResponse,
    GetActivityUseCase,
)
from threads.interface.error import to_http_exception

router = APIRouter(prefix="/activity", tags=["activity"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetActivityResponse)
async def get_activity(
    user_id: UUID,
    get_activity_use_case: FromDishka[GetActivityUseCase],
) -> GetActivityResponse:
    """Replies other users left on this user's threads, newest first."""
    try:
        return await get_activity_use_case.execute(
            GetActivityRequest(user_id=str(user_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get activity") from e
