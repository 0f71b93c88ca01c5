"""
Presence API Routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.presence import (
    GetPresenceUseCase,
    PresenceResponse,
    RecordHeartbeatUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/presence", tags=["Presence"])


@router.post("/heartbeat", response_model=PresenceResponse)
async def heartbeat(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RecordHeartbeatUseCase(uow).execute(UUID(current_user["user_id"]))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{user_id}", response_model=PresenceResponse)
async def get_presence(
    user_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetPresenceUseCase(
        uow, online_threshold_seconds=ApplicationConfig.PRESENCE_ONLINE_THRESHOLD_SECONDS
    )
    result = await use_case.execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
