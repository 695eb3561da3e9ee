"""User settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from src.api.auth import verify_api_key
from src.api.dependencies import get_calendar_service
from src.api.models import ErrorResponse, SettingsUpdateRequest
from src.calendar.preferences import UserSettings
from src.calendar.service import CalendarService

router = APIRouter()


@router.get(
    "/settings",
    response_model=UserSettings,
    responses={401: {"model": ErrorResponse, "description": "Invalid API key"}},
    summary="Get user settings",
)
async def get_user_settings(
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> UserSettings:
    return service.get_settings()


@router.patch(
    "/settings",
    response_model=UserSettings,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Invalid setting value"},
    },
    summary="Update user settings",
    description="Apply a partial update; omitted fields keep their current values.",
)
async def update_user_settings(
    body: SettingsUpdateRequest,
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> UserSettings:
    changes = body.model_dump(exclude_none=True)
    try:
        return service.update_settings(**changes)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid settings: {errors}",
        )
