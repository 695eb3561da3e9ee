"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_calendar_service
from src.api.models import HealthResponse
from src.calendar.service import CalendarService

router = APIRouter()

VERSION = "0.1.0"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Report service status and the number of events held in memory.",
)
async def health_check(
    service: CalendarService = Depends(get_calendar_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=VERSION,
        events_stored=len(service.list_events(include_completed=True)),
    )
