"""Month grid endpoint."""

from fastapi import APIRouter, Depends, Path

from src.api.auth import verify_api_key
from src.api.dependencies import get_calendar_service
from src.api.models import CalendarDayResponse, ErrorResponse, MonthGridResponse
from src.api.routes.events import event_to_response
from src.calendar.schemas import CalendarDay
from src.calendar.service import CalendarService

router = APIRouter()


def _day_to_response(day: CalendarDay | None) -> CalendarDayResponse | None:
    if day is None:
        return None
    return CalendarDayResponse(
        date=day.date,
        is_today=day.is_today,
        is_weekend=day.is_weekend,
        events=[event_to_response(e) for e in day.events],
    )


@router.get(
    "/calendar/{year}/{month}",
    response_model=MonthGridResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Invalid year or month"},
    },
    summary="Get month grid",
    description=(
        "Events of one month laid out in 7-day rows starting on the "
        "configured first weekday, with optional ISO week numbers."
    ),
)
async def get_month_grid(
    year: int = Path(..., ge=1, le=9998),
    month: int = Path(..., ge=1, le=12),
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> MonthGridResponse:
    grid = service.month_grid(year, month)
    return MonthGridResponse(
        year=grid.year,
        month=grid.month,
        event_count=grid.event_count,
        week_numbers=grid.week_numbers,
        weeks=[[_day_to_response(d) for d in week] for week in grid.weeks],
    )
