"""Event extraction endpoint for playground."""

import time

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.requests import Request

from src.api.auth import verify_api_key
from src.api.dependencies import get_calendar_service, get_extraction_config
from src.api.models import ErrorResponse, ExtractedEventResponse, ExtractRequest
from src.api.rate_limit import limiter
from src.calendar.service import CalendarService
from src.config.settings import get_settings as _get_settings
from src.event_extraction.config import EventExtractionConfig

router = APIRouter()


@router.post(
    "/events/extract",
    response_model=ExtractedEventResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Extraction playground disabled"},
    },
    summary="Extract event details from text",
    description=(
        "Extract date, time, location, priority, recurrence, category, tags "
        "and title from one line of free text without creating an event."
    ),
)
@limiter.limit(lambda: _get_settings().rate_limit_default)
async def extract_event(
    request: Request,
    body: ExtractRequest,
    api_key: str = Depends(verify_api_key),
    config: EventExtractionConfig = Depends(get_extraction_config),
    service: CalendarService = Depends(get_calendar_service),
) -> ExtractedEventResponse:
    if not config.enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Extraction playground is disabled. Set EVENTS_ENABLED=true to enable.",
        )
    if len(body.text) > config.max_input_length:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Text exceeds {config.max_input_length} characters",
        )

    start_time = time.perf_counter()
    info = service.extract(body.text, reference=body.reference_date)
    latency_ms = (time.perf_counter() - start_time) * 1000

    return ExtractedEventResponse(
        title=info.title,
        date=info.date,
        time=info.time,
        location=info.location,
        priority=info.priority,
        tags=info.tags,
        recurring=info.recurring,
        category=info.category,
        has_date=info.has_date,
        latency_ms=round(latency_ms, 2),
    )
