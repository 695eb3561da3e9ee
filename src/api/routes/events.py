"""Calendar event endpoints: create from text, list, complete, delete."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse
from starlette.requests import Request

from src.api.auth import verify_api_key
from src.api.dependencies import get_calendar_service, get_extraction_config
from src.api.models import (
    CreateEventRequest,
    DateNotDetectedResponse,
    ErrorResponse,
    EventListResponse,
    EventResponse,
    UpdateEventRequest,
)
from src.api.rate_limit import limiter
from src.calendar.schemas import Event, priority_color
from src.calendar.service import (
    CalendarService,
    DateNotDetectedError,
    EmptyInputError,
    EventNotFoundError,
)
from src.config.settings import get_settings as _get_settings
from src.event_extraction.config import EventExtractionConfig

router = APIRouter()


def event_to_response(event: Event) -> EventResponse:
    """Convert a calendar Event to its API representation."""
    return EventResponse(
        **event.to_dict(),
        priority_color=priority_color(event.priority),
    )


def _not_found(exc: EventNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post(
    "/events",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        422: {"model": DateNotDetectedResponse, "description": "No date detected in text"},
    },
    summary="Create event from text",
    description="Parse free text into an event and add it to the calendar.",
)
@limiter.limit(lambda: _get_settings().rate_limit_default)
async def create_event(
    request: Request,
    body: CreateEventRequest,
    api_key: str = Depends(verify_api_key),
    config: EventExtractionConfig = Depends(get_extraction_config),
    service: CalendarService = Depends(get_calendar_service),
):
    if len(body.text) > config.max_input_length:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Text exceeds {config.max_input_length} characters",
        )

    try:
        event = service.add_from_text(body.text)
    except EmptyInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except DateNotDetectedError as e:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=DateNotDetectedResponse(detail=str(e), examples=e.examples).model_dump(),
        )

    return event_to_response(event)


@router.get(
    "/events",
    response_model=EventListResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid API key"}},
    summary="List events",
)
async def list_events(
    include_completed: bool | None = Query(
        default=None,
        description="Include completed events (defaults to the show_completed setting)",
    ),
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> EventListResponse:
    events = service.list_events(include_completed=include_completed)
    return EventListResponse(
        events=[event_to_response(e) for e in events],
        total=len(events),
    )


@router.get(
    "/events/{event_id}",
    response_model=EventResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        404: {"model": ErrorResponse, "description": "Event not found"},
    },
    summary="Get event",
)
async def get_event(
    event_id: str,
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> EventResponse:
    try:
        return event_to_response(service.get_event(event_id))
    except EventNotFoundError as e:
        raise _not_found(e)


@router.patch(
    "/events/{event_id}",
    response_model=EventResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        404: {"model": ErrorResponse, "description": "Event not found"},
    },
    summary="Mark event completed or not",
)
async def update_event(
    event_id: str,
    body: UpdateEventRequest,
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> EventResponse:
    try:
        event = service.set_completed(event_id, body.completed)
    except EventNotFoundError as e:
        raise _not_found(e)
    return event_to_response(event)


@router.delete(
    "/events/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        404: {"model": ErrorResponse, "description": "Event not found"},
    },
    summary="Delete event",
)
async def delete_event(
    event_id: str,
    api_key: str = Depends(verify_api_key),
    service: CalendarService = Depends(get_calendar_service),
) -> Response:
    try:
        service.delete_event(event_id)
    except EventNotFoundError as e:
        raise _not_found(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
