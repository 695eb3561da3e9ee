"""
Dependency injection for FastAPI endpoints.
"""

from src.calendar.service import CalendarService
from src.event_extraction.config import EventExtractionConfig

# Global service instances (initialized on first request)
_calendar_service: CalendarService | None = None
_extraction_config: EventExtractionConfig | None = None


def get_extraction_config() -> EventExtractionConfig:
    """Get extraction config (EVENTS_* env vars), loaded once."""
    global _extraction_config
    if _extraction_config is None:
        _extraction_config = EventExtractionConfig()
    return _extraction_config


def get_calendar_service() -> CalendarService:
    """
    Get calendar service instance.

    Creates a singleton so every request sees the same in-memory event list.
    """
    global _calendar_service
    if _calendar_service is None:
        _calendar_service = CalendarService(extraction_config=get_extraction_config())
    return _calendar_service


def cleanup_dependencies() -> None:
    """Drop service singletons (events are lost, as nothing is persisted)."""
    global _calendar_service, _extraction_config
    _calendar_service = None
    _extraction_config = None
