"""
FastAPI calendar service.

Provides REST API for text-to-event extraction and the in-memory calendar:
- POST /events/extract - Extraction playground
- POST /events - Create event from free text
- GET /calendar/{year}/{month} - Month grid
- GET/PATCH /settings - User preferences
- GET /health - Service health check
"""

from src.api.app import create_app

__all__ = ["create_app"]
