"""
API Package

Versioned HTTP routes for matching and booking.

Routers are imported inside ``create_api_router`` so importing the package
does not pull in the application services.
"""

from fastapi import APIRouter


def create_api_router() -> APIRouter:
    """Create the main API router with all v1 routes."""
    from aupair.api.v1.bookings import router as bookings_router
    from aupair.api.v1.matches import router as matches_router

    api_router = APIRouter()
    api_router.include_router(matches_router, prefix="/api/v1")
    api_router.include_router(bookings_router, prefix="/api/v1")
    return api_router


__all__ = ["create_api_router"]
