"""Application layer entry points.

Use-case services coordinating domain logic with repository ports. Import
services directly from their modules:
    from aupair.application.match_service import MatchApplicationService
    from aupair.application.booking_service import BookingApplicationService
"""
