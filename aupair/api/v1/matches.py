"""
Match API Endpoints

Potential match discovery, match requests and their approval lifecycle.
"""

from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, HTTPException, Path, Query, status

from aupair.api.dependencies import (
    CurrentUserDep,
    MatchServiceDep,
    SettingsDep,
    map_domain_exception_to_http,
)
from aupair.api.schemas.match_schemas import (
    MatchEnvelope,
    MatchListResponse,
    MatchRequest,
    MatchResponse,
    MatchStatusUpdate,
    MessageResponse,
    PotentialMatchesResponse,
    PotentialMatchResponse,
)
from aupair.domain.entities.match import MatchStatus
from aupair.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("/potential", response_model=PotentialMatchesResponse)
async def get_potential_matches(
    current_user: CurrentUserDep,
    match_service: MatchServiceDep,
    settings: SettingsDep,
    limit: Optional[int] = Query(None, ge=0, description="Maximum number of matches"),
) -> PotentialMatchesResponse:
    """
    Rank active counterparts of the caller by compatibility.

    Au pairs see host families and host families see au pairs; each
    result carries its score and the per-factor breakdown.
    """
    effective_limit = settings.DEFAULT_MATCH_LIMIT if limit is None else limit
    effective_limit = min(effective_limit, settings.MAX_MATCH_LIMIT)

    try:
        ranked = await match_service.find_potential_matches(current_user.user_id, effective_limit)
        return PotentialMatchesResponse(
            matches=[PotentialMatchResponse.from_ranked(item) for item in ranked]
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/my-matches", response_model=MatchListResponse)
async def get_my_matches(
    current_user: CurrentUserDep,
    match_service: MatchServiceDep,
    status_filter: Optional[MatchStatus] = Query(None, alias="status", description="Filter by status"),
) -> MatchListResponse:
    try:
        matches = await match_service.list_matches(current_user.user_id, status_filter)
        return MatchListResponse(matches=[MatchResponse.from_domain(match) for match in matches])

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("", response_model=MatchEnvelope, status_code=status.HTTP_201_CREATED)
async def create_match_request(
    request: MatchRequest,
    current_user: CurrentUserDep,
    match_service: MatchServiceDep,
) -> MatchEnvelope:
    """Send a match request to an au pair or host family."""
    try:
        match = await match_service.request_match(
            current_user.user_id,
            str(request.target_user_id) if request.target_user_id else None,
            request.notes,
        )
        return MatchEnvelope(
            message="Match request sent successfully",
            match=MatchResponse.from_domain(match),
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to create match request", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{match_id}/status", response_model=MatchEnvelope)
async def update_match_status(
    update: MatchStatusUpdate,
    current_user: CurrentUserDep,
    match_service: MatchServiceDep,
    match_id: UUID = Path(..., description="Match identifier"),
) -> MatchEnvelope:
    try:
        match = await match_service.update_match_status(
            current_user.user_id, str(match_id), update.status, update.notes
        )
        return MatchEnvelope(
            message="Match status updated successfully",
            match=MatchResponse.from_domain(match),
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{match_id}", response_model=MessageResponse)
async def delete_match(
    current_user: CurrentUserDep,
    match_service: MatchServiceDep,
    match_id: UUID = Path(..., description="Match identifier"),
) -> MessageResponse:
    try:
        await match_service.delete_match(current_user.user_id, str(match_id))
        return MessageResponse(message="Match deleted successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
