"""Pure domain representation of match aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from aupair.domain.entities.profile import UserRole
from aupair.domain.exceptions import ValidationError
from aupair.domain.value_objects import MatchId, MatchScore, UserId


class MatchStatus(str, Enum):
    """Lifecycle status for a match request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class Match:
    """A match request between a host family and an au pair."""

    id: MatchId
    host_id: UserId
    au_pair_id: UserId
    match_score: MatchScore
    initiated_by: UserRole
    status: MatchStatus = MatchStatus.PENDING
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.host_id, self.au_pair_id)

    @property
    def is_approved(self) -> bool:
        return self.status == MatchStatus.APPROVED

    def transition_to(self, status: MatchStatus, now: datetime, notes: Optional[str] = None) -> None:
        """Approve or reject the match; empty notes keep the previous ones."""
        if status not in (MatchStatus.APPROVED, MatchStatus.REJECTED):
            raise ValidationError("Status must be APPROVED or REJECTED")
        self.status = status
        self.notes = notes or self.notes
        self.updated_at = now


__all__ = ["MatchStatus", "Match"]
