"""Domain repository contract for marketplace members."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from aupair.domain.entities.profile import Member, UserRole
from aupair.domain.value_objects import UserId


class IMemberRepository(ABC):
    """Read access to accounts and their profiles.

    Accounts are created by the external registration flow.
    """

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[Member]:
        """Load a member with their role-specific profile."""
        raise NotImplementedError

    @abstractmethod
    async def list_active_by_role(self, role: UserRole) -> List[Member]:
        """Active members of a role, oldest account first."""
        raise NotImplementedError
