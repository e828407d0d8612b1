"""
Mapper between Member domain entities and the account / profile tables.
"""

from __future__ import annotations

from typing import Optional

from aupair.domain.entities.profile import AuPairProfile, HostFamilyProfile, Member, UserRole
from aupair.domain.value_objects import UserId
from aupair.infrastructure.persistence.models.member_tables import (
    AuPairProfileTable,
    HostFamilyProfileTable,
    UserTable,
)


class MemberMapper:
    """Maps an account row plus optional profile rows to a Member."""

    @staticmethod
    def to_domain(
        user: UserTable,
        au_pair: Optional[AuPairProfileTable] = None,
        host_family: Optional[HostFamilyProfileTable] = None,
    ) -> Member:
        return Member(
            id=UserId(user.id),
            email=user.email,
            role=UserRole(user.role),
            is_active=user.is_active,
            created_at=user.created_at,
            au_pair_profile=MemberMapper.au_pair_to_domain(au_pair) if au_pair else None,
            host_family_profile=(
                MemberMapper.host_family_to_domain(host_family) if host_family else None
            ),
        )

    @staticmethod
    def au_pair_to_domain(table: AuPairProfileTable) -> AuPairProfile:
        return AuPairProfile(
            first_name=table.first_name,
            last_name=table.last_name,
            languages=list(table.languages or []),
            preferred_countries=list(table.preferred_countries or []),
            date_of_birth=table.date_of_birth,
            available_from=table.available_from,
            available_to=table.available_to,
            hourly_rate=table.hourly_rate,
            currency=table.currency,
            profile_photo_url=table.profile_photo_url,
        )

    @staticmethod
    def host_family_to_domain(table: HostFamilyProfileTable) -> HostFamilyProfile:
        return HostFamilyProfile(
            family_name=table.family_name,
            contact_person_name=table.contact_person_name,
            country=table.country,
            preferred_languages=list(table.preferred_languages or []),
            children_ages=list(table.children_ages or []),
            max_budget=table.max_budget,
            currency=table.currency,
            profile_photo_url=table.profile_photo_url,
        )
