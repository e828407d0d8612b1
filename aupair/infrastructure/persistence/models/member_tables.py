"""
SQLModel tables for accounts and their role-specific profiles.

Accounts are written by the registration flow; this service only reads them.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlmodel import Field

from aupair.infrastructure.persistence.models.base import TimestampedTable


class UserTable(TimestampedTable, table=True):
    """Marketplace account."""
    __tablename__ = "users"

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True),
        description="Login e-mail"
    )
    role: str = Field(
        sa_column=Column(String(20), nullable=False, index=True),
        description="AU_PAIR, HOST_FAMILY or ADMIN"
    )
    is_active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True, index=True),
        description="Inactive accounts are hidden from matching and booking"
    )


class AuPairProfileTable(TimestampedTable, table=True):
    """Profile filled in by an au pair."""
    __tablename__ = "au_pair_profiles"

    user_id: UUID = Field(
        sa_column=Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        description="Owning account"
    )
    first_name: str = Field(
        sa_column=Column(String(100), nullable=False)
    )
    last_name: str = Field(
        sa_column=Column(String(100), nullable=False)
    )
    languages: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list),
        description="Languages the au pair speaks"
    )
    preferred_countries: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list),
        description="Countries the au pair would like to work in"
    )
    date_of_birth: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True)
    )
    available_from: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    available_to: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    hourly_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 2), nullable=True)
    )
    currency: str = Field(
        default="USD",
        sa_column=Column(String(3), nullable=False, default="USD")
    )
    profile_photo_url: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True)
    )


class HostFamilyProfileTable(TimestampedTable, table=True):
    """Profile filled in by a host family."""
    __tablename__ = "host_family_profiles"

    user_id: UUID = Field(
        sa_column=Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        description="Owning account"
    )
    family_name: str = Field(
        sa_column=Column(String(150), nullable=False)
    )
    contact_person_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(150), nullable=True)
    )
    country: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True, index=True)
    )
    preferred_languages: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list)
    )
    children_ages: List[int] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(Integer), nullable=False, default=list)
    )
    max_budget: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 2), nullable=True)
    )
    currency: str = Field(
        default="USD",
        sa_column=Column(String(3), nullable=False, default="USD")
    )
    profile_photo_url: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True)
    )
