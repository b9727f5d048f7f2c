"""
User Entity

Represents an account that can recover its password by email.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class User(SQLModel, table=True):
    """
    User entity - an identity resolved by email during password recovery.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - Federated (LDAP-backed) users cannot reset their password here
    - organization_id selects the password policy tier
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    login_name: str = Field(unique=True, index=True, max_length=128)
    email: str = Field(unique=True, index=True, max_length=255)
    real_name: Optional[str] = Field(default=None, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    organization_id: Optional[UUID] = Field(default=None)

    # Credentials managed by an external directory
    is_federated: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_organization", "organization_id"),)
