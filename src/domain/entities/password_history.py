"""
PasswordHistory Entity

Record of previous password hashes per user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class PasswordHistory(SQLModel, table=True):
    """
    PasswordHistory entity - one row per password a user has set.

    Business Rules:
    - Written in the same transaction as the credential update
    - Consulted by the organization policy's not_recent_count rule
    """

    __tablename__ = "password_histories"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", index=True)
    password_hash: str = Field(max_length=60)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_password_history_user_created", "user_id", "created_at"),)
