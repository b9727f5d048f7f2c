"""
PasswordPolicy Entity

Organization-level password rules.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class PasswordPolicy(SQLModel, table=True):
    """
    PasswordPolicy entity - password rules owned by one organization.

    Business Rules:
    - At most one policy per organization
    - enable_password=True means the organization governs length and
      complexity; the system-wide length setting is skipped
    - Count fields are minimums; zero or None disables the rule
    - not_recent_count forbids reusing the last N passwords
    """

    __tablename__ = "password_policies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(unique=True, index=True)

    enable_password: bool = Field(default=False)

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    digits_count: Optional[int] = None
    lowercase_count: Optional[int] = None
    uppercase_count: Optional[int] = None
    special_char_count: Optional[int] = None
    not_username: bool = Field(default=False)
    regular_expression: Optional[str] = Field(default=None, max_length=255)
    not_recent_count: Optional[int] = None
