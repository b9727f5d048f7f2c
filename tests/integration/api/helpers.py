"""
Shared data builders for API integration tests.
"""
from typing import Optional
from uuid import UUID

import bcrypt
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import PasswordPolicy, SystemSetting, User


async def create_user(
    db_session: AsyncSession,
    email: str = "reset@example.com",
    login_name: str = "reset-user",
    organization_id: Optional[UUID] = None,
    is_federated: bool = False,
) -> User:
    password_hash = bcrypt.hashpw("OldPass123!".encode(), bcrypt.gensalt(4))

    user = User(
        login_name=login_name,
        email=email,
        real_name="Reset User",
        password_hash=password_hash.decode(),
        organization_id=organization_id,
        is_federated=is_federated,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


async def create_system_setting(
    db_session: AsyncSession, min_length: int = 8, max_length: int = 20
) -> SystemSetting:
    setting = SystemSetting(min_password_length=min_length, max_password_length=max_length)
    db_session.add(setting)
    await db_session.commit()
    return setting


async def create_password_policy(
    db_session: AsyncSession, organization_id: UUID, **rules
) -> PasswordPolicy:
    policy = PasswordPolicy(organization_id=organization_id, **rules)
    db_session.add(policy)
    await db_session.commit()
    return policy
