"""
End-to-end forgot-password scenario over the use cases with a fake clock.

a@b.com, cooldown 60s, token window 10 minutes, system policy 8..20.
"""
from uuid import uuid4

import bcrypt
import pytest

from src.app.use_cases.password import (
    CheckResetTokenUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetUseCase,
)
from src.domain.entities import ResetErrorCode, SystemSetting, User


@pytest.mark.asyncio
async def test_request_cooldown_and_redeem(mock_uow, token_store, notifier, settings, clock):
    user = User(
        id=uuid4(),
        login_name="ab",
        email="a@b.com",
        password_hash="old_hash",
    )
    mock_uow.users.get_by_email.return_value = user

    async def update_credentials(user_id, password_hash):
        user.password_hash = password_hash
        return user

    mock_uow.users.update_credentials.side_effect = update_credentials
    mock_uow.system_settings.get.return_value = SystemSetting(
        id=1, min_password_length=8, max_password_length=20
    )

    request = RequestPasswordResetUseCase(mock_uow, token_store, notifier, settings)
    confirm = ConfirmPasswordResetUseCase(mock_uow, token_store, notifier, settings)
    check = CheckResetTokenUseCase(token_store, settings)

    # t = 0
    issued = await request.execute("a@b.com")
    assert issued.success is True
    token = notifier.last_reset_token()

    # t = 30s
    clock.advance(30)
    again = await request.execute("a@b.com")
    assert again.code == ResetErrorCode.COOLDOWN_ACTIVE
    assert again.cooldown_remaining == 30

    # t = 5min
    clock.advance(270)
    redeemed = await confirm.execute(token, "Sh0rt!pw")
    assert redeemed.success is True
    assert bcrypt.checkpw(b"Sh0rt!pw", user.password_hash.encode())

    assert await check.execute(token) is False
