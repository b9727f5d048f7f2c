"""
Unit tests for CheckCooldownUseCase
"""
import pytest

from src.app.use_cases.password import CheckCooldownUseCase
from src.domain.entities import ResetErrorCode


@pytest.mark.asyncio
async def test_no_cooldown_succeeds_without_payload(token_store):
    result = await CheckCooldownUseCase(token_store).execute("user@example.com")

    assert result.success is True
    assert result.cooldown_remaining is None
    assert result.user is None


@pytest.mark.asyncio
async def test_active_cooldown_reports_remaining_seconds(token_store, clock):
    await token_store.set_cooldown("user@example.com")
    clock.advance(20)

    result = await CheckCooldownUseCase(token_store).execute("user@example.com")

    assert result.success is False
    assert result.code == ResetErrorCode.COOLDOWN_ACTIVE
    assert result.cooldown_remaining == 40


@pytest.mark.asyncio
async def test_cooldown_lapses_after_window(token_store, clock):
    await token_store.set_cooldown("user@example.com")
    clock.advance(60)

    result = await CheckCooldownUseCase(token_store).execute("user@example.com")

    assert result.success is True


@pytest.mark.asyncio
async def test_cooldown_is_per_email(token_store):
    await token_store.set_cooldown("first@example.com")

    result = await CheckCooldownUseCase(token_store).execute("second@example.com")

    assert result.success is True
