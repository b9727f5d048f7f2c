import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.password import PasswordResetSettings
from tests.fixtures.fakes import FakeClock, InMemoryTokenStore, RecordingNotifier


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.update_credentials = AsyncMock()

    uow.password_policies = MagicMock()
    uow.password_policies.get_by_organization_id = AsyncMock(return_value=None)

    uow.system_settings = MagicMock()
    uow.system_settings.get = AsyncMock(return_value=None)

    uow.password_histories = MagicMock()
    uow.password_histories.create = AsyncMock()
    uow.password_histories.get_recent_by_user_id = AsyncMock(return_value=[])

    return uow


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_store(clock):
    return InMemoryTokenStore(clock, cooldown_seconds=60)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def settings():
    return PasswordResetSettings(
        gateway_url="https://gateway.example.com",
        reset_page_path="/oauth/password/reset_page",
        token_ttl_minutes=10,
    )
