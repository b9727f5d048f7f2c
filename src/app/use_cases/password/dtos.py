"""
Password Recovery Use Case DTOs (Data Transfer Objects)

Outcome and settings models shared by the password recovery use cases.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from libs.result import Error
from src.domain.entities import ResetErrorCode, User


# ============================================================================
# Settings
# ============================================================================


class PasswordResetSettings(BaseModel):
    """Reset link composition and token lifetime"""

    gateway_url: str
    reset_page_path: str = "/oauth/password/reset_page"
    token_ttl_minutes: int = 10

    @classmethod
    def from_config(cls, config) -> "PasswordResetSettings":
        return cls(
            gateway_url=config.GATEWAY_URL,
            reset_page_path=config.RESET_PAGE_PATH,
            token_ttl_minutes=config.RESET_URL_EXPIRE_MINUTES,
        )

    def reset_url(self, token: str) -> str:
        return f"{self.gateway_url}{self.reset_page_path}/{token}"


# ============================================================================
# Response DTOs
# ============================================================================


class UserProjection(BaseModel):
    """Minimal user information returned to callers"""

    id: str
    login_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserProjection":
        return cls(id=str(user.id), login_name=user.login_name, email=user.email)


class ResetResult(BaseModel):
    """
    Outcome of a password recovery step

    Immutable once built. Carries everything a front end needs to render
    the response without matching on message text.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    code: Optional[ResetErrorCode] = None
    message: Optional[str] = None
    user: Optional[UserProjection] = None
    cooldown_remaining: Optional[int] = None

    @classmethod
    def ok(cls, user: Optional[UserProjection] = None) -> "ResetResult":
        return cls(success=True, user=user)

    @classmethod
    def fail(
        cls,
        error: Error,
        user: Optional[UserProjection] = None,
        cooldown_remaining: Optional[int] = None,
    ) -> "ResetResult":
        return cls(
            success=False,
            code=error.code,
            message=error.message,
            user=user,
            cooldown_remaining=cooldown_remaining,
        )

    def to_error(self) -> Error:
        """Error view of a failed outcome, for the API error handlers"""
        details = {}
        if self.cooldown_remaining is not None:
            details["cooldown_remaining"] = self.cooldown_remaining
        return Error(self.code.value if self.code else "", self.message or "", details)
