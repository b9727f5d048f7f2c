from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.notifier import INotifier
from src.app.services.token_store import ITokenStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.password import (
    CheckCooldownUseCase,
    CheckResetTokenUseCase,
    CheckUserByEmailUseCase,
    ConfirmPasswordResetUseCase,
    PasswordResetSettings,
    RequestPasswordResetUseCase,
    ResetResult,
)
from src.depends import get_notifier, get_reset_settings, get_token_store, get_unit_of_work
from src.domain.entities import ResetErrorCode

router = APIRouter(prefix="/password", tags=["Password"])

CLIENT_ERROR_STATUS = {
    ResetErrorCode.EMAIL_FORMAT_INVALID: status.HTTP_400_BAD_REQUEST,
    ResetErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResetErrorCode.FEDERATED_ACCOUNT_CANNOT_RESET: status.HTTP_403_FORBIDDEN,
    ResetErrorCode.COOLDOWN_ACTIVE: status.HTTP_429_TOO_MANY_REQUESTS,
    ResetErrorCode.INVALID_OR_EXPIRED_TOKEN: status.HTTP_400_BAD_REQUEST,
    ResetErrorCode.PASSWORD_POLICY_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ResetErrorCode.NOTIFICATION_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def _unwrap(result: ResetResult) -> ResetResult:
    """Raise the API error matching a failed outcome"""
    if result.success:
        return result

    error = result.to_error()
    if result.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[result.code])
    raise ServerError(error)


@router.get("/check-email", status_code=status.HTTP_200_OK, response_model=ResetResult)
async def check_email(
    email: str = Query(..., description="Email address to recover"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Check that an email belongs to a resettable account

    Raises:
        - 400 Bad Request: Malformed email
        - 404 Not Found: No account with this email
        - 403 Forbidden: Directory-managed account
    """
    use_case = CheckUserByEmailUseCase(uow)
    return _unwrap(await use_case.execute(email))


@router.get("/cooldown", status_code=status.HTTP_200_OK, response_model=ResetResult)
async def check_cooldown(
    email: str = Query(..., description="Email address to recover"),
    token_store: ITokenStore = Depends(get_token_store),
):
    """
    Check whether a reset email may be sent to this address now

    Raises:
        - 429 Too Many Requests: Cooldown active, details carry the remaining seconds
    """
    use_case = CheckCooldownUseCase(token_store)
    return _unwrap(await use_case.execute(email))


class SendResetEmailRequest(BaseModel):
    """
    Send reset email HTTP request payload

    Email format is checked by the use case so it can report EMAIL_FORMAT_INVALID.
    """

    email: str = Field(..., description="Email address to recover")


@router.post("/send-reset-email", status_code=status.HTTP_200_OK, response_model=ResetResult)
async def send_reset_email(
    request: SendResetEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_store: ITokenStore = Depends(get_token_store),
    notifier: INotifier = Depends(get_notifier),
    settings: PasswordResetSettings = Depends(get_reset_settings),
):
    """
    Issue a reset token and email the reset link

    Raises:
        - 400, 403, 404: Account check failures
        - 429 Too Many Requests: Cooldown active
        - 502 Bad Gateway: Email could not be sent (the link stays valid)
    """
    use_case = RequestPasswordResetUseCase(uow, token_store, notifier, settings)
    return _unwrap(await use_case.execute(request.email))


class TokenAvailabilityResponse(BaseModel):
    """Response for reset token check"""

    available: bool


@router.get(
    "/tokens/{token}", status_code=status.HTTP_200_OK, response_model=TokenAvailabilityResponse
)
async def check_token(
    token: str,
    token_store: ITokenStore = Depends(get_token_store),
    settings: PasswordResetSettings = Depends(get_reset_settings),
):
    """Check that a reset link is still usable"""
    use_case = CheckResetTokenUseCase(token_store, settings)
    return TokenAvailabilityResponse(available=await use_case.execute(token))


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload

    Password rules are enforced by the organization or system policy.
    """

    token: str = Field(..., description="Password reset token from the reset link")
    password: str = Field(..., min_length=1, description="New password")


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=ResetResult)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_store: ITokenStore = Depends(get_token_store),
    notifier: INotifier = Depends(get_notifier),
    settings: PasswordResetSettings = Depends(get_reset_settings),
):
    """
    Reset the password with a token from a reset link

    Raises:
        - 400 Bad Request: Invalid or expired token, or password rejected by policy
        - 500 Internal Server Error: Password could not be persisted
    """
    use_case = ConfirmPasswordResetUseCase(uow, token_store, notifier, settings)
    return _unwrap(await use_case.execute(request.token, request.password))
