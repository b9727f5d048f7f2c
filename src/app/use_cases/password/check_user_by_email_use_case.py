"""
Check User By Email Use Case

Resolves the account a password recovery request is addressed to.
"""

from email_validator import EmailNotValidError, validate_email

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ResetErrorCode
from .dtos import ResetResult, UserProjection


class CheckUserByEmailUseCase:
    """
    Use case for checking that an email belongs to a resettable account.

    Business Rules:
    - Malformed emails are rejected before the directory is queried
    - Unknown emails are reported as ACCOUNT_NOT_FOUND
    - Federated (LDAP-backed) accounts cannot reset their password here
    - No side effects
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> ResetResult:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return ResetResult.fail(
                Error(ResetErrorCode.EMAIL_FORMAT_INVALID, "Email format is invalid")
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return ResetResult.fail(
                    Error(
                        ResetErrorCode.ACCOUNT_NOT_FOUND,
                        "No account is registered with this email",
                    )
                )

            if user.is_federated:
                return ResetResult.fail(
                    Error(
                        ResetErrorCode.FEDERATED_ACCOUNT_CANNOT_RESET,
                        "Password of a directory-managed account cannot be reset here",
                    )
                )

            return ResetResult.ok(UserProjection.from_user(user))
