"""
Login Use Case
==============

Checks a CPF/password pair against the stored account.
"""
import logging

from taskia.application.dto.auth_dto import LoginRequest, LoginResponse
from taskia.domain.common.result import Result
from taskia.domain.repositories.user_repository import UserRepository
from taskia.utils.credentials import verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid CPF or password"


class LoginUseCase:
    """
    Use case for logging in.

    A missing account, a deactivated account and a wrong password all
    produce the same failure so responses do not reveal which CPFs exist.
    No session token is issued.
    """

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    def execute(self, request: LoginRequest) -> Result[LoginResponse]:
        """
        Execute the login use case.

        Args:
            request: Validated request; the CPF is already digits-only

        Returns:
            Result with the profile and first-access flag, or the generic
            credentials failure
        """
        user = self._repository.get_by_cpf(request.cpf)
        if user is None or not user.is_active or not verify_password(request.password, user.password_hash):
            logger.info("Login rejected")
            return Result.failure(INVALID_CREDENTIALS_MESSAGE)

        logger.info(f"User {user.id} logged in")
        if user.is_first_access:
            message = "Login successful. Please change your password."
        else:
            message = "Login successful"
        return Result.success(LoginResponse.from_entity(user), message)
