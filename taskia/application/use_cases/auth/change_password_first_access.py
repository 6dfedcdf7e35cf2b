"""
Change Password (First Access) Use Case
=======================================

Replaces the default password and leaves first-access mode.
"""
import logging

from taskia.application.dto.auth_dto import ChangePasswordFirstAccessRequest, LoginResponse
from taskia.domain.common.result import Result
from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.domain.repositories.user_repository import UserRepository
from taskia.utils.credentials import hash_password, verify_password

logger = logging.getLogger(__name__)


class ChangePasswordFirstAccessUseCase:
    """
    Use case for the first-access password rotation.

    The current password must be presented, and the new one may be
    neither the current password nor the birth-date default.
    """

    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        self._repository = user_repository
        self._unit_of_work = unit_of_work

    def execute(self, request: ChangePasswordFirstAccessRequest) -> Result[LoginResponse]:
        # Distinct failure messages here; only login hides whether the CPF exists
        user = self._repository.get_by_cpf(request.cpf)
        if user is None:
            return Result.failure("User not found")

        if not user.is_active:
            return Result.failure("User is deactivated")

        if not verify_password(request.current_password, user.password_hash):
            return Result.failure("Current password is invalid")

        new_password_hash = hash_password(request.new_password)
        if new_password_hash == user.password_hash:
            return Result.failure("New password cannot be the same as the current password")

        if request.new_password == user.get_default_password():
            return Result.failure("New password cannot be the default password (birth date)")

        user.set_password(new_password_hash)
        self._repository.update(user)
        self._unit_of_work.commit()

        logger.info(f"User {user.id} changed the first-access password")
        return Result.success(LoginResponse.from_entity(user), "Password changed successfully")
