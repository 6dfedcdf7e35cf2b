"""
User Service
============

Application service that coordinates user-related operations.
Every operation returns a Result; unexpected errors become failures.
"""
import logging
from typing import List

from taskia.application.dto.user_dto import CreateUserRequest, UpdateUserRequest, UserDto
from taskia.application.services.guard import guarded
from taskia.application.use_cases.user.create_user import CreateUserUseCase
from taskia.domain.common.result import Result
from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user operations.

    Users are never removed; ``delete`` deactivates them.
    """

    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        """
        Initialize service with repository and unit of work.

        Args:
            user_repository: Repository for user persistence
            unit_of_work: Unit of work shared with the repository
        """
        self._repository = user_repository
        self._unit_of_work = unit_of_work
        self._create_use_case = CreateUserUseCase(user_repository, unit_of_work)

    @guarded("Error creating user")
    def create(self, request: CreateUserRequest) -> Result[UserDto]:
        return self._create_use_case.execute(request)

    @guarded("Error getting user")
    def get_by_id(self, user_id: str) -> Result[UserDto]:
        user = self._repository.get_by_id(user_id)
        if user is None:
            return Result.failure(f"User not found with ID {user_id}")
        return Result.success(UserDto.from_entity(user), "User found")

    @guarded("Error listing users")
    def get_all(self) -> Result[List[UserDto]]:
        """List active users, newest first."""
        users = [UserDto.from_entity(user) for user in self._repository.get_active_users()]
        return Result.success(users, f"{len(users)} user(s) found")

    @guarded("Error updating user")
    def update(self, user_id: str, request: UpdateUserRequest) -> Result[UserDto]:
        """
        Update name and phone.

        Returns:
            Result with the updated user; failure when the user is missing
            or deactivated
        """
        user = self._repository.get_by_id(user_id)
        if user is None:
            return Result.failure(f"User not found with ID {user_id}")

        if not user.is_active:
            return Result.failure("User is deactivated and cannot be updated")

        user.update_profile(request.name, request.phone)
        self._repository.update(user)
        self._unit_of_work.commit()

        logger.info(f"User {user_id} updated")
        return Result.success(UserDto.from_entity(user), "User updated successfully")

    @guarded("Error deleting user")
    def delete(self, user_id: str) -> Result[None]:
        """Soft-delete a user. Deleting an already deactivated user succeeds."""
        user = self._repository.get_by_id(user_id)
        if user is None:
            return Result.failure(f"User not found with ID {user_id}")

        if not user.is_active:
            return Result.success(message="User is already deactivated")

        user.soft_delete()
        self._repository.update(user)
        self._unit_of_work.commit()

        logger.info(f"User {user_id} deactivated")
        return Result.success(message="User deactivated successfully")

    @guarded("Error searching user by email")
    def find_by_email(self, email: str) -> Result[List[UserDto]]:
        """Look up a user by e-mail; the payload holds zero or one users."""
        user = self._repository.get_by_email(email)
        if user is None:
            return Result.success([], "No user found with this email")
        return Result.success([UserDto.from_entity(user)], "User found")

    def email_exists(self, email: str) -> bool:
        return self._repository.email_exists(email)
