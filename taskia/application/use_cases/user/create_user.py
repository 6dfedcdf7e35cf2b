"""
Create User Use Case
====================

Business use case for registering a new user account.
"""
import logging

from taskia.application.dto.user_dto import CreateUserRequest, UserDto
from taskia.domain.common.result import Result
from taskia.domain.models.user import User
from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.domain.repositories.user_repository import UserRepository
from taskia.utils.credentials import hash_password

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.

    The account starts in first-access mode with the default password
    (birth date as ddMMyyyy).
    """

    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        """
        Initialize use case with repository and unit of work.

        Args:
            user_repository: Repository for user persistence
            unit_of_work: Unit of work the repository stages into
        """
        self._repository = user_repository
        self._unit_of_work = unit_of_work

    def execute(self, request: CreateUserRequest) -> Result[UserDto]:
        """
        Execute the create user use case.

        Args:
            request: Validated creation request

        Returns:
            Result with the created user, or a failure for a duplicate
            e-mail or CPF
        """
        if self._repository.email_exists(request.email):
            return Result.failure("Email already registered. Choose another email for the user.")

        if self._repository.cpf_exists(request.cpf):
            return Result.failure("CPF already registered. Choose another CPF.")

        user = User(
            name=request.name,
            email=request.email.lower(),
            cpf=request.cpf,
            birth_date=request.birth_date,
            phone=request.phone,
        )
        user.password_hash = hash_password(user.get_default_password())

        self._repository.add(user)
        self._unit_of_work.commit()

        logger.info(f"User {user.id} created")
        return Result.success(
            UserDto.from_entity(user),
            "User created successfully. Default password is the birth date (ddMMyyyy); change it on first access.",
        )
