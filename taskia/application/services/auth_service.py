"""
Auth Service
============

Application service for CPF/password authentication and the
first-access password rotation.
"""
from taskia.application.dto.auth_dto import ChangePasswordFirstAccessRequest, LoginRequest, LoginResponse
from taskia.application.services.guard import guarded
from taskia.application.use_cases.auth.change_password_first_access import ChangePasswordFirstAccessUseCase
from taskia.application.use_cases.auth.login import LoginUseCase
from taskia.domain.common.result import Result
from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.domain.repositories.user_repository import UserRepository
from taskia.utils.credentials import normalize_cpf


class AuthService:
    """Application service for authentication."""

    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        self._repository = user_repository
        self._unit_of_work = unit_of_work
        self._login_use_case = LoginUseCase(user_repository)
        self._change_password_use_case = ChangePasswordFirstAccessUseCase(user_repository, unit_of_work)

    @guarded("Error during login")
    def login(self, request: LoginRequest) -> Result[LoginResponse]:
        return self._login_use_case.execute(request)

    @guarded("Error changing password")
    def change_password_first_access(self, request: ChangePasswordFirstAccessRequest) -> Result[LoginResponse]:
        return self._change_password_use_case.execute(request)

    def cpf_exists(self, cpf: str) -> bool:
        """Report whether a user already holds the CPF (punctuation ignored)."""
        return self._repository.cpf_exists(normalize_cpf(cpf))
