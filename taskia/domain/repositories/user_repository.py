"""
User Repository Interface
=========================

Abstract interface for user data access.
"""
from abc import abstractmethod
from typing import List, Optional

from taskia.domain.models.user import User
from taskia.domain.repositories.repository import Repository


class UserRepository(Repository[User]):
    """
    Abstract repository for user persistence operations.

    E-mail lookups are case-insensitive; CPF lookups expect the
    digits-only form.
    """

    @abstractmethod
    def get_active_users(self) -> List[User]:
        """Return active users, newest first."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by e-mail."""
        pass

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        """Check if an e-mail is already registered."""
        pass

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[User]:
        """Find a user by CPF."""
        pass

    @abstractmethod
    def cpf_exists(self, cpf: str) -> bool:
        """Check if a CPF is already registered."""
        pass
