"""
User Model
==========

Domain model representing a user account.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from taskia.domain.models.base_entity import BaseEntity

DEFAULT_PASSWORD_FORMAT = "%d%m%Y"


@dataclass
class User(BaseEntity):
    """
    User domain model.

    The CPF is stored digits-only and the e-mail lower-cased. New accounts
    start with the default password (birth date as ddMMyyyy) and
    ``is_first_access`` set until the password is rotated.
    """
    name: str = ""
    email: str = ""
    cpf: str = ""
    birth_date: Optional[date] = None
    phone: Optional[str] = None
    password_hash: str = ""
    is_email_verified: bool = False
    is_first_access: bool = True

    def update_profile(self, name: str, phone: Optional[str]) -> None:
        """Update name and phone."""
        self.name = name
        self.phone = phone
        self.touch()

    def get_default_password(self) -> str:
        """Default password derived from the birth date (ddMMyyyy)."""
        if self.birth_date is None:
            raise ValueError("Birth date is required to derive the default password")
        return self.birth_date.strftime(DEFAULT_PASSWORD_FORMAT)

    def set_password(self, password_hash: str) -> None:
        """Store a new password digest and leave first-access mode."""
        self.password_hash = password_hash
        self.is_first_access = False
        self.touch()
