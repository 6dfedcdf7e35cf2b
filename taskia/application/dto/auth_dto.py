"""
Auth DTO
========

Pydantic models for authentication requests and responses.
Passwords are never stripped or transformed.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from taskia.application.dto.validators import CpfStr
from taskia.domain.models.user import User


class LoginRequest(BaseModel):
    """DTO for logging in with CPF and password."""
    model_config = ConfigDict(
        json_schema_extra={"example": {"cpf": "52998224725", "password": "25111998"}}
    )

    cpf: CpfStr = Field(..., description="CPF, with or without punctuation")
    password: str = Field(..., min_length=1, description="Password (default: birth date as ddMMyyyy)")


class ChangePasswordFirstAccessRequest(BaseModel):
    """DTO for replacing the default password on first access."""
    cpf: CpfStr
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=50)
    confirm_password: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def passwords_match(self) -> "ChangePasswordFirstAccessRequest":
        if self.new_password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginResponse(BaseModel):
    """
    DTO returned by login and password rotation.

    ``token`` and ``token_expiration`` are reserved and always empty:
    no session token is issued yet.
    """
    user_id: str
    name: str
    email: str
    cpf: str
    phone: Optional[str] = None
    is_first_access: bool
    token: Optional[str] = None
    token_expiration: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "LoginResponse":
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            cpf=user.cpf,
            phone=user.phone,
            is_first_access=user.is_first_access,
        )
