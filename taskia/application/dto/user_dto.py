"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from taskia.application.dto.validators import CpfStr, PhoneStr, check_birth_date
from taskia.domain.models.user import User

MAX_EMAIL_LENGTH = 150


class CreateUserRequest(BaseModel):
    """DTO for creating a user. The initial password is the birth date (ddMMyyyy)."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Maria Silva",
                "email": "maria.silva@example.com",
                "cpf": "529.982.247-25",
                "birth_date": "1998-11-25",
                "phone": "+55 11 91234-5678",
            }
        },
    )

    name: str = Field(..., min_length=3, max_length=100, description="Full name")
    email: EmailStr = Field(..., description="E-mail address (stored lower-case)")
    cpf: CpfStr = Field(..., description="CPF, with or without punctuation")
    birth_date: date = Field(..., description="Birth date; also the default password")
    phone: PhoneStr = Field(None, description="Optional phone number")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must have at most {MAX_EMAIL_LENGTH} characters")
        return value.lower()

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, value: date) -> date:
        return check_birth_date(value)


class UpdateUserRequest(BaseModel):
    """DTO for updating a user's profile. E-mail and CPF cannot change."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[str] = Field(None, description="Must match the path ID when sent")
    name: str = Field(..., min_length=3, max_length=100)
    phone: PhoneStr = None


class UserDto(BaseModel):
    """DTO for user data. The password digest is never exposed."""
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    cpf: str
    birth_date: Optional[date] = None
    is_email_verified: bool
    is_first_access: bool
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDto":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            cpf=user.cpf,
            birth_date=user.birth_date,
            is_email_verified=user.is_email_verified,
            is_first_access=user.is_first_access,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
