"""
Shared validation rules
=======================

Reusable checks called from the request models' pydantic validators.
Each raises ValueError with the message shown to the client.
"""
from datetime import date
from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator, StringConstraints

from taskia.utils.credentials import is_valid_cpf_format, normalize_cpf
from taskia.utils.datetime_utils import today

MAX_AGE_YEARS = 120


def clean_cpf(value):
    """Normalize a CPF before the length/digit check."""
    if isinstance(value, str):
        return normalize_cpf(value)
    return value


def check_cpf(value: str) -> str:
    if not value:
        raise ValueError("CPF is required")
    if not value.isdigit():
        raise ValueError("CPF must contain only numbers")
    if not is_valid_cpf_format(value):
        raise ValueError("CPF must have 11 digits")
    return value


def blank_to_none(value):
    """Treat empty optional strings as missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _years_ago(years: int, reference: date) -> date:
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return reference.replace(year=reference.year - years, day=28)


def check_birth_date(value: date) -> date:
    current = today()
    if value >= current:
        raise ValueError("Birth date must be before today")
    if value <= _years_ago(MAX_AGE_YEARS, current):
        raise ValueError("Birth date is invalid")
    return value


def check_schedule(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise ValueError("End date must be greater than or equal to the start date")


# Annotated field types carrying the reusable rules
CpfStr = Annotated[str, BeforeValidator(clean_cpf), AfterValidator(check_cpf)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
PhoneStr = Annotated[Optional[Annotated[str, StringConstraints(max_length=20)]], BeforeValidator(blank_to_none)]
ObjectiveStr = Annotated[Optional[Annotated[str, StringConstraints(max_length=1000)]], BeforeValidator(blank_to_none)]
