from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from taskia.application.dto.auth_dto import ChangePasswordFirstAccessRequest, LoginRequest
from taskia.application.dto.project_dto import CreateProjectRequest, UpdateProjectRequest
from taskia.application.dto.user_dto import CreateUserRequest, UpdateUserRequest
from taskia.domain.constants.project_status import ProjectStatus

VALID_USER = {
    "name": "Maria Silva",
    "email": "Maria.Silva@Gmail.com",
    "cpf": "529.982.247-25",
    "birth_date": "1998-11-25",
}


def _messages(exc_info) -> str:
    return " | ".join(error["msg"] for error in exc_info.value.errors())


def test_create_user_normalizes_cpf_and_email():
    request = CreateUserRequest(**VALID_USER)

    assert request.cpf == "52998224725"
    assert request.email == "maria.silva@gmail.com"
    assert request.phone is None


@pytest.mark.parametrize(
    "cpf, message",
    [
        ("", "CPF is required"),
        ("5299822472a", "CPF must contain only numbers"),
        ("5299822472", "CPF must have 11 digits"),
    ],
)
def test_create_user_rejects_bad_cpf(cpf, message):
    with pytest.raises(ValidationError) as exc_info:
        CreateUserRequest(**{**VALID_USER, "cpf": cpf})

    assert message in _messages(exc_info)


def test_create_user_rejects_future_birth_date():
    tomorrow = date.today() + timedelta(days=2)

    with pytest.raises(ValidationError) as exc_info:
        CreateUserRequest(**{**VALID_USER, "birth_date": tomorrow.isoformat()})

    assert "Birth date must be before today" in _messages(exc_info)


def test_create_user_rejects_implausibly_old_birth_date():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserRequest(**{**VALID_USER, "birth_date": "1890-01-01"})

    assert "Birth date is invalid" in _messages(exc_info)


def test_create_user_rejects_short_name_and_bad_email():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserRequest(**{**VALID_USER, "name": "Al", "email": "not-an-email"})

    fields = {error["loc"][0] for error in exc_info.value.errors()}
    assert fields == {"name", "email"}


def test_create_user_rejects_long_phone():
    with pytest.raises(ValidationError):
        CreateUserRequest(**{**VALID_USER, "phone": "1" * 21})


def test_update_user_blank_phone_becomes_none():
    request = UpdateUserRequest(name="Maria Souza", phone="  ")

    assert request.phone is None


def test_login_requires_password():
    with pytest.raises(ValidationError):
        LoginRequest(cpf="52998224725", password="")


def test_change_password_requires_matching_confirmation():
    with pytest.raises(ValidationError) as exc_info:
        ChangePasswordFirstAccessRequest(
            cpf="52998224725",
            current_password="25111998",
            new_password="NewSecret1",
            confirm_password="NewSecret2",
        )

    assert "Passwords do not match" in _messages(exc_info)


def test_change_password_enforces_length():
    with pytest.raises(ValidationError):
        ChangePasswordFirstAccessRequest(
            cpf="52998224725",
            current_password="25111998",
            new_password="short",
            confirm_password="short",
        )


def test_create_project_defaults_to_draft():
    request = CreateProjectRequest(name="Alpha", user_id="u-1", status="")

    assert request.status == ProjectStatus.DRAFT
    assert request.objective is None


def test_create_project_rejects_inactive_status():
    with pytest.raises(ValidationError) as exc_info:
        CreateProjectRequest(name="Alpha", user_id="u-1", status=ProjectStatus.INACTIVE)

    assert "Invalid status" in _messages(exc_info)


def test_project_end_date_must_not_precede_start():
    with pytest.raises(ValidationError) as exc_info:
        UpdateProjectRequest(
            name="Alpha",
            status=ProjectStatus.ACTIVE,
            start_date="2026-03-01",
            end_date="2026-02-28",
        )

    assert "End date must be greater than or equal to the start date" in _messages(exc_info)


def test_project_same_start_and_end_date_is_valid():
    request = CreateProjectRequest(name="Alpha", user_id="u-1", start_date="2026-03-01", end_date="2026-03-01")

    assert request.start_date == request.end_date
