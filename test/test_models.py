from datetime import date

import pytest

from taskia.domain.constants.project_status import ProjectStatus
from taskia.domain.models.project import Project, normalize_name
from taskia.domain.models.user import User
from taskia.utils.credentials import hash_password, normalize_cpf, verify_password
from taskia.utils.datetime_utils import date_to_iso, parse_date


def test_new_entity_has_identity_and_no_update_time():
    user = User(name="Maria")

    assert user.id
    assert user.created_at.tzinfo is not None
    assert user.updated_at is None
    assert user.is_active
    assert User().id != user.id


def test_default_password_is_birth_date_ddmmyyyy():
    user = User(birth_date=date(1998, 11, 25))

    assert user.get_default_password() == "25111998"


def test_default_password_requires_birth_date():
    with pytest.raises(ValueError):
        User().get_default_password()


def test_set_password_leaves_first_access():
    user = User(birth_date=date(1998, 11, 25), password_hash=hash_password("25111998"))

    user.set_password(hash_password("NewSecret1"))

    assert not user.is_first_access
    assert user.updated_at is not None
    assert verify_password("NewSecret1", user.password_hash)
    assert not verify_password("25111998", user.password_hash)


def test_soft_delete_keeps_record_and_stamps_update():
    project = Project(name="Alpha")

    project.soft_delete()

    assert not project.is_active
    assert project.updated_at is not None


def test_update_status_ignores_unknown_values():
    project = Project(name="Alpha")

    project.update_status("Archived")
    assert project.status == ProjectStatus.DRAFT
    assert project.updated_at is None

    project.update_status(ProjectStatus.PAUSED)
    assert project.status == ProjectStatus.PAUSED


def test_set_inactive_changes_status_not_soft_delete_flag():
    project = Project(name="Alpha", status=ProjectStatus.ACTIVE)

    project.set_inactive()

    assert project.status == ProjectStatus.INACTIVE
    assert project.is_active


def test_normalize_helpers():
    assert normalize_name("  Onboarding Revamp ") == "onboarding revamp"
    assert normalize_cpf("529.982.247-25") == "52998224725"
    assert normalize_cpf("529 982 247 25") == "52998224725"


def test_calendar_dates_are_stored_as_iso_strings():
    assert date_to_iso(date(1998, 11, 25)) == "1998-11-25"
    assert date_to_iso(None) is None
    assert parse_date("1998-11-25") == date(1998, 11, 25)
    assert parse_date(None) is None
