from datetime import date
from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from taskia.application.services.user_service import UserService
from taskia.core.config import Settings
from taskia.domain.models.user import User
from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.domain.repositories.user_repository import UserRepository
from taskia.infrastructure.db.indexes import ensure_indexes
from taskia.infrastructure.db.mongo_connection import MongoClientManager
from taskia.infrastructure.db.mongo_unit_of_work import MongoUnitOfWork


def test_nothing_is_written_before_commit(container):
    unit_of_work = container.get(UnitOfWork)
    repository = container.get(UserRepository, unit_of_work=unit_of_work)
    user = User(name="Maria Silva", email="maria@gmail.com", cpf="52998224725")

    repository.add(user)

    assert unit_of_work.has_pending_changes
    assert repository.get_by_id(user.id) is None

    assert unit_of_work.commit() == 1
    assert repository.get_by_id(user.id).name == "Maria Silva"
    assert not unit_of_work.has_pending_changes


def test_rollback_discards_staged_writes(container):
    unit_of_work = container.get(UnitOfWork)
    repository = container.get(UserRepository, unit_of_work=unit_of_work)
    user = User(name="Maria Silva", email="maria@gmail.com", cpf="52998224725")

    with unit_of_work:
        repository.add(user)

    assert not unit_of_work.has_pending_changes
    assert unit_of_work.commit() == 0
    assert not repository.exists(user.id)


def test_updating_an_unknown_entity_fails_on_commit(container):
    unit_of_work = container.get(UnitOfWork)
    repository = container.get(UserRepository, unit_of_work=unit_of_work)

    repository.update(User(name="Ghost"))

    with pytest.raises(ValueError):
        unit_of_work.commit()


def test_commit_applies_writes_inside_a_session_transaction():
    session = MagicMock()
    session.with_transaction.side_effect = lambda callback: callback(session)
    mongo_client = MagicMock(spec=MongoClientManager)
    mongo_client.start_session.return_value.__enter__.return_value = session
    collection = MagicMock()
    collection.replace_one.return_value.matched_count = 1

    unit_of_work = MongoUnitOfWork(mongo_client, use_transactions=True)
    unit_of_work.register_new(collection, {"id": "1"})
    unit_of_work.register_dirty(collection, {"id": "2"}, {"id": "2", "name": "Maria"})

    assert unit_of_work.commit() == 2
    session.with_transaction.assert_called_once()
    collection.insert_one.assert_called_once_with({"id": "1"}, session=session)
    collection.replace_one.assert_called_once_with({"id": "2"}, {"id": "2", "name": "Maria"}, session=session)


def _stage_user(container, email: str, cpf: str) -> UnitOfWork:
    unit_of_work = container.get(UnitOfWork)
    repository = container.get(UserRepository, unit_of_work=unit_of_work)
    repository.add(User(name="Maria Silva", email=email, cpf=cpf, birth_date=date(1998, 11, 25)))
    return unit_of_work


def test_unique_indexes_reject_duplicate_email_at_commit(container):
    ensure_indexes(container.get("mongo_client"), container.get(Settings))
    _stage_user(container, "dup@gmail.com", "52998224725").commit()

    with pytest.raises(DuplicateKeyError):
        _stage_user(container, "dup@gmail.com", "11144477735").commit()


def test_unique_indexes_reject_duplicate_cpf_at_commit(container):
    ensure_indexes(container.get("mongo_client"), container.get(Settings))
    _stage_user(container, "maria@gmail.com", "52998224725").commit()

    with pytest.raises(DuplicateKeyError):
        _stage_user(container, "joao@gmail.com", "52998224725").commit()


def test_duplicate_key_race_becomes_failure_result(container, user_request, monkeypatch):
    ensure_indexes(container.get("mongo_client"), container.get(Settings))
    _stage_user(container, "maria.silva@gmail.com", "11144477735").commit()

    unit_of_work = container.get(UnitOfWork)
    repository = container.get(UserRepository, unit_of_work=unit_of_work)
    # Another request inserted the same e-mail after this one checked
    monkeypatch.setattr(repository, "email_exists", lambda email: False)
    service = UserService(repository, unit_of_work)

    result = service.create(user_request())

    assert result.is_failure
    assert result.message.startswith("Error creating user: ")
    assert not unit_of_work.has_pending_changes
    assert len([user for user in repository.get_active_users() if user.email == "maria.silva@gmail.com"]) == 1
