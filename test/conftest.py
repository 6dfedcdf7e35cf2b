from datetime import date

import mongomock
import pytest
from fastapi.testclient import TestClient

from taskia.application.dto.project_dto import CreateProjectRequest
from taskia.application.dto.user_dto import CreateUserRequest
from taskia.application.services.auth_service import AuthService
from taskia.application.services.project_service import ProjectService
from taskia.application.services.user_service import UserService
from taskia.core.config import Settings
from taskia.di.container import DIContainer, get_container
from taskia.infrastructure.db.mongo_connection import MongoClientManager
from taskia.main import create_application

MARIA_CPF = "52998224725"
MARIA_BIRTH_DATE = date(1998, 11, 25)


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DB_NAME", "taskia_test")
    monkeypatch.setenv("MONGO_TRANSACTIONS_ENABLED", "false")
    monkeypatch.setenv("API_PREFIX", "/api")
    return Settings()


@pytest.fixture()
def mongo_client(settings: Settings) -> MongoClientManager:
    return MongoClientManager(client=mongomock.MongoClient(), database_name=settings.mongo_database_name)


@pytest.fixture()
def container(mongo_client: MongoClientManager, settings: Settings) -> DIContainer:
    return DIContainer(mongo_client=mongo_client, settings=settings)


@pytest.fixture()
def user_service(container: DIContainer) -> UserService:
    return container.get(UserService)


@pytest.fixture()
def project_service(container: DIContainer) -> ProjectService:
    return container.get(ProjectService)


@pytest.fixture()
def auth_service(container: DIContainer) -> AuthService:
    return container.get(AuthService)


@pytest.fixture()
def app(container: DIContainer, settings: Settings):
    application = create_application(settings)
    application.dependency_overrides[get_container] = lambda: container
    return application


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def user_request():
    """Builder for valid user creation requests; keyword arguments override fields."""
    def build(**overrides) -> CreateUserRequest:
        values = {
            "name": "Maria Silva",
            "email": "maria.silva@gmail.com",
            "cpf": MARIA_CPF,
            "birth_date": MARIA_BIRTH_DATE,
            "phone": "11912345678",
        }
        values.update(overrides)
        return CreateUserRequest(**values)
    return build


@pytest.fixture()
def project_request():
    def build(user_id: str, **overrides) -> CreateProjectRequest:
        values = {
            "name": "Onboarding revamp",
            "objective": "Cut first-week drop-off",
            "description": "Rework the onboarding flow",
            "start_date": date(2026, 1, 5),
            "end_date": date(2026, 3, 31),
            "user_id": user_id,
        }
        values.update(overrides)
        return CreateProjectRequest(**values)
    return build


@pytest.fixture()
def maria(user_service: UserService, user_request):
    """An active user in first-access mode (CPF 52998224725, born 1998-11-25)."""
    result = user_service.create(user_request())
    assert result.is_success, result.message
    return result.data
