"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional

from taskia.domain.constants.user_fields import UserFields
from taskia.domain.models.user import User
from taskia.domain.repositories.user_repository import UserRepository
from taskia.infrastructure.db.mongo_connection import MongoClientManager
from taskia.infrastructure.db.mongo_repository import MongoRepository
from taskia.infrastructure.db.mongo_unit_of_work import MongoUnitOfWork
from taskia.utils.datetime_utils import ensure_aware, now, parse_date, date_to_iso


class MongoUserRepository(MongoRepository[User], UserRepository):
    """
    MongoDB implementation of UserRepository.

    Handles all user persistence operations using MongoDB.
    """

    COLLECTION_NAME = "users"

    def __init__(
        self,
        mongo_client: MongoClientManager,
        unit_of_work: MongoUnitOfWork,
        collection_name: Optional[str] = None,
    ):
        super().__init__(mongo_client, unit_of_work, collection_name or self.COLLECTION_NAME)

    def _to_entity(self, doc: Dict[str, Any]) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=doc[UserFields.ID],
            name=doc.get(UserFields.NAME, ""),
            email=doc.get(UserFields.EMAIL, ""),
            cpf=doc.get(UserFields.CPF, ""),
            birth_date=parse_date(doc.get(UserFields.BIRTH_DATE)),
            phone=doc.get(UserFields.PHONE),
            password_hash=doc.get(UserFields.PASSWORD_HASH, ""),
            is_email_verified=doc.get(UserFields.IS_EMAIL_VERIFIED, False),
            is_first_access=doc.get(UserFields.IS_FIRST_ACCESS, True),
            is_active=doc.get(UserFields.IS_ACTIVE, True),
            created_at=ensure_aware(doc.get(UserFields.CREATED_AT)) or now(),
            updated_at=ensure_aware(doc.get(UserFields.UPDATED_AT)),
        )

    def _to_document(self, user: User) -> Dict[str, Any]:
        """Convert User entity to MongoDB document."""
        return {
            UserFields.ID: user.id,
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.CPF: user.cpf,
            UserFields.BIRTH_DATE: date_to_iso(user.birth_date),
            UserFields.PHONE: user.phone,
            UserFields.PASSWORD_HASH: user.password_hash,
            UserFields.IS_EMAIL_VERIFIED: user.is_email_verified,
            UserFields.IS_FIRST_ACCESS: user.is_first_access,
            UserFields.IS_ACTIVE: user.is_active,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }

    def get_active_users(self) -> List[User]:
        """Return active users, newest first."""
        return self._find_many({UserFields.IS_ACTIVE: True})

    def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by e-mail."""
        return self._find_one({UserFields.EMAIL: email.strip().lower()})

    def email_exists(self, email: str) -> bool:
        """Check if an e-mail is already registered."""
        return self._matches({UserFields.EMAIL: email.strip().lower()})

    def get_by_cpf(self, cpf: str) -> Optional[User]:
        """Find a user by CPF."""
        return self._find_one({UserFields.CPF: cpf})

    def cpf_exists(self, cpf: str) -> bool:
        """Check if a CPF is already registered."""
        return self._matches({UserFields.CPF: cpf})
