"""
MongoDB Indexes
===============

Unique indexes backing the uniqueness rules at the persistence boundary.
"""
import logging

from pymongo import ASCENDING, DESCENDING

from taskia.core.config import Settings
from taskia.domain.constants.project_fields import ProjectFields
from taskia.domain.constants.user_fields import UserFields
from taskia.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


def ensure_indexes(mongo_client: MongoClientManager, settings: Settings) -> None:
    """
    Create the collection indexes if they are missing.

    Project names are only unique among active projects, which the service
    checks; the project indexes here are for lookups only.
    """
    users = mongo_client.get_collection(settings.users_collection)
    users.create_index([(UserFields.ID, ASCENDING)], unique=True, name="ux_users_id")
    users.create_index([(UserFields.EMAIL, ASCENDING)], unique=True, name="ux_users_email")
    users.create_index([(UserFields.CPF, ASCENDING)], unique=True, name="ux_users_cpf")

    projects = mongo_client.get_collection(settings.projects_collection)
    projects.create_index([(ProjectFields.ID, ASCENDING)], unique=True, name="ux_projects_id")
    projects.create_index(
        [(ProjectFields.NAME_NORMALIZED, ASCENDING), (ProjectFields.IS_ACTIVE, ASCENDING)],
        name="ix_projects_name",
    )
    projects.create_index(
        [(ProjectFields.USER_ID, ASCENDING), (ProjectFields.CREATED_AT, DESCENDING)],
        name="ix_projects_user",
    )
    logger.info(f"Indexes ensured on '{settings.users_collection}' and '{settings.projects_collection}'")
