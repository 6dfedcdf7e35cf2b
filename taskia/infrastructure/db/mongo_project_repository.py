"""
MongoDB Project Repository
==========================

Concrete implementation of ProjectRepository using MongoDB.
"""
import re
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from taskia.domain.constants.project_fields import ProjectFields
from taskia.domain.constants.project_status import ProjectStatus
from taskia.domain.constants.user_fields import UserFields
from taskia.domain.models.project import Project, normalize_name
from taskia.domain.repositories.project_repository import ProjectRepository
from taskia.infrastructure.db.mongo_connection import MongoClientManager
from taskia.infrastructure.db.mongo_repository import MongoRepository
from taskia.infrastructure.db.mongo_unit_of_work import MongoUnitOfWork
from taskia.infrastructure.db.mongo_user_repository import MongoUserRepository
from taskia.utils.datetime_utils import ensure_aware, now, parse_date, date_to_iso


class MongoProjectRepository(MongoRepository[Project], ProjectRepository):
    """
    MongoDB implementation of ProjectRepository.

    Every project read is joined with the users collection to fill
    ``user_name``.
    """

    COLLECTION_NAME = "projects"

    def __init__(
        self,
        mongo_client: MongoClientManager,
        unit_of_work: MongoUnitOfWork,
        collection_name: Optional[str] = None,
        users_collection_name: Optional[str] = None,
    ):
        super().__init__(mongo_client, unit_of_work, collection_name or self.COLLECTION_NAME)
        self._users = mongo_client.get_collection(users_collection_name or MongoUserRepository.COLLECTION_NAME)

    def _to_entity(self, doc: Dict[str, Any]) -> Project:
        """Convert MongoDB document to Project entity."""
        return Project(
            id=doc[ProjectFields.ID],
            name=doc.get(ProjectFields.NAME, ""),
            objective=doc.get(ProjectFields.OBJECTIVE),
            description=doc.get(ProjectFields.DESCRIPTION),
            status=doc.get(ProjectFields.STATUS, ProjectStatus.DRAFT),
            start_date=parse_date(doc.get(ProjectFields.START_DATE)),
            end_date=parse_date(doc.get(ProjectFields.END_DATE)),
            user_id=doc.get(ProjectFields.USER_ID, ""),
            is_active=doc.get(ProjectFields.IS_ACTIVE, True),
            created_at=ensure_aware(doc.get(ProjectFields.CREATED_AT)) or now(),
            updated_at=ensure_aware(doc.get(ProjectFields.UPDATED_AT)),
        )

    def _to_document(self, project: Project) -> Dict[str, Any]:
        """Convert Project entity to MongoDB document."""
        return {
            ProjectFields.ID: project.id,
            ProjectFields.NAME: project.name,
            ProjectFields.NAME_NORMALIZED: normalize_name(project.name),
            ProjectFields.OBJECTIVE: project.objective,
            ProjectFields.DESCRIPTION: project.description,
            ProjectFields.STATUS: project.status,
            ProjectFields.START_DATE: date_to_iso(project.start_date),
            ProjectFields.END_DATE: date_to_iso(project.end_date),
            ProjectFields.USER_ID: project.user_id,
            ProjectFields.IS_ACTIVE: project.is_active,
            ProjectFields.CREATED_AT: project.created_at,
            ProjectFields.UPDATED_AT: project.updated_at,
        }

    def _with_user_names(self, projects: List[Project]) -> List[Project]:
        """Fill ``user_name`` from the users collection in one query."""
        user_ids = list({project.user_id for project in projects if project.user_id})
        if not user_ids:
            return projects
        docs = self._users.find({UserFields.ID: {"$in": user_ids}}, {UserFields.ID: 1, UserFields.NAME: 1})
        names = {doc[UserFields.ID]: doc.get(UserFields.NAME) for doc in docs}
        for project in projects:
            project.user_name = names.get(project.user_id)
        return projects

    def get_by_id(self, entity_id: str) -> Optional[Project]:
        """Find a project by its ID, with the owner's name."""
        project = super().get_by_id(entity_id)
        if project is None:
            return None
        return self._with_user_names([project])[0]

    def get_all(self) -> List[Project]:
        return self._with_user_names(super().get_all())

    def find_by_name(self, name: str) -> List[Project]:
        """Find active projects whose name contains ``name`` (case-insensitive)."""
        pattern = re.escape(normalize_name(name))
        projects = self._find_many(
            {
                ProjectFields.IS_ACTIVE: True,
                ProjectFields.NAME_NORMALIZED: {"$regex": pattern},
            },
            sort_field=ProjectFields.NAME_NORMALIZED,
            direction=ASCENDING,
        )
        return self._with_user_names(projects)

    def find_by_status(self, status: str) -> List[Project]:
        """Find active projects with a status, newest first."""
        projects = self._find_many({ProjectFields.IS_ACTIVE: True, ProjectFields.STATUS: status})
        return self._with_user_names(projects)

    def name_exists(self, name: str, exclude_id: Optional[str] = None) -> bool:
        """Check if an active project already uses ``name``."""
        query: Dict[str, Any] = {
            ProjectFields.IS_ACTIVE: True,
            ProjectFields.NAME_NORMALIZED: normalize_name(name),
        }
        if exclude_id:
            query[ProjectFields.ID] = {"$ne": exclude_id}
        return self._matches(query)

    def get_active_projects(self) -> List[Project]:
        """Return active projects, newest first."""
        return self._with_user_names(self._find_many({ProjectFields.IS_ACTIVE: True}))

    def get_by_user_id(self, user_id: str) -> List[Project]:
        """Return active projects owned by a user, newest first."""
        projects = self._find_many({ProjectFields.IS_ACTIVE: True, ProjectFields.USER_ID: user_id})
        return self._with_user_names(projects)

    def user_exists(self, user_id: str) -> bool:
        """Check that the owning user exists and is active."""
        return self._users.count_documents({UserFields.ID: user_id, UserFields.IS_ACTIVE: True}, limit=1) > 0
