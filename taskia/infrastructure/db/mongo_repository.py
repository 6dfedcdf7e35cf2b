"""
MongoDB Base Repository
=======================

Generic MongoDB implementation of the Repository interface.
"""
from abc import abstractmethod
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from taskia.domain.repositories.repository import EntityType, Repository
from taskia.infrastructure.db.mongo_connection import MongoClientManager
from taskia.infrastructure.db.mongo_unit_of_work import MongoUnitOfWork

ID_FIELD = "id"
CREATED_AT_FIELD = "created_at"


class MongoRepository(Repository[EntityType]):
    """
    Shared MongoDB plumbing for entity repositories.

    Reads go straight to the collection; writes are staged in the unit of
    work. Subclasses provide the document <-> entity mapping.
    """

    def __init__(self, mongo_client: MongoClientManager, unit_of_work: MongoUnitOfWork, collection_name: str):
        """Initialize repository with MongoDB client and the request's unit of work."""
        self._client = mongo_client
        self._unit_of_work = unit_of_work
        self._collection = mongo_client.get_collection(collection_name)

    @abstractmethod
    def _to_entity(self, doc: Dict[str, Any]) -> EntityType:
        """Convert MongoDB document to entity."""
        pass

    @abstractmethod
    def _to_document(self, entity: EntityType) -> Dict[str, Any]:
        """Convert entity to MongoDB document."""
        pass

    def _find_one(self, query: Dict[str, Any]) -> Optional[EntityType]:
        doc = self._collection.find_one(query)
        if not doc:
            return None
        return self._to_entity(doc)

    def _find_many(self, query: Dict[str, Any], sort_field: str = CREATED_AT_FIELD, direction: int = DESCENDING) -> List[EntityType]:
        docs = self._collection.find(query).sort(sort_field, direction)
        return [self._to_entity(doc) for doc in docs]

    def _matches(self, query: Dict[str, Any]) -> bool:
        return self._collection.count_documents(query, limit=1) > 0

    def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        """Find an entity by its ID."""
        return self._find_one({ID_FIELD: entity_id})

    def get_all(self) -> List[EntityType]:
        """Return every entity, newest first."""
        return self._find_many({})

    def add(self, entity: EntityType) -> EntityType:
        """Stage a new entity for insertion."""
        self._unit_of_work.register_new(self._collection, self._to_document(entity))
        return entity

    def update(self, entity: EntityType) -> EntityType:
        """Stage an existing entity for replacement."""
        self._unit_of_work.register_dirty(self._collection, {ID_FIELD: entity.id}, self._to_document(entity))
        return entity

    def exists(self, entity_id: str) -> bool:
        """Check if an entity exists."""
        return self._matches({ID_FIELD: entity_id})
