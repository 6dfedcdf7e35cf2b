"""
Generic Repository Interface
============================

Abstract contract shared by all entity repositories.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from taskia.domain.models.base_entity import BaseEntity

EntityType = TypeVar("EntityType", bound=BaseEntity)


class Repository(ABC, Generic[EntityType]):
    """
    Abstract repository for entity persistence operations.

    ``add`` and ``update`` only stage the change in the unit of work the
    repository was built with; nothing reaches the store until
    ``UnitOfWork.commit()``.
    """

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        """
        Find an entity by its ID.

        Args:
            entity_id: Unique entity identifier

        Returns:
            Entity if found (active or not), None otherwise
        """
        pass

    @abstractmethod
    def get_all(self) -> List[EntityType]:
        """Return every entity, newest first."""
        pass

    @abstractmethod
    def add(self, entity: EntityType) -> EntityType:
        """Stage a new entity for insertion."""
        pass

    @abstractmethod
    def update(self, entity: EntityType) -> EntityType:
        """Stage an existing entity for replacement."""
        pass

    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        """Check if an entity with the given ID exists."""
        pass
