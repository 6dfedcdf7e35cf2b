"""
Base Entity
===========

Common identity, timestamps and soft-delete flag shared by all entities.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from taskia.utils.datetime_utils import now


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


@dataclass
class BaseEntity:
    """
    Base domain entity.

    Identity and creation time are assigned at construction.
    ``updated_at`` stays empty until the first mutation.
    """
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: Optional[datetime] = None
    is_active: bool = True

    def deactivate(self) -> None:
        self.is_active = False

    def soft_delete(self) -> None:
        """Deactivate the entity without removing its record."""
        self.deactivate()
        self.touch()

    def touch(self) -> None:
        """Stamp the update time."""
        self.updated_at = now()
