"""Allowed values for Project.status"""
from typing import Tuple


class ProjectStatus:
    """Project status constants"""
    DRAFT = "Draft"
    ACTIVE = "Active"
    PAUSED = "Paused"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    INACTIVE = "Inactive"  # only reachable through the status toggle

    # Every status a stored project may carry
    ALL: Tuple[str, ...] = (DRAFT, ACTIVE, PAUSED, COMPLETED, CANCELLED, INACTIVE)

    # Statuses a client may send when creating or updating a project
    REQUESTABLE: Tuple[str, ...] = (DRAFT, ACTIVE, PAUSED, COMPLETED, CANCELLED)

    @classmethod
    def is_valid(cls, status: str) -> bool:
        return status in cls.ALL
