"""
Unit of Work Interface
======================

Collects the writes of one request and applies them together.
"""
from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Abstract unit of work.

    Repositories stage inserts and replacements here; ``commit`` applies
    them and ``rollback`` discards them. Used as a context manager, any
    change still pending on exit is discarded.
    """

    @abstractmethod
    def commit(self) -> int:
        """
        Apply all staged changes.

        Returns:
            Number of changes applied
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard all staged changes."""
        pass

    @property
    @abstractmethod
    def has_pending_changes(self) -> bool:
        pass

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.rollback()
