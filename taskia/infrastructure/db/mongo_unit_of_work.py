"""
MongoDB Unit of Work
====================

Concrete implementation of UnitOfWork for MongoDB.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pymongo.client_session import ClientSession
from pymongo.collection import Collection

from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)

INSERT = "insert"
REPLACE = "replace"


@dataclass
class PendingWrite:
    """One staged write."""
    kind: str
    collection: Collection
    document: Dict[str, Any]
    filter: Optional[Dict[str, Any]] = None


class MongoUnitOfWork(UnitOfWork):
    """
    MongoDB implementation of UnitOfWork.

    Writes are kept in memory until ``commit``. With transactions enabled
    they are applied inside a session transaction (replica set required);
    otherwise they are applied in staging order.
    """

    def __init__(self, mongo_client: MongoClientManager, use_transactions: bool = False):
        self._client = mongo_client
        self._use_transactions = use_transactions
        self._pending: List[PendingWrite] = []

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._pending)

    def register_new(self, collection: Collection, document: Dict[str, Any]) -> None:
        """Stage an insert."""
        self._pending.append(PendingWrite(INSERT, collection, dict(document)))

    def register_dirty(self, collection: Collection, filter: Dict[str, Any], document: Dict[str, Any]) -> None:
        """Stage a full-document replacement."""
        self._pending.append(PendingWrite(REPLACE, collection, dict(document), dict(filter)))

    def commit(self) -> int:
        """Apply all staged writes."""
        pending, self._pending = self._pending, []
        if not pending:
            return 0

        if self._use_transactions:
            with self._client.start_session() as session:
                session.with_transaction(lambda s: self._apply(pending, s))
        else:
            self._apply(pending, None)

        logger.debug(f"Committed {len(pending)} change(s)")
        return len(pending)

    def rollback(self) -> None:
        """Discard all staged writes."""
        if self._pending:
            logger.debug(f"Discarding {len(self._pending)} uncommitted change(s)")
        self._pending = []

    @staticmethod
    def _apply(pending: List[PendingWrite], session: Optional[ClientSession]) -> None:
        kwargs = {"session": session} if session is not None else {}
        for write in pending:
            if write.kind == INSERT:
                write.collection.insert_one(dict(write.document), **kwargs)
            else:
                result = write.collection.replace_one(write.filter, write.document, **kwargs)
                if result.matched_count == 0:
                    raise ValueError(f"Document {write.filter} not found in '{write.collection.name}'")
