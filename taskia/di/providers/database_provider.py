from typing import TYPE_CHECKING, Optional

from ...core.config import Settings, get_settings
from ...infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(
        container: "BaseContainer",
        mongo_client: Optional[MongoClientManager] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Register settings and the MongoDB client manager as singletons.
        The process-wide client is used unless one is passed in.
        """
        container.register_singleton(Settings, settings or get_settings())
        container.register_singleton("mongo_client", mongo_client or get_mongo_client())
