from .mongo_connection import MongoClientManager, close_mongo_client, get_mongo_client
from .mongo_unit_of_work import MongoUnitOfWork
from .mongo_user_repository import MongoUserRepository
from .mongo_project_repository import MongoProjectRepository
from .indexes import ensure_indexes

__all__ = [
    "MongoClientManager",
    "get_mongo_client",
    "close_mongo_client",
    "MongoUnitOfWork",
    "MongoUserRepository",
    "MongoProjectRepository",
    "ensure_indexes",
]
