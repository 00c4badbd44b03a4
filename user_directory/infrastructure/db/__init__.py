from .mongo_connection import build_mongo_uri, connect_to_store, get_user_collection
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "build_mongo_uri",
    "connect_to_store",
    "get_user_collection",
    "MongoUserRepository",
]
