from typing import TYPE_CHECKING

from motor.motor_asyncio import AsyncIOMotorDatabase

from ...core.config import Settings
from ...infrastructure.db.mongo_connection import get_user_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Database handle provider - the only place collections are registered"""
    
    @staticmethod
    def register(container: "BaseContainer", database: AsyncIOMotorDatabase, settings: Settings) -> None:
        """
        Register the connected database and its collections as singletons.
        """
        container.register_singleton("database", database)
        container.register_singleton("user_collection", get_user_collection(database, settings))
