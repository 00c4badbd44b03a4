# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    ServiceProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    
    Built once at startup around an already connected database and handed
    to both front-ends through ``app.state``.
    
    Registration order is important:
    1. Database handles (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (ServiceProvider) - depend on repositories
    """
    
    def __init__(self, database: AsyncIOMotorDatabase, settings: Settings) -> None:
        super().__init__()
        self.database = database
        self.settings = settings
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self, self.database, self.settings)
        RepositoryProvider.register(self)
        ServiceProvider.register(self)
