# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorDatabase

# Local application imports
from . import __version__
from .api import create_graphql_app, create_graphql_router, register_error_handlers, users_router
from .core.config import Settings, get_settings
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import connect_to_store, get_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Connects to MongoDB (unless a database was injected) before any request
    is served; a connection failure propagates and aborts startup. The DI
    container built here is the only holder of the store handle.
    """
    settings: Settings = app.state.settings
    database: Optional[AsyncIOMotorDatabase] = app.state.database
    
    client = None
    if database is None:
        client = await connect_to_store(settings)
        database = get_database(client, settings)
    
    app.state.container = DIContainer(database=database, settings=settings)
    logger.info(f"User directory ready (debug={settings.debug})")
    
    yield
    
    app.state.container = None
    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")
    
    logger.info("Application shutdown complete")


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[AsyncIOMotorDatabase] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    Args:
        settings: Explicit settings; read from the environment when omitted
        database: Already connected database; when omitted the lifespan
            connects using the settings
            
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    if settings is None:
        settings = get_settings()
    
    application = FastAPI(
        title="User Directory API",
        version=__version__,
        description="User directory with a follows graph over REST and GraphQL",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.database = database
    application.state.container = None
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(users_router, prefix="/users")
    graphql_app = create_graphql_app(settings)
    application.include_router(create_graphql_router(graphql_app), prefix="/graphql")
    
    return application


# Create application instance
app = create_application()
