# Standard library imports
import os
import re
from typing import Final, Optional


_FALSY_PATTERN = re.compile(r"\s*(?:0|false|no|off)?\s*", re.IGNORECASE)


def parse_flag(value: Optional[str]) -> bool:
    """
    Interpret an environment flag.
    
    Unset, empty, "0", "false", "no" and "off" (any case, surrounding
    whitespace ignored) are false; anything else is true.
    """
    if value is None:
        return False
    return _FALSY_PATTERN.fullmatch(value) is None


class Settings:
    """
    Application settings loaded from environment variables.
    
    Store connection values are substituted into the MONGO_URL template
    by the connection bootstrap (see infrastructure.db.mongo_connection).
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_host: Final[str] = os.getenv("MONGO_HOST", "127.0.0.1")
        self.mongo_port: Final[str] = os.getenv("MONGO_PORT", "27017")
        self.mongo_user: Final[str] = os.getenv("MONGO_USER", "root")
        self.mongo_password: Final[str] = os.getenv("MONGO_PASSWORD", "root")
        self.mongo_dbname: Final[str] = os.getenv("MONGO_DBNAME", "admin")
        self.mongo_url_template: Final[str] = os.getenv(
            "MONGO_URL",
            "mongodb://<user>:<password>@<host>:<port>/<dbname>?authSource=admin",
        )
        self.mongo_collection: Final[str] = os.getenv("MONGO_COLLECTION", "users")
        
        # Runtime Configuration
        self.debug: Final[bool] = parse_flag(os.getenv("DEBUG"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.host: Final[str] = "0.0.0.0"
        self.port: Final[int] = 8002


# Cached settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (cached after first call)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
