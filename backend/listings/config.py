"""Application settings

All values come from the environment or a .env file at the project root.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

from listings.services.query.order_compiler import FieldlessOrderPolicy

# project root: parent of backend/
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Environment-backed settings"""

    # DB
    DATABASE_URL: str = f"sqlite:///{_PROJECT_ROOT / 'listings.db'}"
    DB_ECHO: bool = False           # SQLAlchemy SQL logging

    # Demo data
    SEED_ON_STARTUP: bool = True
    SEED_ROW_COUNT: int = 100       # rows per table

    # Ordering: "default" applies a bare direction to the start time column,
    # "ignore" drops an order request that names no field
    ORDER_WITHOUT_FIELD: FieldlessOrderPolicy = FieldlessOrderPolicy.DEFAULT

    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": str(_PROJECT_ROOT / ".env"),
        "env_file_encoding": "utf-8",
    }


# singleton
settings = Settings()
