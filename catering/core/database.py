# catering/core/database.py
from typing import Optional

from tortoise import Tortoise
from catering.core.config import settings

MODEL_MODULES = [
    "catering.models.user",
    "catering.models.category",
    "catering.models.ingredient",
    "catering.models.dish",
    "catering.models.customer",
    "catering.models.order",
]


def get_db_url() -> str:
    """
    DATABASE_URL in the scheme Tortoise-ORM expects.

    Tortoise-ORM uses 'postgres://' instead of 'postgresql://'.
    """
    db_url = settings.DATABASE_URL
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgres://", 1)
    return db_url


def tortoise_config(db_url: Optional[str] = None, with_migrations: bool = True) -> dict:
    """
    Tortoise config with a single "default" connection.

    Args:
        db_url: Connection URL, DATABASE_URL when omitted
        with_migrations: Register aerich's migration model
    """
    models = list(MODEL_MODULES)
    if with_migrations:
        models.append("aerich.models")
    return {
        "connections": {
            "default": db_url or get_db_url()
        },
        "apps": {
            "models": {
                "models": models,
                "default_connection": "default",
            }
        },
        "use_tz": True,
        "timezone": "UTC",
    }


TORTOISE_ORM = tortoise_config()


async def init_db() -> None:
    """
    Initialize database connection.

    Schema changes are applied with aerich before the service starts;
    generate_schemas only creates tables that do not exist yet.
    """
    await Tortoise.init(config=TORTOISE_ORM)
    await Tortoise.generate_schemas(safe=True)


async def close_db() -> None:
    await Tortoise.close_connections()
