import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from todo_api.models.base import Base, engine as default_engine

# Entities register themselves on Base.metadata when imported
from todo_api.models.entities import todo  # noqa: F401

logger = logging.getLogger(__name__)

def create_tables(bind: Engine | None = None) -> list[str]:
    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)

    inspector = inspect(bind)
    tables = inspector.get_table_names()
    logger.info(f"Tables in database: {tables}")
    return tables
