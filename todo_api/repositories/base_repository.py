from operator import eq
from typing import Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
import logging

from todo_api.models.base import Base

T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Generic CRUD store for a mapped entity with an integer ``id`` column."""

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        entity = self.db.query(self.model).filter(eq(self.model.id, entity_id)).first()

        if not entity:
            logger.debug(f"{self.model.__name__} with id {entity_id} not found")

        return entity

    async def get_all(self) -> List[T]:
        try:
            return self.db.query(self.model).order_by(self.model.id).all()
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} entities: {str(e)}")
            raise

    async def save(self, entity: T) -> T:
        """Insert ``entity`` when it has no id, otherwise overwrite the row with that id."""
        try:
            if entity.id is None:
                self.db.add(entity)
            else:
                entity = self.db.merge(entity)
            self.db.commit()
            self.db.refresh(entity)

            logger.info(f"Saved {self.model.__name__} with id {entity.id}")
            return entity
        except Exception as e:
            logger.error(f"Error saving {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise

    async def delete_by_id(self, entity_id: int) -> None:
        try:
            deleted = self.db.query(self.model).filter(eq(self.model.id, entity_id)).delete()
            self.db.commit()

            if deleted:
                logger.info(f"Deleted {self.model.__name__} with id {entity_id}")
            else:
                logger.debug(f"No {self.model.__name__} with id {entity_id} to delete")
        except Exception as e:
            logger.error(f"Error deleting {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise
