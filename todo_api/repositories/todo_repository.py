from sqlalchemy.orm import Session

from todo_api.models.entities.todo import Todo
from todo_api.repositories.base_repository import BaseRepository

class TodoRepository(BaseRepository[Todo]):
    def __init__(self, db: Session):
        super().__init__(db, Todo)
