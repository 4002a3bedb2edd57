from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.orm import Session

from todo_api.models.base import SessionLocal
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.services.todo_service import TodoService

async def get_db() -> AsyncGenerator[Session, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

async def get_todo_repository(db: Annotated[Session, Depends(get_db)]) -> TodoRepository:
    return TodoRepository(db)

async def get_todo_service(
    repository: Annotated[TodoRepository, Depends(get_todo_repository)]
) -> TodoService:
    return TodoService(repository)
